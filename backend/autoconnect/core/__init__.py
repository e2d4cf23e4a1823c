"""Core Layer - pure domain types, error taxonomy and request checks.

Invariants:
    - Nothing in core/ performs I/O
    - Core never imports from api/, services/ or infrastructure/
"""
