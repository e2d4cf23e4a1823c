"""AutoConnect Backend Package - marketplace REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
