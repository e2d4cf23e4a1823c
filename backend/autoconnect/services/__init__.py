"""Service Layer - business operations behind the route handlers.

Invariants:
    - Services take their collaborators (DB session, adapters) as arguments
    - Services raise core/errors.py types; they never build HTTP responses
"""
