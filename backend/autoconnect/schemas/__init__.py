"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response payloads)
    - Enum fields use core/domain_types.py so unknown values fail at deserialization

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
