"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, API responses)
    - Create payloads require every field; update payloads accept any subset

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - extra="forbid" on requests: unknown keys are malformed payloads
"""
