"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response payloads)

Design Decisions:
    - Separate from core domain types: schemas are API contracts, domain types
      are what services pass around
"""
