"""Core Layer — pure domain logic, no IO, no async, no network clients.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services do the IO
      around these pure rules
"""
