"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure imports only domain types and errors from core/
    - All external calls bounded by timeouts and mapped to core errors

Design Decisions:
    - Thin wrappers over raw clients (redis, httpx): services depend on
      core.repository_protocols, never on these classes
"""
