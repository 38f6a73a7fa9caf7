"""Boundary Protocols — contracts between core/services and the infrastructure shell.

Invariants:
    - Services NEVER import concrete clients: they receive these Protocols
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection (app.state)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do network IO
"""

from datetime import timedelta
from typing import Protocol

from beerpong.core.domain_types import Resource, Subject, ThrowEvent


class ThrowCache(Protocol):
    """Ephemeral key-value store with per-key expiry."""
    async def set(self, key: str, value: str, ttl: timedelta) -> None: ...
    async def ping(self) -> bool: ...


class PolicyDecisionClient(Protocol):
    """External policy-decision point."""
    async def check(
        self, subject: Subject, action: str, resource: Resource,
        *, timeout: float,
    ) -> bool: ...


class ThrowEventPublisher(Protocol):
    """Downstream sink for accepted throws."""
    async def publish(self, event: ThrowEvent) -> None: ...
