"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and CupId wrap str; an empty value means "not supplied"
    - THROW_TTL (5 minutes) is the only teardown mechanism for throw records
    - Subject/Resource/CupQuery are frozen: built once per request, never mutated

Design Decisions:
    - NewType over dataclass wrappers for identifiers: zero runtime cost
    - Frozen dataclasses for the authorization query: hashable, comparable in tests
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
CupId = NewType("CupId", str)


# ─── Throw Records ───────────────────────────────────────────────

THROW_KEY_PREFIX = "ball:"
THROW_TTL = timedelta(minutes=5)


@dataclass(frozen=True)
class ThrowRecord:
    """Cache entry produced from an accepted throw. Value is the target cup."""
    key: str
    target: str
    ttl: timedelta = THROW_TTL


@dataclass(frozen=True)
class ThrowEvent:
    """Emitted after a throw record is written."""
    user_id: UserId
    role: str
    action: str
    target: str
    cache_key: str
    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


# ─── Authorization Query ─────────────────────────────────────────

@dataclass(frozen=True)
class AssignedRole:
    role: str
    tenant: str


@dataclass(frozen=True)
class Subject:
    """Who is asking. `key` may be empty when no identity was supplied."""
    key: UserId
    roles: tuple[AssignedRole, ...] = ()


@dataclass(frozen=True)
class Resource:
    """What is being acted on. The cup id is the resource type."""
    type: CupId
    tenant: str


@dataclass(frozen=True)
class CupQuery:
    """One permission question: may `subject` perform `action` on `resource`?"""
    subject: Subject
    action: str
    resource: Resource

    @property
    def cup_id(self) -> CupId:
        return self.resource.type

    @property
    def user_id(self) -> UserId:
        return self.subject.key
