"""Throw Enforcement — required-field rule and cache key derivation.

Invariants:
    - user_id, action, target must be non-empty; role is accepted unchecked
    - Missing fields reported in declaration order (user_id, action, target)
    - Cache key is "ball:" + user_id: one active throw per user key-space

Design Decisions:
    - Empty means "" exactly: whitespace-only values are kept as given
"""

from beerpong.core.domain_types import (
    THROW_KEY_PREFIX, THROW_TTL, ThrowRecord, UserId,
)


REQUIRED_THROW_FIELDS: tuple[str, ...] = ("user_id", "action", "target")


def missing_throw_fields(fields: dict[str, str]) -> list[str]:
    """Return names of required fields that are empty. Pure."""
    return [name for name in REQUIRED_THROW_FIELDS if not fields.get(name)]


def throw_key(user_id: UserId) -> str:
    return f"{THROW_KEY_PREFIX}{user_id}"


def build_throw_record(user_id: UserId, target: str) -> ThrowRecord:
    """Cache entry for an accepted throw, expiring after THROW_TTL."""
    return ThrowRecord(key=throw_key(user_id), target=target, ttl=THROW_TTL)
