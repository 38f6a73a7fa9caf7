"""Throw Submission — parse, validate, and record a throw in the ephemeral cache.

Invariants:
    - Parse and required-field checks run before any external call
    - Absent cache handle → CacheUnavailableError, no write, no reconnect
    - At most one cache write per call: key "ball:<user_id>", value target, TTL 5 minutes
    - Write failure → CacheWriteError, no retry, event not published
    - Event published only after a successful write

Design Decisions:
    - Takes the raw body: parse failures and missing fields get distinct errors
    - Collaborators injected via constructor (no module-level client globals)
"""

import logging

from pydantic import ValidationError

from beerpong.core.domain_types import ThrowEvent, ThrowRecord, UserId
from beerpong.core.enforce_throw import build_throw_record, missing_throw_fields
from beerpong.core.errors import (
    CacheUnavailableError, ErrorContext, InvalidPayloadError, MissingFieldsError,
)
from beerpong.core.repository_protocols import ThrowCache, ThrowEventPublisher
from beerpong.schemas.throw import ThrowRequest

logger = logging.getLogger(__name__)


def parse_throw_request(raw_body: bytes) -> ThrowRequest:
    """Parse and validate a throw body. Raises 400-level errors only."""
    logger.debug(f"Raw throw body: {raw_body!r}")
    try:
        req = ThrowRequest.model_validate_json(raw_body)
    except ValidationError as e:
        logger.warning(f"Invalid throw payload: {e.error_count()} error(s)")
        raise InvalidPayloadError()

    missing = missing_throw_fields(req.model_dump())
    if missing:
        raise MissingFieldsError(
            missing, ErrorContext(user_id=req.user_id or None),
        )
    return req


class ThrowService:
    """Records accepted throws; one instance per request."""

    def __init__(
        self,
        cache: ThrowCache | None,
        publisher: ThrowEventPublisher | None = None,
    ):
        self.cache = cache
        self.publisher = publisher

    async def submit(self, raw_body: bytes) -> ThrowRecord:
        """Validate the body, write the throw record, publish the event."""
        req = parse_throw_request(raw_body)
        user_id = UserId(req.user_id)

        if self.cache is None:
            logger.error(
                "Cache client is not initialized",
                extra={"user_id": user_id, "error_code": "CACHE_UNAVAILABLE"},
            )
            raise CacheUnavailableError(ErrorContext(user_id=user_id))

        logger.info(
            "Recording throw",
            extra={"user_id": user_id, "action": req.action, "cup_id": req.target},
        )
        record = build_throw_record(user_id, req.target)
        await self.cache.set(record.key, record.target, record.ttl)
        logger.info(
            f"Cache SET {record.key} -> {record.target}",
            extra={
                "cache_key": record.key,
                "ttl_seconds": int(record.ttl.total_seconds()),
            },
        )

        if self.publisher is not None:
            await self.publisher.publish(ThrowEvent(
                user_id=user_id, role=req.role, action=req.action,
                target=req.target, cache_key=record.key,
            ))
        return record
