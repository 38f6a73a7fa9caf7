"""Throw Event Publisher — downstream hand-off point for accepted throws.

Invariants:
    - publish() is called only after the throw record was written
    - LoggingEventPublisher has no side effects beyond one INFO log line

Design Decisions:
    - No broker integration: a message-bus publisher would implement the same
      ThrowEventPublisher protocol and be swapped in via app.state
"""

import logging

from beerpong.core.domain_types import ThrowEvent

logger = logging.getLogger(__name__)


class LoggingEventPublisher:
    """ThrowEventPublisher that records events in the application log."""

    async def publish(self, event: ThrowEvent) -> None:
        logger.info(
            f"Ball thrown by {event.user_id} at {event.target}",
            extra={
                "user_id": event.user_id,
                "cup_id": event.target,
                "cache_key": event.cache_key,
                "action": event.action,
            },
        )
