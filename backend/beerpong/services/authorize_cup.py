"""Cup Authorization — asks the policy-decision point whether the caller may act on a cup.

Invariants:
    - Absent policy client → PolicyClientUnavailableError, returned before any query is built
    - Subject = caller identity + default role; resource = cup id; action fixed
    - Each check carries the configured deadline (default 10s)
    - Check error → PolicyCheckError (500); denial → AccessDeniedError (403)
    - Errors never grant access
"""

import logging

from beerpong.core.authorization_query import build_cup_query
from beerpong.core.domain_types import CupId, CupQuery, UserId
from beerpong.core.errors import (
    AccessDeniedError, ErrorContext, PolicyCheckError, PolicyClientUnavailableError,
)
from beerpong.core.repository_protocols import PolicyDecisionClient

logger = logging.getLogger(__name__)


class CupAuthorizer:
    """Checks cup permissions; one instance per request."""

    def __init__(
        self,
        policy_client: PolicyDecisionClient | None,
        *,
        action: str = "beer",
        role: str = "user",
        tenant: str = "default",
        timeout_seconds: float = 10.0,
    ):
        self.policy_client = policy_client
        self.action = action
        self.role = role
        self.tenant = tenant
        self.timeout_seconds = timeout_seconds

    async def authorize(self, cup_id: CupId, user_id: UserId) -> CupQuery:
        """Return the granted query, or raise if not permitted."""
        ctx = ErrorContext(user_id=user_id or None, cup_id=cup_id)
        if self.policy_client is None:
            logger.error(
                "Policy client is not initialized",
                extra={"cup_id": cup_id, "error_code": "POLICY_CLIENT_UNAVAILABLE"},
            )
            raise PolicyClientUnavailableError(ctx)

        query = build_cup_query(
            cup_id, user_id,
            action=self.action, role=self.role, tenant=self.tenant,
        )
        try:
            allowed = await self.policy_client.check(
                query.subject, query.action, query.resource,
                timeout=self.timeout_seconds,
            )
        except PolicyCheckError as e:
            e.context.user_id = ctx.user_id
            e.context.cup_id = ctx.cup_id
            raise

        logger.info(
            f"Permission check for cup {cup_id}: {'allowed' if allowed else 'denied'}",
            extra={
                "user_id": user_id, "cup_id": cup_id,
                "action": query.action, "allowed": allowed,
            },
        )
        if not allowed:
            raise AccessDeniedError(cup_id, ctx)
        return query
