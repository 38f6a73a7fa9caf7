"""FastAPI Dependencies — hand each request the shared clients held on app.state.

Invariants:
    - Clients are read from app.state, set once in the lifespan; never mutated per request
    - A missing client yields None; the services decide how to fail
    - Caller identity comes from the configured header, "" when absent
"""

from fastapi import Depends, Request

from beerpong.config import get_settings
from beerpong.core.domain_types import UserId
from beerpong.core.repository_protocols import (
    PolicyDecisionClient, ThrowCache, ThrowEventPublisher,
)
from beerpong.services.authorize_cup import CupAuthorizer
from beerpong.services.submit_throw import ThrowService


def get_cache(request: Request) -> ThrowCache | None:
    return getattr(request.app.state, "cache", None)


def get_policy_client(request: Request) -> PolicyDecisionClient | None:
    return getattr(request.app.state, "policy_client", None)


def get_publisher(request: Request) -> ThrowEventPublisher | None:
    return getattr(request.app.state, "publisher", None)


def get_caller_id(request: Request) -> UserId:
    """Caller identity for permission checks."""
    header = get_settings().identity_header
    return UserId(request.headers.get(header, ""))


def get_throw_service(
    cache: ThrowCache | None = Depends(get_cache),
    publisher: ThrowEventPublisher | None = Depends(get_publisher),
) -> ThrowService:
    return ThrowService(cache, publisher)


def get_cup_authorizer(
    policy_client: PolicyDecisionClient | None = Depends(get_policy_client),
) -> CupAuthorizer:
    settings = get_settings()
    return CupAuthorizer(
        policy_client,
        action=settings.cup_action,
        role=settings.default_role,
        tenant=settings.policy_tenant,
        timeout_seconds=settings.policy_timeout_seconds,
    )
