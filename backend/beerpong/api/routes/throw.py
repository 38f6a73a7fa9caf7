"""Throw Route — POST /throw records a ball thrown at a cup.

Invariants:
    - 202 {"message": "Ball thrown!"} on success
    - 400 unreadable/invalid body or missing fields, 503 cache absent, 500 write failure
    - Route reads the raw body and delegates everything else to ThrowService
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from starlette.requests import ClientDisconnect

from beerpong.api.dependencies import get_throw_service
from beerpong.core.errors import BodyReadError
from beerpong.schemas.throw import ThrowAccepted
from beerpong.services.submit_throw import ThrowService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["throw"])


@router.post(
    "/throw", response_model=ThrowAccepted,
    status_code=status.HTTP_202_ACCEPTED,
)
async def throw_ball(
    request: Request, service: ThrowService = Depends(get_throw_service),
):
    """Submit a throw."""
    try:
        body = await request.body()
    except ClientDisconnect:
        logger.warning("Client disconnected while sending throw body")
        raise BodyReadError()
    await service.submit(body)
    return ThrowAccepted()
