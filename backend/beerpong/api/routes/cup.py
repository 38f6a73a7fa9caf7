"""Cup Route — GET /cup/{cup_id} checks whether the caller may act on a cup.

Invariants:
    - 200 {"message": "Access granted!", "cup": cup_id} when permitted
    - 403 when denied, 500 when the policy client is absent or the check fails
"""

from fastapi import APIRouter, Depends

from beerpong.api.dependencies import get_caller_id, get_cup_authorizer
from beerpong.core.domain_types import CupId, UserId
from beerpong.schemas.cup import CupAccessGranted
from beerpong.services.authorize_cup import CupAuthorizer

router = APIRouter(tags=["cup"])


@router.get("/cup/{cup_id}", response_model=CupAccessGranted)
async def check_cup(
    cup_id: str,
    user_id: UserId = Depends(get_caller_id),
    authorizer: CupAuthorizer = Depends(get_cup_authorizer),
):
    """Authorize the caller against one cup."""
    query = await authorizer.authorize(CupId(cup_id), user_id)
    return CupAccessGranted(cup=query.cup_id)
