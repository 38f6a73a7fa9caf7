"""Authorization Query — builds the subject/action/resource triple for a cup check.

Invariants:
    - Subject always carries exactly one role (the configured default)
    - Resource type is the cup id from the path
    - Action is a fixed permission name, never taken from the request
"""

from beerpong.core.domain_types import (
    AssignedRole, CupId, CupQuery, Resource, Subject, UserId,
)


def build_subject(user_id: UserId, role: str, tenant: str) -> Subject:
    return Subject(key=user_id, roles=(AssignedRole(role=role, tenant=tenant),))


def build_resource(cup_id: CupId, tenant: str) -> Resource:
    return Resource(type=cup_id, tenant=tenant)


def build_cup_query(
    cup_id: CupId, user_id: UserId, *, action: str, role: str, tenant: str,
) -> CupQuery:
    """Assemble the permission question for one cup request. Pure."""
    return CupQuery(
        subject=build_subject(user_id, role, tenant),
        action=action,
        resource=build_resource(cup_id, tenant),
    )
