"""Policy Decision Client — asks a Permit.io-compatible PDP whether a subject may act on a resource.

Invariants:
    - Every check is bounded by the caller's deadline (whole call, not per phase)
    - Cancellation of the calling task abandons the outbound request
    - Transport errors, timeouts, non-2xx and malformed replies → PolicyCheckError
    - Only a literal boolean `allow` in the reply decides; nothing else grants access
    - No retries: a failed check is surfaced to the caller

Design Decisions:
    - httpx.AsyncClient shared across requests, closed in the lifespan
    - Bearer token sent per request so an injected client needs no preset headers
"""

import asyncio
import logging

import httpx

from beerpong.core.domain_types import Resource, Subject
from beerpong.core.errors import PolicyCheckError

logger = logging.getLogger(__name__)


def build_check_payload(subject: Subject, action: str, resource: Resource) -> dict:
    """PDP /allowed request body."""
    return {
        "user": {
            "key": subject.key,
            "roles": [
                {"role": r.role, "tenant": r.tenant} for r in subject.roles
            ],
        },
        "action": action,
        "resource": {"type": resource.type, "tenant": resource.tenant},
        "context": {},
    }


class PermitPolicyClient:
    """PolicyDecisionClient over the PDP HTTP API."""

    def __init__(
        self,
        api_key: str,
        pdp_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.pdp_url = pdp_url.rstrip("/")
        self._headers = {"Authorization": f"Bearer {api_key}"}
        self._client = http_client or httpx.AsyncClient()

    async def check(
        self, subject: Subject, action: str, resource: Resource,
        *, timeout: float,
    ) -> bool:
        """Return True when the PDP permits `action` on `resource`."""
        payload = build_check_payload(subject, action, resource)
        try:
            response = await asyncio.wait_for(
                self._client.post(
                    f"{self.pdp_url}/allowed",
                    json=payload,
                    headers=self._headers,
                    timeout=timeout,
                ),
                timeout=timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.error(
                f"PDP check timed out after {timeout}s",
                extra={"cup_id": resource.type, "action": action},
            )
            raise PolicyCheckError(f"no reply within {timeout}s", "timeout")
        except httpx.HTTPStatusError as e:
            raise PolicyCheckError(
                f"PDP returned {e.response.status_code}", "status_error",
            )
        except httpx.HTTPError as e:
            raise PolicyCheckError(str(e), "connection_error")
        except ValueError:
            raise PolicyCheckError("PDP reply is not JSON", "malformed_reply")

        allowed = data.get("allow") if isinstance(data, dict) else None
        if not isinstance(allowed, bool):
            raise PolicyCheckError(
                "PDP reply has no boolean 'allow'", "malformed_reply",
            )
        return allowed

    async def close(self) -> None:
        await self._client.aclose()
