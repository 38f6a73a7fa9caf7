"""PermitPolicyClient — PDP request shape and reply/error mapping.

Design Decisions:
    - httpx.MockTransport stands in for the PDP: real request encoding, no network
"""

import asyncio
import json

import httpx
import pytest

from beerpong.core.authorization_query import build_cup_query
from beerpong.core.domain_types import CupId, UserId
from beerpong.core.errors import PolicyCheckError
from beerpong.infrastructure.policy_client import PermitPolicyClient, build_check_payload

PDP = "https://pdp.test"


def _query(user_id: str = "alice"):
    return build_cup_query(
        CupId("cup3"), UserId(user_id), action="beer", role="user", tenant="default",
    )


def _client(handler) -> PermitPolicyClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PermitPolicyClient("secret-key", PDP + "/", http_client=http)


async def _check(client: PermitPolicyClient, timeout: float = 10.0) -> bool:
    q = _query()
    return await client.check(q.subject, q.action, q.resource, timeout=timeout)


def test_payload_shape():
    q = _query()
    assert build_check_payload(q.subject, q.action, q.resource) == {
        "user": {"key": "alice", "roles": [{"role": "user", "tenant": "default"}]},
        "action": "beer",
        "resource": {"type": "cup3", "tenant": "default"},
        "context": {},
    }


async def test_request_goes_to_allowed_with_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"allow": True})

    assert await _check(_client(handler)) is True
    assert seen["url"] == "https://pdp.test/allowed"
    assert seen["auth"] == "Bearer secret-key"
    assert seen["body"]["resource"]["type"] == "cup3"


async def test_allow_false_is_denial():
    client = _client(lambda r: httpx.Response(200, json={"allow": False}))
    assert await _check(client) is False


@pytest.mark.parametrize("reply", [{}, {"allow": "yes"}, {"allow": 1}, [True]])
async def test_reply_without_boolean_allow_is_error(reply):
    client = _client(lambda r: httpx.Response(200, json=reply))
    with pytest.raises(PolicyCheckError) as exc:
        await _check(client)
    assert exc.value.error_type == "malformed_reply"


async def test_non_json_reply_is_error():
    client = _client(lambda r: httpx.Response(200, content=b"<html>"))
    with pytest.raises(PolicyCheckError) as exc:
        await _check(client)
    assert exc.value.error_type == "malformed_reply"


@pytest.mark.parametrize("status", [401, 403, 500, 503])
async def test_non_2xx_is_error(status):
    client = _client(lambda r: httpx.Response(status, json={"detail": "nope"}))
    with pytest.raises(PolicyCheckError) as exc:
        await _check(client)
    assert exc.value.error_type == "status_error"


async def test_connection_error_is_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(PolicyCheckError) as exc:
        await _check(_client(handler))
    assert exc.value.error_type == "connection_error"


async def test_transport_timeout_is_timeout():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(PolicyCheckError) as exc:
        await _check(_client(handler))
    assert exc.value.error_type == "timeout"


async def test_deadline_bounds_whole_call():
    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200, json={"allow": True})

    with pytest.raises(PolicyCheckError) as exc:
        await _check(_client(handler), timeout=0.05)
    assert exc.value.error_type == "timeout"


async def test_cancelling_caller_abandons_outbound_call():
    started = asyncio.Event()
    outcome = {"abandoned": False, "completed": False}

    async def handler(request):
        started.set()
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            outcome["abandoned"] = True
            raise
        outcome["completed"] = True
        return httpx.Response(200, json={"allow": True})

    task = asyncio.create_task(_check(_client(handler)))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert outcome == {"abandoned": True, "completed": False}


async def test_close_closes_http_client():
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    client = PermitPolicyClient("k", PDP, http_client=http)
    await client.close()
    assert http.is_closed
