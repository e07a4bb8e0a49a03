import json

import httpx
import pytest

from tgraw.api import Api, HttpxConnector
from tgraw.errors import ApiError, TransportError
from tgraw.refs import ChatId, InlineQueryId, UserId
from tgraw.requests import answer_inline_query, get_chat, get_me
from tgraw.types import PrivateChat, User


@pytest.mark.anyio
async def test_send_posts_envelope_and_decodes() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            json={
                "ok": True,
                "result": {"id": 7, "type": "private", "first_name": "Ada"},
            },
            request=request,
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = Api("123:abc", client=client)
        chat = await api.send(get_chat(UserId(7)))

    assert isinstance(chat, PrivateChat)
    assert chat.chat_id() == ChatId(7)
    assert len(captured) == 1
    sent = captured[0]
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.telegram.org/bot123:abc/getChat"
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == {"chat_id": 7}


@pytest.mark.anyio
async def test_custom_api_url() -> None:
    urls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(
            200,
            json={"ok": True, "result": {"id": 1, "is_bot": True, "first_name": "b"}},
            request=request,
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = Api("1:x", api_url="http://localhost:8081/", client=client)
        me = await api.send(get_me())

    assert isinstance(me, User)
    assert urls == ["http://localhost:8081/bot1:x/getMe"]


@pytest.mark.anyio
async def test_unit_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True, "result": True}, request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = Api("1:x", client=client)
        assert await api.send(answer_inline_query(InlineQueryId("q"))) is None


@pytest.mark.anyio
async def test_api_error_is_raised_without_retry() -> None:
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(
            429,
            json={
                "ok": False,
                "error_code": 429,
                "description": "Too Many Requests: retry after 3",
                "parameters": {"retry_after": 3},
            },
            request=request,
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = Api("1:x", client=client)
        with pytest.raises(ApiError) as exc:
            await api.send(get_me())

    assert exc.value.retry_after == 3
    assert len(calls) == 1


@pytest.mark.anyio
async def test_network_error_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = Api("1:x", client=client)
        with pytest.raises(TransportError, match="getMe"):
            await api.send(get_me())


def test_empty_token_raises() -> None:
    with pytest.raises(ValueError, match="empty"):
        Api("")


@pytest.mark.anyio
async def test_close_owned_client() -> None:
    async with Api("123:abc"):
        pass


@pytest.mark.anyio
async def test_close_leaves_external_client_open() -> None:
    async with httpx.AsyncClient() as ext:
        connector = HttpxConnector(client=ext)
        await connector.close()
        assert not ext.is_closed
