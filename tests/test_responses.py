import pytest

from tgraw.errors import ApiError, DecodeError
from tgraw.refs import ChatId, UserId
from tgraw.responses import JsonIdResponse, JsonResponse, JsonTrueToUnitResponse
from tgraw.types import Chat, PrivateChat, User


def test_json_response_decodes_result() -> None:
    body = b'{"ok":true,"result":{"id":7,"is_bot":true,"first_name":"bot"}}'
    user = JsonResponse(User).deserialize(body)
    assert user.id == UserId(7)
    assert user.is_bot is True


def test_json_response_union_result() -> None:
    body = b'{"ok":true,"result":{"id":7,"type":"private","first_name":"A"}}'
    chat = JsonResponse(Chat).deserialize(body)
    assert isinstance(chat, PrivateChat)


def test_true_to_unit_response() -> None:
    assert JsonTrueToUnitResponse().deserialize(b'{"ok":true,"result":true}') is None
    with pytest.raises(DecodeError, match="true"):
        JsonTrueToUnitResponse().deserialize(b'{"ok":true,"result":false}')


def test_missing_result_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        JsonResponse(User).deserialize(b'{"ok":true}')


def test_id_response_passes_result_through() -> None:
    assert JsonIdResponse().deserialize(b'{"ok":true,"result":[1,2]}') == [1, 2]


def test_api_error_carries_parameters() -> None:
    body = (
        b'{"ok":false,"error_code":400,"description":"Bad Request: group upgraded",'
        b'"parameters":{"migrate_to_chat_id":-1001}}'
    )
    with pytest.raises(ApiError) as exc:
        JsonResponse(User).deserialize(body)
    assert exc.value.error_code == 400
    assert exc.value.migrate_to_chat_id == ChatId(-1001)
    assert "group upgraded" in str(exc.value)


def test_rate_limit_error_reports_retry_after() -> None:
    body = b'{"ok":false,"error_code":429,"description":"Too Many Requests","parameters":{"retry_after":3}}'
    with pytest.raises(ApiError) as exc:
        JsonTrueToUnitResponse().deserialize(body)
    assert exc.value.retry_after == 3


def test_non_json_body_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        JsonResponse(User).deserialize(b"<html>502</html>")
