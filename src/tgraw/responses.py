"""How a request's raw response body becomes a typed value.

Every Bot API reply is wrapped in ``{"ok": ..., "result": ...}``; failures carry
``description``, ``error_code`` and optional ``parameters`` instead.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

import msgspec

from . import codec
from .errors import ApiError, DecodeError
from .logging import get_logger
from .refs import ChatId

logger = get_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ResponseParameters(msgspec.Struct, forbid_unknown_fields=False):
    migrate_to_chat_id: ChatId | None = None
    retry_after: int | None = None


class _Envelope(msgspec.Struct, forbid_unknown_fields=False):
    ok: bool
    result: msgspec.Raw = msgspec.Raw(b"null")
    description: str | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None


class ResponseType(Protocol[T_co]):
    def deserialize(self, body: bytes) -> T_co: ...


def _unwrap(body: bytes) -> msgspec.Raw:
    envelope = codec.decode(body, _Envelope)
    if not envelope.ok:
        params = envelope.parameters or ResponseParameters()
        logger.debug(
            "response.api_error",
            error_code=envelope.error_code,
            description=envelope.description,
        )
        raise ApiError(
            envelope.description or "unknown error",
            error_code=envelope.error_code,
            retry_after=params.retry_after,
            migrate_to_chat_id=params.migrate_to_chat_id,
        )
    return envelope.result


class JsonResponse(Generic[T]):
    """Decode ``result`` as ``type_``."""

    __slots__ = ("type_",)

    def __init__(self, type_: Any) -> None:
        self.type_ = type_

    def deserialize(self, body: bytes) -> T:
        return codec.decode(_unwrap(body), self.type_)

    def __repr__(self) -> str:
        return f"JsonResponse({getattr(self.type_, '__name__', self.type_)!r})"


class JsonTrueToUnitResponse:
    """Methods that answer a bare ``true`` on success."""

    def deserialize(self, body: bytes) -> None:
        result = codec.decode(_unwrap(body), Any)
        if result is not True:
            raise DecodeError(f"expected `true` result, got {result!r}")
        return None


class JsonIdResponse:
    """Pass the decoded ``result`` through untouched."""

    def deserialize(self, body: bytes) -> Any:
        return codec.decode(_unwrap(body), Any)
