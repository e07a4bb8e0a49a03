"""Request contract, encoding strategies and the HTTP envelope they produce."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, TypeVar

import msgspec

from .. import codec
from ..logging import get_logger
from ..responses import ResponseType

logger = get_logger(__name__)

R = TypeVar("R", contravariant=True)


class Method(enum.Enum):
    POST = "POST"


@dataclass(frozen=True, slots=True)
class RequestUrl:
    """Endpoint address relative to the bot's API base."""

    name: str

    @classmethod
    def method(cls, name: str) -> RequestUrl:
        return cls(name)

    def build(self, base: str) -> str:
        return f"{base.rstrip('/')}/{self.name}"


class BodyKind(enum.Enum):
    JSON = "application/json"


@dataclass(frozen=True, slots=True)
class Body:
    kind: BodyKind
    data: bytes

    @classmethod
    def json(cls, data: bytes) -> Body:
        return cls(BodyKind.JSON, data)

    @property
    def content_type(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class HttpRequest:
    url: RequestUrl
    method: Method
    body: Body


class RequestType(Protocol[R]):
    """Encoding strategy: payload plus endpoint options into an envelope."""

    @staticmethod
    def serialize(url: RequestUrl, request: R) -> HttpRequest: ...


class JsonRequestType:
    @staticmethod
    def serialize(url: RequestUrl, request: Any) -> HttpRequest:
        body = codec.encode(request)
        logger.debug("request.serialized", method=url.name, body=body.decode())
        return HttpRequest(url=url, method=Method.POST, body=Body.json(body))


class Request(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Base for every endpoint payload.

    Fields are the exact wire keys. A field with a default is left out of the
    encoded object while it holds that default (``None`` or an empty list);
    fields without a default are always sent.
    """

    method_name: ClassVar[str]
    request_type: ClassVar[type[RequestType[Any]]] = JsonRequestType
    response_type: ClassVar[ResponseType[Any]]

    def serialize(self) -> HttpRequest:
        return self.request_type.serialize(RequestUrl.method(self.method_name), self)
