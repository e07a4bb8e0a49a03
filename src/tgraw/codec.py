"""JSON codec that knows how ids and chat references travel on the wire."""

from __future__ import annotations

from typing import Any, TypeVar

import msgspec

from .errors import DecodeError, EncodeError, IdDecodeError
from .refs import ChatRef, IntegerId, StringId

T = TypeVar("T")

_WIRE_TYPES = (IntegerId, StringId, ChatRef)


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, _WIRE_TYPES):
        return obj.to_wire()
    raise NotImplementedError(f"Objects of type {type(obj).__name__} are not supported")


def _dec_hook(type_: type, obj: Any) -> Any:
    if isinstance(type_, type) and issubclass(type_, _WIRE_TYPES):
        return type_.from_wire(obj)
    raise NotImplementedError(f"Type {type_!r} is not supported")


_ENCODER = msgspec.json.Encoder(enc_hook=_enc_hook)


def encode(value: Any) -> bytes:
    try:
        return _ENCODER.encode(value)
    except (msgspec.EncodeError, TypeError, NotImplementedError, OverflowError) as e:
        raise EncodeError(f"failed to encode {type(value).__name__}: {e}") from e


def _id_error(exc: BaseException) -> IdDecodeError | None:
    seen: set[int] = set()
    cause: BaseException | None = exc
    while cause is not None and id(cause) not in seen:
        if isinstance(cause, IdDecodeError):
            return cause
        seen.add(id(cause))
        cause = cause.__cause__ or cause.__context__
    return None


def decode(data: bytes | str | msgspec.Raw, type_: type[T] | Any) -> T:
    try:
        return msgspec.json.decode(data, type=type_, dec_hook=_dec_hook)
    except msgspec.DecodeError as e:
        id_error = _id_error(e)
        if id_error is not None:
            raise id_error from None
        raise DecodeError(str(e)) from e


def convert(obj: Any, type_: type[T] | Any) -> T:
    try:
        return msgspec.convert(obj, type=type_, dec_hook=_dec_hook)
    except msgspec.ValidationError as e:
        id_error = _id_error(e)
        if id_error is not None:
            raise id_error from None
        raise DecodeError(str(e)) from e
