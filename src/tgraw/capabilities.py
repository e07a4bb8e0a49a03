"""Narrow conversion capabilities.

Each protocol grants exactly one conversion that always succeeds. A type only
implements the conversions its data allows, so for instance a ``Message`` has a
source chat but does not itself name a chat.

The module-level resolvers also accept a ``weakref.ref`` to a capable value and
forward through it; ``weakref.proxy`` forwards on its own.
"""

from __future__ import annotations

import weakref
from typing import Any, Protocol, runtime_checkable

from .refs import ChatId, ChatRef, FileRef, InlineQueryId, MessageId, UserId


@runtime_checkable
class ToChatRef(Protocol):
    def to_chat_ref(self) -> ChatRef: ...


@runtime_checkable
class ToUserId(Protocol):
    def to_user_id(self) -> UserId: ...


@runtime_checkable
class ToMessageId(Protocol):
    def to_message_id(self) -> MessageId: ...


@runtime_checkable
class ToFileRef(Protocol):
    def to_file_ref(self) -> FileRef: ...


@runtime_checkable
class ToSourceChat(Protocol):
    """The chat a value was observed in, as opposed to the chat it names."""

    def to_source_chat(self) -> ChatId: ...


@runtime_checkable
class ReceivedMessage(ToSourceChat, ToMessageId, Protocol):
    """A message observed in a chat: knows both where it lives and its id."""


@runtime_checkable
class ToInlineQueryId(Protocol):
    def to_inline_query_id(self) -> InlineQueryId: ...


def _deref(value: Any) -> Any:
    if isinstance(value, weakref.ReferenceType):
        target = value()
        if target is None:
            raise ReferenceError("weakly-referenced object no longer exists")
        return target
    return value


def _convert(value: Any, method: str, what: str) -> Any:
    target = _deref(value)
    # getattr rather than isinstance so weakref.proxy forwards the lookup
    convert = getattr(target, method, None)
    if not callable(convert):
        raise TypeError(f"{type(target).__name__} cannot be used as {what}")
    return convert()


def to_chat_ref(value: ToChatRef | weakref.ref[Any]) -> ChatRef:
    return _convert(value, "to_chat_ref", "a chat reference")


def to_user_id(value: ToUserId | weakref.ref[Any]) -> UserId:
    return _convert(value, "to_user_id", "a user id")


def to_message_id(value: ToMessageId | weakref.ref[Any]) -> MessageId:
    return _convert(value, "to_message_id", "a message id")


def to_file_ref(value: ToFileRef | weakref.ref[Any]) -> FileRef:
    return _convert(value, "to_file_ref", "a file reference")


def to_source_chat(value: ToSourceChat | weakref.ref[Any]) -> ChatId:
    return _convert(value, "to_source_chat", "a received message")


def to_inline_query_id(value: ToInlineQueryId | weakref.ref[Any]) -> InlineQueryId:
    return _convert(value, "to_inline_query_id", "an inline query id")
