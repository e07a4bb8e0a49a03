"""Identifier newtypes and chat references.

Every id kind wraps a single primitive. Ids of different kinds never compare
equal and cannot be ordered against each other; the only way to move between
kinds is an explicit widening such as ``UserId.to_chat_id()``.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, ClassVar, Self

from .errors import IdDecodeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@total_ordering
class IntegerId:
    __slots__ = ("_value", "__weakref__")

    def __init__(self, value: int) -> None:
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def from_wire(cls, raw: Any) -> Self:
        # bool is an int subclass; numeric strings are not parsed
        if type(raw) is not int:
            raise IdDecodeError(cls.__name__, "an integer", raw)
        if not INT64_MIN <= raw <= INT64_MAX:
            raise IdDecodeError(cls.__name__, "a signed 64-bit integer", raw)
        return cls(raw)

    def to_wire(self) -> int:
        if not INT64_MIN <= self._value <= INT64_MAX:
            raise OverflowError(
                f"{type(self).__name__} {self._value} does not fit in 64 bits"
            )
        return self._value

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))


@total_ordering
class StringId:
    __slots__ = ("_value", "__weakref__")

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def from_wire(cls, raw: Any) -> Self:
        if not isinstance(raw, str):
            raise IdDecodeError(cls.__name__, "a string", raw)
        return cls(raw)

    def to_wire(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))


class ChatId(IntegerId):
    """Unique chat identifier."""

    __slots__ = ()

    def to_chat_id(self) -> ChatId:
        return self

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self)


class _SpecificChatId(IntegerId):
    __slots__ = ()

    def to_chat_id(self) -> ChatId:
        return ChatId(self._value)

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self.to_chat_id())


class UserId(_SpecificChatId):
    """Unique user identifier. A user is also its own private chat."""

    __slots__ = ()

    def to_user_id(self) -> UserId:
        return self


class GroupId(_SpecificChatId):
    __slots__ = ()


class SupergroupId(_SpecificChatId):
    __slots__ = ()


class ChannelId(_SpecificChatId):
    __slots__ = ()


class MessageId(IntegerId):
    """Unique message identifier inside a chat."""

    __slots__ = ()

    def to_message_id(self) -> MessageId:
        return self


class FileRef(StringId):
    """Opaque file identifier; files have no numeric form."""

    __slots__ = ()

    def to_file_ref(self) -> FileRef:
        return FileRef(self._value)


class InlineQueryId(StringId):
    __slots__ = ()

    def to_inline_query_id(self) -> InlineQueryId:
        return self


class ChatRef:
    """Target chat on the wire: a numeric chat id or a ``@channelusername``.

    Encoded without a discriminant: the id variant is a bare JSON number and
    the username variant a bare JSON string.
    """

    __slots__ = ("__weakref__",)

    Id: ClassVar[type[ChatRefId]]
    ChannelUsername: ClassVar[type[ChatRefUsername]]

    @staticmethod
    def from_chat_id(chat_id: ChatId) -> ChatRef:
        return ChatRefId(chat_id)

    @staticmethod
    def from_username(username: str) -> ChatRef:
        """Only for inputs where nothing but a username is known (config, CLI)."""
        return ChatRefUsername(username)

    @classmethod
    def from_wire(cls, raw: Any) -> ChatRef:
        if type(raw) is int:
            return ChatRefId(ChatId.from_wire(raw))
        if isinstance(raw, str):
            try:
                return ChatRefUsername(raw)
            except ValueError:
                raise IdDecodeError(cls.__name__, "a @username", raw) from None
        raise IdDecodeError(cls.__name__, "an integer or a @username", raw)

    def to_chat_ref(self) -> ChatRef:
        return self

    def to_wire(self) -> int | str:
        raise NotImplementedError


class ChatRefId(ChatRef):
    __slots__ = ("_chat_id",)

    def __init__(self, chat_id: ChatId) -> None:
        if not isinstance(chat_id, ChatId):
            raise TypeError(
                f"ChatRef.Id expects a ChatId, got {type(chat_id).__name__}"
            )
        self._chat_id = chat_id

    @property
    def chat_id(self) -> ChatId:
        return self._chat_id

    def to_wire(self) -> int:
        return self.chat_id.to_wire()

    def __repr__(self) -> str:
        return f"ChatRef.Id({self.chat_id!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not ChatRefId:
            return NotImplemented
        return self.chat_id == other.chat_id

    def __hash__(self) -> int:
        return hash((ChatRefId, self.chat_id))


class ChatRefUsername(ChatRef):
    __slots__ = ("_username",)

    def __init__(self, username: str) -> None:
        if (
            not isinstance(username, str)
            or not username.startswith("@")
            or len(username) < 2
            or username[1:].lstrip("-").isdigit()
        ):
            raise ValueError(f"invalid channel username {username!r}")
        self._username = username

    @property
    def username(self) -> str:
        return self._username

    def to_wire(self) -> str:
        return self.username

    def __repr__(self) -> str:
        return f"ChatRef.ChannelUsername({self.username!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not ChatRefUsername:
            return NotImplemented
        return self.username == other.username

    def __hash__(self) -> int:
        return hash((ChatRefUsername, self.username))


ChatRef.Id = ChatRefId
ChatRef.ChannelUsername = ChatRefUsername
