"""Bot API entities as received from the wire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

import msgspec

from .refs import (
    ChannelId,
    ChatId,
    ChatRef,
    FileRef,
    GroupId,
    InlineQueryId,
    MessageId,
    SupergroupId,
    UserId,
)

__all__ = [
    "Audio",
    "Channel",
    "Chat",
    "ChatMember",
    "Document",
    "File",
    "Forward",
    "ForwardFrom",
    "ForwardFromChannel",
    "ForwardFromUser",
    "Group",
    "InlineQuery",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultPhoto",
    "InputTextMessageContent",
    "Message",
    "PhotoSize",
    "PrivateChat",
    "Sticker",
    "Supergroup",
    "User",
    "Video",
    "VideoNote",
    "Voice",
]


class User(msgspec.Struct, kw_only=True, weakref=True, forbid_unknown_fields=False):
    id: UserId
    first_name: str
    is_bot: bool = False
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None

    def to_user_id(self) -> UserId:
        return self.id

    def to_chat_ref(self) -> ChatRef:
        return self.id.to_chat_ref()


# ----------------------------
# Chats, discriminated by "type"
# ----------------------------


class _ChatBase(
    msgspec.Struct,
    kw_only=True,
    tag_field="type",
    weakref=True,
    forbid_unknown_fields=False,
):
    def chat_id(self) -> ChatId:
        return self.id.to_chat_id()  # type: ignore[attr-defined]

    def to_chat_ref(self) -> ChatRef:
        return self.id.to_chat_ref()  # type: ignore[attr-defined]


class PrivateChat(_ChatBase, tag="private", kw_only=True):
    id: UserId
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None


class Group(_ChatBase, tag="group", kw_only=True):
    id: GroupId
    title: str


class Supergroup(_ChatBase, tag="supergroup", kw_only=True):
    id: SupergroupId
    title: str
    username: str | None = None
    is_forum: bool | None = None


class Channel(_ChatBase, tag="channel", kw_only=True):
    id: ChannelId
    title: str
    username: str | None = None


Chat: TypeAlias = PrivateChat | Group | Supergroup | Channel


class ChatMember(
    msgspec.Struct, kw_only=True, weakref=True, forbid_unknown_fields=False
):
    user: User
    status: str
    can_manage_topics: bool | None = None

    def to_user_id(self) -> UserId:
        return self.user.id

    def to_chat_ref(self) -> ChatRef:
        return self.user.to_chat_ref()


# ----------------------------
# Files
# ----------------------------


class _FileBase(
    msgspec.Struct, kw_only=True, weakref=True, forbid_unknown_fields=False
):
    file_id: str
    file_unique_id: str | None = None
    file_size: int | None = None

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


class PhotoSize(_FileBase, kw_only=True):
    width: int
    height: int


class Audio(_FileBase, kw_only=True):
    duration: int
    performer: str | None = None
    title: str | None = None
    mime_type: str | None = None


class Document(_FileBase, kw_only=True):
    file_name: str | None = None
    mime_type: str | None = None


class Sticker(_FileBase, kw_only=True):
    width: int
    height: int
    emoji: str | None = None


class Video(_FileBase, kw_only=True):
    width: int
    height: int
    duration: int
    mime_type: str | None = None


class Voice(_FileBase, kw_only=True):
    duration: int
    mime_type: str | None = None


class VideoNote(_FileBase, kw_only=True):
    length: int
    duration: int


class File(_FileBase, kw_only=True):
    file_path: str | None = None


# ----------------------------
# Messages
# ----------------------------


@dataclass(frozen=True, slots=True, weakref_slot=True)
class ForwardFromUser:
    user: User

    def to_chat_ref(self) -> ChatRef:
        return self.user.to_chat_ref()


@dataclass(frozen=True, slots=True, weakref_slot=True)
class ForwardFromChannel:
    channel: Channel
    message_id: MessageId | None = None

    def to_chat_ref(self) -> ChatRef:
        return self.channel.to_chat_ref()


ForwardFrom: TypeAlias = ForwardFromUser | ForwardFromChannel


@dataclass(frozen=True, slots=True, weakref_slot=True)
class Forward:
    date: int
    origin: ForwardFrom

    def to_chat_ref(self) -> ChatRef:
        return self.origin.to_chat_ref()


class Message(msgspec.Struct, kw_only=True, weakref=True, forbid_unknown_fields=False):
    message_id: MessageId
    date: int
    chat: Chat
    from_: User | None = msgspec.field(default=None, name="from")
    message_thread_id: int | None = None
    forward_from: User | None = None
    forward_from_chat: Chat | None = None
    forward_from_message_id: MessageId | None = None
    forward_date: int | None = None
    reply_to_message: Message | None = None
    text: str | None = None
    photo: list[PhotoSize] | None = None
    audio: Audio | None = None
    document: Document | None = None
    sticker: Sticker | None = None
    video: Video | None = None
    voice: Voice | None = None
    video_note: VideoNote | None = None

    @property
    def forward(self) -> Forward | None:
        """Where the message was forwarded from; a channel origin wins."""
        if self.forward_date is None:
            return None
        if isinstance(self.forward_from_chat, Channel):
            return Forward(
                date=self.forward_date,
                origin=ForwardFromChannel(
                    channel=self.forward_from_chat,
                    message_id=self.forward_from_message_id,
                ),
            )
        if self.forward_from is not None:
            return Forward(
                date=self.forward_date,
                origin=ForwardFromUser(user=self.forward_from),
            )
        return None

    def to_message_id(self) -> MessageId:
        return self.message_id

    def to_source_chat(self) -> ChatId:
        return self.chat.chat_id()


# ----------------------------
# Inline mode
# ----------------------------


class InlineQuery(
    msgspec.Struct, kw_only=True, weakref=True, forbid_unknown_fields=False
):
    id: InlineQueryId
    from_: User = msgspec.field(name="from")
    query: str
    offset: str = ""

    def to_inline_query_id(self) -> InlineQueryId:
        return self.id


class InputTextMessageContent(msgspec.Struct, kw_only=True, omit_defaults=True):
    message_text: str
    parse_mode: str | None = None


class _InlineResult(
    msgspec.Struct, kw_only=True, tag_field="type", omit_defaults=True
):
    pass


class InlineQueryResultArticle(_InlineResult, tag="article", kw_only=True):
    id: str
    title: str
    input_message_content: InputTextMessageContent
    description: str | None = None
    url: str | None = None


class InlineQueryResultPhoto(_InlineResult, tag="photo", kw_only=True):
    id: str
    photo_url: str
    thumbnail_url: str
    title: str | None = None
    caption: str | None = None


InlineQueryResult: TypeAlias = InlineQueryResultArticle | InlineQueryResultPhoto
