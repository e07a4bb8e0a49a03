"""Typed Bot API identifiers, references and request serialization."""

from .api import Api, HttpxConnector
from .capabilities import (
    ReceivedMessage,
    ToChatRef,
    ToFileRef,
    ToInlineQueryId,
    ToMessageId,
    ToSourceChat,
    ToUserId,
    to_chat_ref,
    to_file_ref,
    to_inline_query_id,
    to_message_id,
    to_source_chat,
    to_user_id,
)
from .errors import (
    ApiError,
    ConfigError,
    DecodeError,
    EncodeError,
    IdDecodeError,
    TgrawError,
    TransportError,
)
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

__version__ = "0.1.0"

__all__ = [
    "Api",
    "ApiError",
    "ChannelId",
    "ChatId",
    "ChatRef",
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "FileRef",
    "GroupId",
    "HttpxConnector",
    "IdDecodeError",
    "InlineQueryId",
    "MessageId",
    "ReceivedMessage",
    "SupergroupId",
    "TgrawError",
    "ToChatRef",
    "ToFileRef",
    "ToInlineQueryId",
    "ToMessageId",
    "ToSourceChat",
    "ToUserId",
    "TransportError",
    "UserId",
    "to_chat_ref",
    "to_file_ref",
    "to_inline_query_id",
    "to_message_id",
    "to_source_chat",
    "to_user_id",
]
