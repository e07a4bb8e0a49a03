"""Typed Bot API requests and the machinery that serializes them."""

from ._base import (
    Body,
    BodyKind,
    HttpRequest,
    JsonRequestType,
    Method,
    Request,
    RequestType,
    RequestUrl,
)
from .bot import GetMe, get_me
from .chats import (
    GetChat,
    GetChatMember,
    LeaveChat,
    get_chat,
    get_chat_member,
    leave_chat,
)
from .files import GetFile, get_file
from .inline import AnswerInlineQuery, answer_inline_query
from .messages import (
    DeleteMessage,
    ForwardMessage,
    SendMessage,
    delete_message,
    forward_message,
    reply_to,
    send_message,
)

__all__ = [
    "AnswerInlineQuery",
    "Body",
    "BodyKind",
    "DeleteMessage",
    "ForwardMessage",
    "GetChat",
    "GetChatMember",
    "GetFile",
    "GetMe",
    "HttpRequest",
    "JsonRequestType",
    "LeaveChat",
    "Method",
    "Request",
    "RequestType",
    "RequestUrl",
    "SendMessage",
    "answer_inline_query",
    "delete_message",
    "forward_message",
    "get_chat",
    "get_chat_member",
    "get_file",
    "get_me",
    "leave_chat",
    "reply_to",
    "send_message",
]
