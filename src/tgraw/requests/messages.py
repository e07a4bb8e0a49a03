from __future__ import annotations

from typing import Any

from ..capabilities import (
    ReceivedMessage,
    ToChatRef,
    to_chat_ref,
    to_message_id,
    to_source_chat,
)
from ..refs import ChatRef, MessageId
from ..responses import JsonResponse, JsonTrueToUnitResponse
from ..types import Message
from ._base import Request


class SendMessage(Request, kw_only=True):
    method_name = "sendMessage"
    response_type = JsonResponse(Message)

    chat_id: ChatRef
    text: str
    message_thread_id: int | None = None
    parse_mode: str | None = None
    disable_notification: bool = False
    reply_to_message_id: MessageId | None = None


class ForwardMessage(Request, kw_only=True):
    method_name = "forwardMessage"
    response_type = JsonResponse(Message)

    chat_id: ChatRef
    from_chat_id: ChatRef
    message_id: MessageId
    disable_notification: bool = False


class DeleteMessage(Request, kw_only=True):
    method_name = "deleteMessage"
    response_type = JsonTrueToUnitResponse()

    chat_id: ChatRef
    message_id: MessageId


def send_message(chat: ToChatRef, text: str, **options: Any) -> SendMessage:
    return SendMessage(chat_id=to_chat_ref(chat), text=text, **options)


def reply_to(message: ReceivedMessage, text: str, **options: Any) -> SendMessage:
    """Answer ``message`` in the chat it was received in."""
    return SendMessage(
        chat_id=to_source_chat(message).to_chat_ref(),
        text=text,
        reply_to_message_id=to_message_id(message),
        **options,
    )


def forward_message(
    message: ReceivedMessage, to: ToChatRef, *, disable_notification: bool = False
) -> ForwardMessage:
    return ForwardMessage(
        chat_id=to_chat_ref(to),
        from_chat_id=to_source_chat(message).to_chat_ref(),
        message_id=to_message_id(message),
        disable_notification=disable_notification,
    )


def delete_message(message: ReceivedMessage) -> DeleteMessage:
    return DeleteMessage(
        chat_id=to_source_chat(message).to_chat_ref(),
        message_id=to_message_id(message),
    )
