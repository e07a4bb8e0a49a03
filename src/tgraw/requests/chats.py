from __future__ import annotations

from ..capabilities import ToChatRef, ToUserId, to_chat_ref, to_user_id
from ..refs import ChatRef, UserId
from ..responses import JsonResponse, JsonTrueToUnitResponse
from ..types import Chat, ChatMember
from ._base import Request


class GetChat(Request, kw_only=True):
    method_name = "getChat"
    response_type = JsonResponse(Chat)

    chat_id: ChatRef


class LeaveChat(Request, kw_only=True):
    method_name = "leaveChat"
    response_type = JsonTrueToUnitResponse()

    chat_id: ChatRef


class GetChatMember(Request, kw_only=True):
    method_name = "getChatMember"
    response_type = JsonResponse(ChatMember)

    chat_id: ChatRef
    user_id: UserId


def get_chat(chat: ToChatRef) -> GetChat:
    return GetChat(chat_id=to_chat_ref(chat))


def leave_chat(chat: ToChatRef) -> LeaveChat:
    return LeaveChat(chat_id=to_chat_ref(chat))


def get_chat_member(chat: ToChatRef, user: ToUserId) -> GetChatMember:
    return GetChatMember(chat_id=to_chat_ref(chat), user_id=to_user_id(user))
