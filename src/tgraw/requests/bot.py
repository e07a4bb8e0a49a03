from __future__ import annotations

from ..responses import JsonResponse
from ..types import User
from ._base import Request


class GetMe(Request):
    """Basic information about the bot itself."""

    method_name = "getMe"
    response_type = JsonResponse(User)


def get_me() -> GetMe:
    return GetMe()
