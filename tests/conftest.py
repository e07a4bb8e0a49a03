import pytest

from tgraw.types import Message
from tests.factories import channel_payload, message, user_payload


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def group_message() -> Message:
    return message()


@pytest.fixture
def channel_forward() -> Message:
    return message(
        message_id=11,
        forward_date=1699999999,
        forward_from=user_payload(99, first_name="Relay"),
        forward_from_chat=channel_payload(-1005),
        forward_from_message_id=3,
    )
