from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from tgraw import cli
from tgraw.config import ENV_API_URL, ENV_BOT_TOKEN
from tgraw.errors import ApiError
from tgraw.refs import ChatId, ChatRef, UserId
from tgraw.requests import GetChat, GetMe
from tgraw.types import User


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv(ENV_BOT_TOKEN, raising=False)
    monkeypatch.delenv(ENV_API_URL, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "setup_logging", lambda **_: None)


def test_parse_chat() -> None:
    assert cli.parse_chat("-100") == ChatRef.Id(ChatId(-100))
    assert cli.parse_chat("@news") == ChatRef.ChannelUsername("@news")
    with pytest.raises(typer.BadParameter):
        cli.parse_chat("news")


def test_get_me_prints_result(monkeypatch) -> None:
    monkeypatch.setenv(ENV_BOT_TOKEN, "1:abc")
    seen: list = []

    async def _send(token: str, api_url: str, request):
        seen.append((token, api_url, request))
        return User(id=UserId(1), first_name="bot", is_bot=True)

    monkeypatch.setattr(cli, "_send", _send)
    result = CliRunner().invoke(cli.create_app(), ["get-me"])

    assert result.exit_code == 0, result.output
    assert '"first_name": "bot"' in result.output
    token, api_url, request = seen[0]
    assert token == "1:abc"
    assert api_url == "https://api.telegram.org"
    assert isinstance(request, GetMe)


def test_get_chat_uses_config_file(monkeypatch, tmp_path: Path) -> None:
    cfg = tmp_path / "tgraw.toml"
    cfg.write_text('bot_token = "2:def"\napi_url = "http://localhost:9"\n')
    seen: list = []

    async def _send(token: str, api_url: str, request):
        seen.append((token, api_url, request))
        return User(id=UserId(5), first_name="e")

    monkeypatch.setattr(cli, "_send", _send)
    result = CliRunner().invoke(
        cli.create_app(), ["get-chat", "@news", "--config", str(cfg)]
    )

    assert result.exit_code == 0, result.output
    assert seen[0][:2] == ("2:def", "http://localhost:9")
    assert seen[0][2] == GetChat(chat_id=ChatRef.ChannelUsername("@news"))


def test_missing_token_exits() -> None:
    result = CliRunner().invoke(cli.create_app(), ["get-me"])
    assert result.exit_code == 1


def test_api_error_exits(monkeypatch) -> None:
    monkeypatch.setenv(ENV_BOT_TOKEN, "1:abc")

    async def _send(token: str, api_url: str, request):
        raise ApiError("Bad Request: chat not found", error_code=400)

    monkeypatch.setattr(cli, "_send", _send)
    result = CliRunner().invoke(cli.create_app(), ["get-chat", "42"])
    assert result.exit_code == 1
