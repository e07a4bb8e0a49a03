from __future__ import annotations

from pathlib import Path
from typing import Any

import anyio
import typer
from rich.console import Console

from . import codec
from .api import Api
from .config import ConfigError, get_api_url, get_bot_token, load_config
from .errors import TgrawError
from .logging import setup_logging
from .refs import ChatId, ChatRef
from .requests import Request, get_chat, get_me

_CONFIG_OPTION = typer.Option(
    None, "--config", help="Path to tgraw.toml (defaults to ./.tgraw or ~/.tgraw)."
)
_DEBUG_OPTION = typer.Option(False, "--debug", help="Log requests to stderr.")


def parse_chat(value: str) -> ChatRef:
    """A numeric chat id, or a @channelusername."""
    try:
        return ChatRef.from_chat_id(ChatId(int(value)))
    except ValueError:
        pass
    try:
        return ChatRef.from_username(value)
    except ValueError:
        raise typer.BadParameter(
            f"{value!r} is neither a chat id nor a @username"
        ) from None


async def _send(token: str, api_url: str, request: Request) -> Any:
    async with Api(token, api_url=api_url) as api:
        return await api.send(request)


def _run(request: Request, config_path: Path | None, debug: bool) -> None:
    setup_logging(debug=debug)
    console = Console()
    try:
        config, resolved = load_config(config_path)
        token = get_bot_token(config, resolved)
        api_url = get_api_url(config, resolved)
    except ConfigError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1) from None
    try:
        result = anyio.run(_send, token, api_url, request)
    except TgrawError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1) from None
    console.print_json(codec.encode(result).decode())


def create_app() -> typer.Typer:
    app = typer.Typer(
        add_completion=False,
        no_args_is_help=True,
        help="Call Bot API methods from the command line.",
    )

    @app.command("get-me")
    def get_me_cmd(
        config: Path | None = _CONFIG_OPTION,
        debug: bool = _DEBUG_OPTION,
    ) -> None:
        """Show the bot's own user."""
        _run(get_me(), config, debug)

    @app.command("get-chat")
    def get_chat_cmd(
        chat: str = typer.Argument(..., help="Chat id or @channelusername."),
        config: Path | None = _CONFIG_OPTION,
        debug: bool = _DEBUG_OPTION,
    ) -> None:
        """Show a chat."""
        _run(get_chat(parse_chat(chat)), config, debug)

    return app


def main() -> None:
    create_app()()
