from __future__ import annotations

from typing import Any


class TgrawError(Exception):
    pass


class ConfigError(TgrawError, RuntimeError):
    pass


class EncodeError(TgrawError):
    """A request payload could not be turned into its wire form."""


class DecodeError(TgrawError):
    """Wire data did not match the expected shape."""


class IdDecodeError(DecodeError):
    def __init__(self, kind: str, expected: str, raw: Any) -> None:
        self.kind = kind
        self.expected = expected
        self.raw = raw
        super().__init__(
            f"expected {expected} for {kind}, got {type(raw).__name__}: {raw!r}"
        )


class TransportError(TgrawError):
    def __init__(self, method: str, message: str) -> None:
        self.method = method
        super().__init__(f"{method}: {message}")


class ApiError(TgrawError):
    def __init__(
        self,
        description: str,
        *,
        error_code: int | None = None,
        retry_after: int | None = None,
        migrate_to_chat_id: Any = None,
    ) -> None:
        self.description = description
        self.error_code = error_code
        self.retry_after = retry_after
        self.migrate_to_chat_id = migrate_to_chat_id
        super().__init__(
            f"[{error_code}] {description}" if error_code is not None else description
        )
