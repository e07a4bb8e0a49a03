import structlog

from tgraw.logging import get_logger, redact_token_processor, setup_logging


def test_redacts_bot_token_in_event() -> None:
    event = {"event": "https://api.telegram.org/bot123456789:ABCdefGHI_jkl/getMe"}
    result = redact_token_processor(None, None, event)
    assert "123456789" not in result["event"]
    assert "bot[REDACTED]" in result["event"]


def test_redacts_bare_token_in_fields() -> None:
    event = {"event": "api.request", "url": "Token is 123456789:ABCDEFGHIJ_klmnop"}
    result = redact_token_processor(None, None, event)
    assert "[REDACTED_TOKEN]" in result["url"]
    assert result["event"] == "api.request"


def test_leaves_non_strings_alone() -> None:
    event = {"event": "x", "status": 429}
    assert redact_token_processor(None, None, event) == {"event": "x", "status": 429}


def test_setup_logging_json(capsys) -> None:
    setup_logging(debug=False)
    try:
        get_logger("tgraw.test").info("request.serialized", method="getMe")
        out = capsys.readouterr().err
        assert '"event": "request.serialized"' in out
        assert '"method": "getMe"' in out
    finally:
        structlog.reset_defaults()
