import logging
import sys

import pytest

from quiz_mcp.core.config import settings
from quiz_mcp.mcp_server import server


@pytest.fixture
def bare_root_logger():
    """Root logger without handlers so basicConfig takes effect; restored afterwards"""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()

    yield root

    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture(autouse=True)
def keep_excepthook(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_startup_failure_exits_with_status_1(monkeypatch, caplog):
    def broken_stdio_server():
        raise OSError("stdin is closed")

    monkeypatch.setattr(server, "stdio_server", broken_stdio_server)

    with pytest.raises(SystemExit) as exc_info:
        server.run()

    assert exc_info.value.code == 1
    assert "Failed to start Quiz MCP Server: stdin is closed" in caplog.text


def test_keyboard_interrupt_shuts_down_cleanly(monkeypatch, caplog):
    async def interrupted_main():
        raise KeyboardInterrupt

    caplog.set_level(logging.INFO)
    monkeypatch.setattr(server, "main", interrupted_main)

    server.run()

    assert "Server shutting down..." in caplog.text


def test_invalid_log_level_exits_with_status_1(monkeypatch, caplog):
    monkeypatch.setattr(settings, "log_level", "verbose")

    with pytest.raises(SystemExit) as exc_info:
        server.run()

    assert exc_info.value.code == 1
    assert "Invalid log level: 'verbose'" in caplog.text


def test_logs_go_to_stderr_only(capsys, bare_root_logger):
    bare_root_logger.handlers.clear()
    server.configure_logging()
    logging.getLogger("quiz_mcp.mcp_server.server").warning("catalog loaded")

    captured = capsys.readouterr()
    assert "catalog loaded" in captured.err
    assert captured.out == ""


def test_configure_logging_uses_settings_level(monkeypatch, bare_root_logger):
    monkeypatch.setattr(settings, "log_level", "debug")

    bare_root_logger.handlers.clear()
    server.configure_logging()

    assert bare_root_logger.level == logging.DEBUG


def test_uncaught_exceptions_are_logged(caplog):
    try:
        raise RuntimeError("transport gone")
    except RuntimeError:
        server._log_uncaught_exception(*sys.exc_info())

    assert "Uncaught exception" in caplog.text
    assert "transport gone" in caplog.text
