"""Tests for selenium_useragent.utils.logger — console logger."""

from __future__ import annotations

from unittest import mock

import pytest

from selenium_useragent import config
from selenium_useragent.utils import logger


class TestLogger:
    def test_writes_context_and_message_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger.create_logger("Unit").info("hello")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[Unit]" in captured.err
        assert "hello" in captured.err

    def test_renders_data(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger.create_logger("Unit").warn("sized", {"width": 320, "agent": "iphone4", "size": [480, 320]})
        err = capsys.readouterr().err
        assert "width=" in err
        assert "320" in err
        assert '"iphone4"' in err
        assert "[480, 320]" in err

    def test_debug_hidden_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        with mock.patch.dict("os.environ", {"SELENIUM_UA_DEBUG": "false"}):
            config.reset_settings()
            logger.create_logger("Unit").debug("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_debug_enabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        with mock.patch.dict("os.environ", {"SELENIUM_UA_DEBUG": "true"}):
            config.reset_settings()
            logger.create_logger("Unit").debug("loud")
        assert "loud" in capsys.readouterr().err

    @pytest.mark.parametrize("level", ["info", "warn", "error"])
    def test_levels_emit(self, level: str, capsys: pytest.CaptureFixture[str]) -> None:
        getattr(logger.create_logger("Unit"), level)(f"{level}-line")
        assert f"{level}-line" in capsys.readouterr().err


class TestFormatValue:
    def test_long_string_truncated(self) -> None:
        assert "..." in logger._format_value("x" * 300)

    def test_none(self) -> None:
        assert "None" in logger._format_value(None)

    def test_bool(self) -> None:
        assert "True" in logger._format_value(True)
