"""Tests for logging configuration."""

import os
import subprocess
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

from lms_assistant.intent.analyzer import analyze
from lms_assistant.logging import PACKAGE, configure_logging, get_logger
from loguru import logger as loguru_logger
from loguru._logger import Logger

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def test_get_logger_returns_logger() -> None:
    """Test that get_logger returns a Logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, Logger)


def test_get_logger_with_different_names() -> None:
    """Test that get_logger works with different module names."""
    logger1 = get_logger("lms_assistant.intent.analyzer")
    logger2 = get_logger("lms_assistant.api.main")

    assert isinstance(logger1, Logger)
    assert isinstance(logger2, Logger)


def test_configure_logging_creates_log_directory() -> None:
    """Test that configure_logging creates the log directory if it doesn't exist."""
    with tempfile.TemporaryDirectory() as temp_dir:
        log_dir = Path(temp_dir) / "test_logs"
        assert not log_dir.exists()

        try:
            assert configure_logging(log_dir=str(log_dir)) == log_dir.resolve()
            assert log_dir.is_dir()
            assert (log_dir / "assistant.log").exists()
            assert (log_dir / "errors.log").exists()
        finally:
            # Release file handles before the directory goes away
            loguru_logger.remove()
            loguru_logger.disable(PACKAGE)


@patch("lms_assistant.logging.settings")
def test_configure_logging_defaults_to_settings(mock_settings: MagicMock) -> None:
    """Test that configure_logging falls back to the configured directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        mock_settings.log_dir = temp_dir
        mock_settings.log_level = "DEBUG"

        try:
            assert configure_logging() == Path(temp_dir).resolve()
            assert (Path(temp_dir) / "assistant.log").exists()
        finally:
            loguru_logger.remove()
            loguru_logger.disable(PACKAGE)


def test_analyze_in_fresh_interpreter_touches_no_files(tmp_path: Path) -> None:
    """Importing and calling the analyzer writes nothing to disk or stderr."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p
    )
    script = (
        "from lms_assistant.intent.analyzer import analyze; "
        "analyze('Enroll secret.person@corp.com in course Excel')"
    )

    completed = subprocess.run(
        [sys.executable, "-c", script],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert completed.returncode == 0, completed.stderr
    assert list(tmp_path.iterdir()) == []
    assert "secret.person@corp.com" not in completed.stderr


def test_analysis_traces_omit_message_text() -> None:
    """Even with package logging on, traces carry only intent and confidence."""
    messages: list[str] = []
    sink_id = loguru_logger.add(lambda m: messages.append(str(m)), level="DEBUG")
    loguru_logger.enable(PACKAGE)
    try:
        result = analyze("Enroll secret.person@corp.com in course Excel")
    finally:
        loguru_logger.remove(sink_id)
        loguru_logger.disable(PACKAGE)

    assert result.intent == "enroll_user_in_course"
    assert messages
    assert not any("secret.person@corp.com" in m for m in messages)
    assert not any("Excel" in m for m in messages)
