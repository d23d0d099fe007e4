from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest
from pydantic import ValidationError

from tenfoot.logging import setup_logging
from tenfoot.settings import Settings, load_settings


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = load_settings()

    assert s.TENFOOT_DEFAULT_COLUMNS == 5
    assert s.TENFOOT_MIN_COLUMN_WIDTH == 140
    assert s.TENFOOT_WRAP_HORIZONTAL is False
    assert s.TENFOOT_ENABLE_WASD is True
    assert s.TENFOOT_SEARCH_MIN_SCORE == 0.1
    assert s.TENFOOT_SEARCH_SCROLL_PADDING == 16
    assert s.TENFOOT_LOG_TO_FILE is False


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TENFOOT_WRAP_VERTICAL", "true")
    monkeypatch.setenv("TENFOOT_DEFAULT_COLUMNS", "0")
    monkeypatch.setenv("TENFOOT_SEARCH_MIN_SCORE", "0.5")

    s = load_settings()
    assert s.TENFOOT_WRAP_VERTICAL is True
    assert s.TENFOOT_DEFAULT_COLUMNS == 1
    assert s.TENFOOT_SEARCH_MIN_SCORE == 0.5


def test_settings_from_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("TENFOOT_ENABLE_WASD=false\n", encoding="utf-8")

    assert load_settings().TENFOOT_ENABLE_WASD is False


def test_settings_reject_out_of_range_score(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TENFOOT_SEARCH_MIN_SCORE", "1.5")
    with pytest.raises(ValidationError):
        Settings()


def test_setup_logging_console_only(monkeypatch, tmp_path, root_logger):
    monkeypatch.chdir(tmp_path)
    s = Settings(_env_file=None, TENFOOT_LOG_LEVEL="debug")

    assert setup_logging(s) is None
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_setup_logging_to_file(tmp_path, root_logger):
    s = Settings(_env_file=None, TENFOOT_LOG_TO_FILE=True, TENFOOT_LOG_DIR=tmp_path / "logs")

    log_file = setup_logging(s)
    assert log_file == tmp_path / "logs" / "tenfoot.log"
    assert log_file.parent.is_dir()
    assert any(isinstance(h, TimedRotatingFileHandler) for h in logging.getLogger().handlers)

    # Repeated setup resets handlers instead of stacking them
    setup_logging(s)
    assert len(logging.getLogger().handlers) == 2
