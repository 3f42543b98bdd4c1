"""
Unit tests for settings loading and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from search_server.config import SearchSettings, load_settings
from search_server.logging_config import setup_logging

ENV_VARS = ["SEARCH_MAX_RESULTS", "SEARCH_RELEVANCE_EPSILON", "SEARCH_REQUEST_WINDOW", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset settings variables; monkeypatch restores them afterwards"""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestSearchSettings:
    """Test defaults and validation"""

    def test_defaults(self):
        settings = SearchSettings()
        assert settings.max_result_document_count == 5
        assert settings.relevance_epsilon == 1e-6
        assert settings.request_window_size == 1440
        assert settings.console_level == logging.INFO

    @pytest.mark.parametrize("field,value", [
        ("max_result_document_count", 0),
        ("relevance_epsilon", 0.0),
        ("request_window_size", -1),
        ("log_level", "LOUD"),
    ])
    def test_invalid_values(self, field, value):
        """Out-of-range values are rejected"""
        with pytest.raises(ValidationError):
            SearchSettings(**{field: value})

    def test_log_level_case_insensitive(self):
        assert SearchSettings(log_level="debug").console_level == logging.DEBUG

    def test_from_env(self, clean_env):
        """Environment variables override defaults"""
        clean_env.setenv("SEARCH_MAX_RESULTS", "3")
        clean_env.setenv("SEARCH_REQUEST_WINDOW", "60")

        settings = SearchSettings.from_env()

        assert settings.max_result_document_count == 3
        assert settings.request_window_size == 60
        assert settings.relevance_epsilon == 1e-6

    def test_from_env_invalid(self, clean_env):
        clean_env.setenv("SEARCH_MAX_RESULTS", "zero")
        with pytest.raises(ValidationError):
            SearchSettings.from_env()


class TestLoadSettings:
    """Test dotenv loading"""

    def test_explicit_env_file(self, clean_env, tmp_path):
        """Values from the env file are applied"""
        env_file = tmp_path / "search.env"
        env_file.write_text("SEARCH_MAX_RESULTS=7\nSEARCH_RELEVANCE_EPSILON=0.001\n")

        settings = load_settings(env_file)

        assert settings.max_result_document_count == 7
        assert settings.relevance_epsilon == pytest.approx(0.001)

    def test_env_local_in_working_directory(self, clean_env, tmp_path):
        """.env.local is picked up from the working directory"""
        (tmp_path / ".env.local").write_text("SEARCH_REQUEST_WINDOW=10\n")
        clean_env.chdir(tmp_path)

        assert load_settings().request_window_size == 10

    def test_no_env_files(self, clean_env, tmp_path):
        """Defaults apply without env files"""
        clean_env.chdir(tmp_path)
        assert load_settings() == SearchSettings()


class TestSetupLogging:
    """Test handler configuration"""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root_logger = logging.getLogger()
        handlers = root_logger.handlers[:]
        level = root_logger.level
        yield
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)

    def test_console_only(self):
        setup_logging(console_level=logging.WARNING)
        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].level == logging.WARNING

    def test_file_handler(self, tmp_path):
        """Detailed logs go to the rotating file"""
        log_file = tmp_path / "logs" / "search.log"
        setup_logging(log_file=log_file)

        logging.getLogger("search_server.test").debug("indexed document 7")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert len(logging.getLogger().handlers) == 2
        assert "indexed document 7" in log_file.read_text(encoding="utf-8")
