"""Unit tests for the settings model.

Tests verify that the Settings model binds the WAHLPROGRAMM_* environment
variables and derives the connection string from the store path.
"""

from pathlib import Path

import pytest

from wahlprogramm.core.config import (
    DEFAULT_DATABASE_PATH,
    DatabaseConfig,
    LoggingConfig,
    Settings,
    sqlite_url_for,
)


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestDefaults:
    def test_database_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.database_path == DEFAULT_DATABASE_PATH
        assert settings.database_url is None
        assert settings.database.resolved_url == sqlite_url_for(DEFAULT_DATABASE_PATH)

    def test_logging_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "detailed"
        assert settings.enable_file_logging is False


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_env_example_binds(self, env_example_vars: dict[str, str], monkeypatch):
        for key, value in env_example_vars.items():
            monkeypatch.setenv(key, value)

        settings = Settings(_env_file=None)

        assert settings.database_path == env_example_vars["WAHLPROGRAMM_DATABASE_PATH"]
        assert settings.log_level == env_example_vars["WAHLPROGRAMM_LOG_LEVEL"]
        assert settings.log_file_dir == env_example_vars["WAHLPROGRAMM_LOG_FILE_DIR"]

    def test_database_path_binding(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("WAHLPROGRAMM_DATABASE_PATH", str(tmp_path / "store.sql"))

        settings = Settings(_env_file=None)

        assert settings.database.path == str(tmp_path / "store.sql")
        assert settings.database.resolved_url == f"sqlite:///{tmp_path / 'store.sql'}"

    def test_explicit_url_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("WAHLPROGRAMM_DATABASE_PATH", "ignored.sql")
        monkeypatch.setenv("WAHLPROGRAMM_DATABASE_URL", "jdbc:sqlite:/wahlprogramm.sql")

        settings = Settings(_env_file=None)

        assert settings.database.resolved_url == "jdbc:sqlite:/wahlprogramm.sql"

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("false", False), ("0", False)])
    def test_file_logging_flag(self, monkeypatch, raw, expected):
        monkeypatch.setenv("WAHLPROGRAMM_ENABLE_FILE_LOGGING", raw)

        assert Settings(_env_file=None).enable_file_logging is expected

    def test_env_file_is_read(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("WAHLPROGRAMM_LOG_LEVEL=DEBUG\n", encoding="utf-8")

        assert Settings(_env_file=env_file).log_level == "DEBUG"


class TestGroupedConfig:
    def test_database_group(self):
        database = Settings(_env_file=None, WAHLPROGRAMM_DATABASE_PATH="data/store.sql").database

        assert isinstance(database, DatabaseConfig)
        assert database.path == "data/store.sql"
        assert database.resolved_url == sqlite_url_for("data/store.sql")

    def test_logging_group(self):
        logging_config = Settings(_env_file=None, WAHLPROGRAMM_LOG_FORMAT="json").logging

        assert isinstance(logging_config, LoggingConfig)
        assert logging_config.format == "json"
        assert logging_config.level == "INFO"
