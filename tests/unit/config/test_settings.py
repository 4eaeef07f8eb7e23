"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from missive.config import get_settings, reload_settings
from missive.config.models import EngineConfig
from missive.config.settings import Settings


@pytest.fixture
def use_config_dir(test_config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("MISSIVE_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("MISSIVE_ENV", "test")
    return test_config_dir


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "missive"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_engine_defaults(self) -> None:
        settings = Settings()
        assert settings.engine.creator is None
        assert settings.engine.seed_message == "I created my CRUD contract"
        assert settings.engine.min_message_length == 10

    def test_nested_defaults(self) -> None:
        settings = Settings()
        assert settings.api.port == 8000
        assert settings.auth.jwt_algorithm == "HS256"
        assert settings.auth.identity_claim == "sub"
        assert settings.storage.snapshot_path is None
        assert settings.observability.logging.format == "json"
        assert settings.observability.logging.redact_secrets is True
        assert settings.observability.metrics.enabled is True

    def test_invalid_min_length(self) -> None:
        with pytest.raises(ValidationError):
            EngineConfig(min_message_length=0)


class TestTomlLayering:
    """Tests for the default.toml / {env}.toml / environment layering."""

    def test_default_file(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({"default.toml": '[engine]\ncreator = "from-toml"'})

        assert Settings().engine.creator == "from-toml"

    def test_environment_file_merges_into_sections(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({
            "default.toml": '[engine]\ncreator = "base"\nmin_message_length = 12',
            "test.toml": '[engine]\ncreator = "test-owner"',
        })

        engine = Settings().engine

        assert engine.creator == "test-owner"
        assert engine.min_message_length == 12

    def test_other_environment_files_ignored(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({
            "default.toml": "debug = false",
            "production.toml": "debug = true",
        })

        assert Settings().debug is False

    def test_env_overrides_toml(self, use_config_dir, mock_toml_files, env_override) -> None:
        mock_toml_files({"default.toml": '[engine]\ncreator = "from-toml"'})

        with env_override({"MISSIVE_ENGINE__CREATOR": "from-env"}):
            assert Settings().engine.creator == "from-env"

    def test_init_overrides_toml(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({"default.toml": '[engine]\ncreator = "from-toml"'})

        settings = Settings(engine=EngineConfig(creator="from-init"))

        assert settings.engine.creator == "from-init"

    def test_cors_origins_from_string(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({"default.toml": '[api]\ncors_origins = "http://a.test, http://b.test"'})

        assert Settings().api.cors_origins == ["http://a.test", "http://b.test"]


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_from_config_dir(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({
            "default.toml": '[engine]\ncreator = "owner-from-file"',
            "test.toml": "[storage]\nsnapshot_path = \"var/state.json\"",
        })

        settings = get_settings()

        assert settings.engine.creator == "owner-from-file"
        assert settings.storage.snapshot_path == Path("var/state.json")

    def test_cached(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "debug = true"})

        assert get_settings() is get_settings()

    def test_reload(self, use_config_dir, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "debug = false"})
        first = get_settings()

        mock_toml_files({"default.toml": "debug = true"})
        second = reload_settings()

        assert first.debug is False
        assert second.debug is True
