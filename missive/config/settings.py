"""Root settings model for Missive configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from missive.config.loader import config_files
from missive.config.models.api import APIConfig, AuthConfig
from missive.config.models.engine import EngineConfig
from missive.config.models.observability import ObservabilityConfig
from missive.config.models.storage import StorageConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Root configuration object containing all nested configuration sections.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{MISSIVE_ENV}.toml (environment overrides)
    4. MISSIVE_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="MISSIVE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(default="missive", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default="INFO", description="Logging level")

    # Nested configuration sections
    api: APIConfig = Field(default_factory=APIConfig, description="API server configuration")
    auth: AuthConfig = Field(default_factory=AuthConfig, description="Caller resolution")
    engine: EngineConfig = Field(
        default_factory=EngineConfig,
        description="Record engine configuration",
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="State persistence configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include the TOML files.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (MISSIVE_* environment variables)
        3. config/{MISSIVE_ENV}.toml
        4. config/default.toml
        5. (defaults from model)

        Sources are deep-merged, so an environment file only needs the keys
        it changes within a section.
        """
        toml_settings = [
            TomlConfigSettingsSource(settings_cls, toml_file=path)
            for path in reversed(config_files())
        ]
        return (init_settings, env_settings, *toml_settings)
