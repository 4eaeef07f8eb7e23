"""Configuration model exports.

This module exports all configuration models for easy access:

    from missive.config.models import APIConfig, EngineConfig
"""

from missive.config.models.api import APIConfig, AuthConfig
from missive.config.models.engine import EngineConfig
from missive.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from missive.config.models.storage import StorageConfig

__all__ = [
    # API
    "APIConfig",
    "AuthConfig",
    # Engine
    "EngineConfig",
    # Observability
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    # Storage
    "StorageConfig",
]
