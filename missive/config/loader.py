"""Locating the TOML files that make up the layered configuration.

Missive reads `default.toml` and then `{MISSIVE_ENV}.toml` from one
config directory. Parsing and merging are left to pydantic-settings;
this module only decides which files apply.
"""

import os
from pathlib import Path

DEFAULT_FILE = "default.toml"
DEFAULT_ENVIRONMENT = "development"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    `MISSIVE_CONFIG_DIR` wins when set and must exist. Otherwise the
    nearest `config/` directory from the working directory upwards is
    used, so the service can be started from a subdirectory of a checkout.
    """
    config_dir_env = os.environ.get("MISSIVE_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    for parent in (Path.cwd(), *Path.cwd().parents):
        candidate = parent / "config"
        if candidate.is_dir():
            return candidate

    return Path("config")


def get_environment() -> str:
    """Get the current environment name from MISSIVE_ENV."""
    return os.environ.get("MISSIVE_ENV", DEFAULT_ENVIRONMENT)


def config_files(config_dir: Path | None = None, environment: str | None = None) -> list[Path]:
    """TOML files that apply, lowest precedence first.

    Files that don't exist are left out, so a deployment with no config
    directory runs on model defaults and environment variables alone.
    """
    config_dir = config_dir if config_dir is not None else get_config_dir()
    environment = environment or get_environment()

    candidates = [config_dir / DEFAULT_FILE]
    if environment != "default":
        candidates.append(config_dir / f"{environment}.toml")

    return [path for path in candidates if path.is_file()]
