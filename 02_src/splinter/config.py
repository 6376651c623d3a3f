"""Process-wide configuration for splinter log creation."""

import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv
from pydantic import BaseModel

# Source checkout root; inside site-packages once installed.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_ENV_PATH = PROJECT_ROOT / ".env"

PathLike = Union[str, Path]

# Read at call time by events and the serializer. Toggling it while other
# threads build logs is allowed; each build sees one value or the other.
_enabled = True


def set_enabled(enabled: bool) -> None:
    """Globally enable or disable log creation."""
    global _enabled
    _enabled = bool(enabled)


def is_enabled() -> bool:
    """Whether log creation is enabled."""
    return _enabled


class SplinterSettings(BaseModel):
    """Settings read from the environment."""

    enabled: bool = True
    log_level: str = "INFO"
    log_file: str | None = None
    json_logs: bool = False


def load_settings(env_path: PathLike | None = None) -> SplinterSettings:
    """
    Load settings from a .env file and the environment.

    Args:
        env_path: Path to the .env file. Defaults to PROJECT_ROOT/.env, which
                  is only meaningful in a source checkout; pass a path when
                  the package is installed. Variables already set in the
                  environment take precedence.

    Returns:
        Validated settings.
    """
    load_dotenv(env_path if env_path is not None else DEFAULT_ENV_PATH)

    values = {
        "enabled": os.getenv("SPLINTER_ENABLED"),
        "log_level": os.getenv("SPLINTER_LOG_LEVEL"),
        "log_file": os.getenv("SPLINTER_LOG_FILE") or None,
        "json_logs": os.getenv("SPLINTER_JSON_LOGS"),
    }
    return SplinterSettings(**{k: v for k, v in values.items() if v is not None})


def configure(settings: SplinterSettings | None = None) -> SplinterSettings:
    """Apply settings to the global switch, loading them when not given."""
    if settings is None:
        settings = load_settings()

    set_enabled(settings.enabled)
    return settings
