"""Per-user configuration: the API key and a few runtime settings.

Settings live in a dotenv-style file (``define.env``) read with
python-dotenv.  The file is created with an empty API key the first
time it is looked for, so users have an obvious place to put the key.

Precedence
----------
process environment > config file > built-in defaults.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, set_key

from define_cli.core.models import API_URL
from define_cli.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: str = "define.env"
APP_DIR_NAME: str = "define"

API_KEY_VAR: str = "DEFINE_API_KEY"
API_URL_VAR: str = "DEFINE_API_URL"
PLAYBACK_TIMEOUT_VAR: str = "DEFINE_PLAYBACK_TIMEOUT"
LOG_LEVEL_VAR: str = "DEFINE_LOG_LEVEL"

DEFAULT_PLAYBACK_TIMEOUT_S: float = 30.0
DEFAULT_LOG_LEVEL: str = "WARNING"

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Resolved settings for one run."""

    path: Path
    """File the settings were read from."""

    api_key: str = ""
    api_url: str = API_URL
    playback_timeout: float = DEFAULT_PLAYBACK_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    def require_api_key(self) -> str:
        """Return the API key or raise :class:`ConfigError` when it is empty."""
        if not self.api_key:
            raise ConfigError(
                "No Wordnik API key configured.",
                hint=f"Set {API_KEY_VAR} in {self.path} or in the environment.",
            )
        return self.api_key


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def default_config_path() -> Path:
    """Return the per-user config file path.

    ``$DEFINE_CONFIG_DIR`` wins, then ``$XDG_CONFIG_HOME/define``, then
    ``~/.config/define``.
    """
    override = os.environ.get("DEFINE_CONFIG_DIR")
    if override:
        return Path(override).expanduser() / CONFIG_FILENAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / APP_DIR_NAME / CONFIG_FILENAME


def ensure_config_file(path: Path) -> None:
    """Create *path* holding an empty API key if it does not exist yet."""
    if path.exists():
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        set_key(path, API_KEY_VAR, "")
    except OSError as exc:
        raise ConfigError(
            f"Could not create config file {path}: {exc.strerror or exc}",
        ) from exc
    logger.info("Created config file %s", path)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_config(path: Path | None = None) -> AppConfig:
    """Read settings from *path* (default location when ``None``).

    Raises
    ------
    ConfigError
        If the file cannot be created or a setting has an invalid value.
    """
    config_path = path if path is not None else default_config_path()
    ensure_config_file(config_path)

    try:
        values = dotenv_values(config_path)
    except OSError as exc:
        raise ConfigError(f"Could not read config file {config_path}: {exc}") from exc

    def setting(name: str) -> str | None:
        raw = os.environ.get(name)
        if raw is None:
            raw = values.get(name)
        return raw.strip() if raw is not None else None

    return AppConfig(
        path=config_path,
        api_key=setting(API_KEY_VAR) or "",
        api_url=setting(API_URL_VAR) or API_URL,
        playback_timeout=_parse_timeout(setting(PLAYBACK_TIMEOUT_VAR), config_path),
        log_level=_parse_log_level(setting(LOG_LEVEL_VAR)),
    )


def _parse_timeout(raw: str | None, path: Path) -> float:
    if not raw:
        return DEFAULT_PLAYBACK_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(
            f"Invalid {PLAYBACK_TIMEOUT_VAR}: '{raw}'",
            hint=f"Use a positive number of seconds in {path}.",
        )
    return value


def _parse_log_level(raw: str | None) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"Invalid {LOG_LEVEL_VAR}: '{raw}'",
            hint="Use one of: " + ", ".join(sorted(_LOG_LEVELS)),
        )
    return level
