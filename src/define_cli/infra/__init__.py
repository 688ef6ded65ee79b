"""Infrastructure layer — external system integration.

This layer wraps all interaction with the network (httpx), the
per-user config file, and external audio players.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~define_cli.exceptions.DefineError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from define_cli.infra.audio_player import SubprocessAudioPlayer
from define_cli.infra.config_store import AppConfig, load_config
from define_cli.infra.http_transport import HttpxTransport
from define_cli.infra.player_detector import PlayerStatus, detect_player, require_player

__all__: list[str] = [
    "AppConfig",
    "HttpxTransport",
    "PlayerStatus",
    "SubprocessAudioPlayer",
    "detect_player",
    "load_config",
    "require_player",
]
