"""Infrastructure: audio player detection and platform guidance.

This module locates a command-line audio player on the system PATH
and provides platform-specific installation guidance when none is
found.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* Players are probed in a fixed preference order.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from define_cli.exceptions import PlaybackError


# ---------------------------------------------------------------------------
# Known players
# ---------------------------------------------------------------------------

PLAYER_ARGS: dict[str, tuple[str, ...]] = {
    "ffplay": ("-nodisp", "-autoexit", "-loglevel", "quiet"),
    "mpg123": ("-q",),
    "afplay": (),
    "mpv": ("--no-video", "--really-quiet"),
}
"""Arguments placed between the player binary and the clip path."""


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlayerStatus:
    """Result of an audio-player probe.

    Attributes
    ----------
    found : bool
        Whether a supported player was located on PATH.
    name : str | None
        Player name (key of :data:`PLAYER_ARGS`), or ``None``.
    path : Path | None
        Absolute path to the player binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing a player on the current
        platform.  Empty when a player is already present.
    """

    found: bool
    name: str | None
    path: Path | None
    install_commands: tuple[str, ...]

    def command(self, clip: Path) -> list[str]:
        """Build the argv that plays *clip* with the detected player."""
        if self.name is None or self.path is None:
            raise PlaybackError("No audio player available.")
        return [str(self.path), *PLAYER_ARGS[self.name], str(clip)]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_player() -> PlayerStatus:
    """Probe the system for the first available audio player.

    Returns a :class:`PlayerStatus` regardless of the outcome — the
    caller decides whether to abort or carry on silently.
    """
    for name in PLAYER_ARGS:
        result = shutil.which(name)
        if result is not None:
            return PlayerStatus(
                found=True,
                name=name,
                path=Path(result).resolve(),
                install_commands=(),
            )

    return PlayerStatus(
        found=False,
        name=None,
        path=None,
        install_commands=_platform_install_commands(),
    )


def require_player() -> PlayerStatus:
    """Locate a player or raise :class:`PlaybackError` with install hints."""
    status = detect_player()
    if not status.found:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append("Install an audio player using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise PlaybackError(
            "No supported audio player found on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Gyan.FFmpeg",
            "choco install ffmpeg",
        )
    if system == "linux":
        return (
            "sudo apt install ffmpeg",
            "sudo dnf install ffmpeg",
            "sudo pacman -S ffmpeg",
        )
    if system == "darwin":
        return ("brew install ffmpeg",)
    return ("Please install ffmpeg from https://ffmpeg.org/download.html",)
