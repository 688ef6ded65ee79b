"""Subprocess-backed implementation of :class:`~define_cli.core.protocols.AudioOutput`.

The clip is written to a temporary file and handed to an external
player found by :mod:`define_cli.infra.player_detector`.  The call
blocks until the player exits; a player that runs past the timeout is
killed, so a hung playback cannot stall the process.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from define_cli.exceptions import PlaybackError
from define_cli.infra.player_detector import PlayerStatus, require_player

logger = logging.getLogger(__name__)


class SubprocessAudioPlayer:
    """Concrete :class:`AudioOutput` that shells out to a CLI player.

    Parameters
    ----------
    player:
        A detected player.  When ``None``, the PATH is probed lazily on
        the first :meth:`play` call.
    """

    def __init__(self, player: PlayerStatus | None = None) -> None:
        self._player: PlayerStatus | None = player

    def _resolve_player(self) -> PlayerStatus:
        if self._player is None:
            self._player = require_player()
            logger.info("Using audio player %s", self._player.path)
        return self._player

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def play(self, payload: bytes, *, timeout: float) -> None:
        """Play *payload* to completion, or give up after *timeout* seconds.

        Raises
        ------
        PlaybackError
            When no player is available, the player exits non-zero or
            cannot be started, or the timeout elapses.
        """
        player = self._resolve_player()

        fd, name = tempfile.mkstemp(prefix="define-", suffix=".mp3")
        clip = Path(name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            self._run(player.command(clip), timeout)
        finally:
            clip.unlink(missing_ok=True)

    @staticmethod
    def _run(argv: list[str], timeout: float) -> None:
        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise PlaybackError(
                f"Audio playback did not finish within {timeout:g}s.",
            ) from exc
        except OSError as exc:
            raise PlaybackError(f"Could not start audio player: {exc}") from exc

        if completed.returncode != 0:
            raise PlaybackError(
                f"Audio player exited with status {completed.returncode}.",
            )
        logger.debug("Playback finished")
