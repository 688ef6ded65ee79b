"""CLI application entry point for ``define``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~define_cli.exceptions.DefineError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing, dispatching and grouping are
  delegated to the core layer, I/O to the infra layer.
* ``print()`` is not used; Rich consoles are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rich.markup import escape

from define_cli.cli import exit_codes
from define_cli.cli.console import configure_logging, console, output
from define_cli.cli.presenter import present
from define_cli.cli.usage import print_usage
from define_cli.core.aggregator import aggregate
from define_cli.core.arguments import parse
from define_cli.core.dispatcher import QueryDispatcher
from define_cli.core.models import AudioClip, RequestDescriptor
from define_cli.core.protocols import AudioOutput
from define_cli.exceptions import DefineError, HelpRequested, PlaybackError, UsageError
from define_cli.infra.audio_player import SubprocessAudioPlayer
from define_cli.infra.config_store import AppConfig, load_config
from define_cli.infra.http_transport import HttpxTransport

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command flow
# ---------------------------------------------------------------------------

def _handle_lookup(descriptor: RequestDescriptor, config: AppConfig) -> int:
    """Fetch, group, render, and optionally play the word.

    Flow:
    1. Definitions, pronunciation, and (if asked) audio via the dispatcher.
    2. Group records by headword.
    3. Render to stdout.
    4. Play the audio clip, blocking until it finishes or times out.
    """
    api_key = config.require_api_key()

    with HttpxTransport() as transport:
        dispatcher = QueryDispatcher(transport, api_key, api_url=config.api_url)
        result = dispatcher.dispatch(descriptor)

    groups = aggregate(result.records, result.pronunciation)
    present(groups, output)

    if result.audio is not None:
        _play(result.audio, SubprocessAudioPlayer(), config.playback_timeout)
    return exit_codes.SUCCESS


def _play(clip: AudioClip, player: AudioOutput, timeout: float) -> None:
    """Play *clip*; playback problems never fail the command."""
    try:
        player.play(clip.payload, timeout=timeout)
    except PlaybackError as exc:
        logger.info("Audio not played (%s): %s", clip.url, exc)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the define CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    DefineError
        Usage, configuration, and definitions-lookup failures; rendered
        by :func:`cli`.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    try:
        descriptor = parse(tokens)
    except HelpRequested:
        print_usage()
        return exit_codes.SUCCESS
    except UsageError:
        print_usage()
        raise

    config = load_config()
    configure_logging(config.log_level)

    return _handle_lookup(descriptor, config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DefineError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
