"""Playback through an external player program, one file at a time."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Player name that selects the in-process backend in splay.audio.
BUILTIN = "builtin"


class PlaybackError(RuntimeError):
    """Raised when a track cannot be played."""


class Player(Protocol):
    def play(self, file_path: Path) -> None:
        """Play *file_path* to completion."""


class ExternalPlayer:
    """Runs ``<command> <file>`` and waits for it to exit."""

    def __init__(self, command: str) -> None:
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    def play(self, file_path: Path) -> None:
        logger.debug("Running %s %s", self._command, file_path)
        try:
            subprocess.run([self._command, str(file_path)], check=True)
        except subprocess.CalledProcessError as exc:
            raise PlaybackError(
                f"{self._command} exited with status {exc.returncode} "
                f"while playing {file_path}"
            ) from exc
        except OSError as exc:
            raise PlaybackError(f"Cannot run {self._command}: {exc}") from exc


def make_player(name: str) -> Player:
    """Return the player for *name*: the built-in backend or a program."""
    if name == BUILTIN:
        from splay.audio import AudioPlayer

        return AudioPlayer()
    return ExternalPlayer(name)
