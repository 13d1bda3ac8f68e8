"""Reads words aloud through a speech command, one utterance at a time."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

DEFAULT_COMMAND = ("say", "-v", "Samantha")


class Speaker:
    """Speaks text with an external command, cutting off the previous utterance.

    Speech is enabled by default only on macOS, where the command exists.
    """

    def __init__(
        self, command: Sequence[str] = DEFAULT_COMMAND, enabled: bool | None = None
    ) -> None:
        self.command = tuple(command)
        self.enabled = sys.platform == "darwin" if enabled is None else enabled
        self._process: subprocess.Popen | None = None

    @property
    def process(self) -> subprocess.Popen | None:
        """The running speech process, if any."""
        return self._process

    def speak(self, text: str) -> None:
        self.stop()
        if not self.enabled:
            return
        self._process = subprocess.Popen(
            [*self.command, text],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def stop(self) -> None:
        process, self._process = self._process, None
        if process is None:
            return
        if process.poll() is None:
            process.kill()
        process.wait()

    def __enter__(self) -> Speaker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()