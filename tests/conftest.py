"""Shared fixtures: a scripted console that replays operator input."""

from __future__ import annotations

from typing import Iterable

import pytest


class ScriptedConsole:
    """Console that answers prompts from a fixed script.

    Raises EOFError once the script is exhausted, like input() at end
    of stream. Everything prompted or printed is kept in transcript.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.transcript: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.transcript.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def say(self, text: str = "") -> None:
        self.transcript.append(text + "\n")

    @property
    def output(self) -> str:
        return "".join(self.transcript)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@pytest.fixture
def scripted():
    """Factory: scripted("E1", "Ann", "5000") -> ScriptedConsole."""
    def make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)
    return make
