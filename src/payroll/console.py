"""Console seam: line-oriented operator I/O.

Everything the ledger shows or asks goes through a Console, so a
scripted console can stand in for the terminal.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Console(Protocol):
    """Read one line of operator input; write operator-facing text.

    ask() raises EOFError when the input stream is exhausted.
    """

    def ask(self, prompt: str) -> str:
        ...

    def say(self, text: str = "") -> None:
        ...


class TerminalConsole:
    """Console bound to input() and print() unless other callables are given."""

    def __init__(
        self,
        reader: Optional[Callable[[str], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._reader = reader
        self._writer = writer

    def ask(self, prompt: str) -> str:
        if self._reader is None:
            return input(prompt)
        return self._reader(prompt)

    def say(self, text: str = "") -> None:
        if self._writer is None:
            print(text)
        else:
            self._writer(text)
