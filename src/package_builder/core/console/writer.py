"""
Line-oriented console output.
"""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleWriter:
    """Writes messages to stdout and errors to stderr.

    Streams are resolved at write time unless given explicitly, so pytest's
    output capturing sees everything written.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def new_line(self) -> None:
        self.write_message("")

    def write_message(self, message: str) -> None:
        print(message, file=self.out)

    def write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.write_message(line)

    def write_error(self, message: str) -> None:
        print(message, file=self.err)

    def write_error_detail(self, message: str) -> None:
        print(message, file=self.err)
