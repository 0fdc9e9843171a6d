from __future__ import annotations

"""Line-oriented terminal: print the numbers, read answers from stdin."""

import sys
from typing import TextIO

from .keys import QuitRequested

CLEAR_SEQUENCE = "\033[H\033[2J"


class PlainTerminal:
    """Presenter and input collector over plain text streams.

    Enter confirms; end of input counts as the quit action.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise QuitRequested("end of input")
        return line.rstrip("\r\n")

    def show(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    def wait_confirm(self) -> None:
        self._readline()

    def clear(self) -> None:
        self.stdout.write(CLEAR_SEQUENCE)
        self.stdout.flush()

    def read_answer(self) -> str:
        return self._readline()

    def inform(self, msg: str) -> None:
        print(msg, file=self.stdout, flush=True)
