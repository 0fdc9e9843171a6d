from __future__ import annotations

import curses
from typing import Iterable, List


def scripted(values: Iterable):
    """Callable returning the given values one per call, ignoring arguments."""
    it = iter(list(values))

    def _next(*_args, **_kwargs):
        return next(it)

    return _next


class FakeTerminal:
    """Terminal double that answers from a script and records what it saw."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers: List[str] = list(answers)
        self.shown: List[str] = []
        self.informed: List[str] = []
        self.events: List[str] = []

    def show(self, text: str) -> None:
        self.shown.append(text)
        self.events.append("show")

    def wait_confirm(self) -> None:
        self.events.append("confirm")

    def clear(self) -> None:
        self.events.append("clear")

    def read_answer(self) -> str:
        self.events.append("answer")
        return self.answers.pop(0)

    def inform(self, msg: str) -> None:
        self.informed.append(msg)
        self.events.append("inform")


class FakeWindow:
    """Just enough of a curses window for ScreenTerminal."""

    def __init__(self, keys: Iterable[int], size=(24, 80), resize_to=None) -> None:
        self.keys = list(keys)
        self.size = size
        self.resize_to = resize_to
        self.writes: List[tuple] = []
        self.clears = 0
        self.refreshes = 0

    def getmaxyx(self):
        return self.size

    def getch(self) -> int:
        key = self.keys.pop(0)
        if key == curses.KEY_RESIZE and self.resize_to is not None:
            self.size = self.resize_to
        return key

    def move(self, y: int, x: int) -> None:
        pass

    def clrtoeol(self) -> None:
        pass

    def addstr(self, y: int, x: int, text: str) -> None:
        self.writes.append((y, x, text))

    def clear(self) -> None:
        self.clears += 1
        self.writes.clear()

    def refresh(self) -> None:
        self.refreshes += 1

    def text_at(self, y: int) -> List[str]:
        return [t for (row, _x, t) in self.writes if row == y]
