from __future__ import annotations

"""Full-screen (curses) presenter and input collector.

The sequence and the answer being typed are drawn at fixed rows around the
middle of the screen and the answer row is redrawn on every keystroke.
"""

import curses
import os
from typing import Any, Dict, List, Optional

from .keys import CONFIRM, ERASE, QUIT, QuitRequested, resolve_bindings

ANSWER_ROW_OFFSET = 2
HINT_ROW_OFFSET = 4
ESC_DELAY_MS = 25

READY_HINT = "press confirm when ready"
ANSWER_HINT = "type the numbers, confirm to finish"


class ScreenTerminal:
    """Draws on a curses window and turns key codes into actions."""

    def __init__(self, window: Any, bindings: Optional[Dict[int, str]] = None) -> None:
        self.window = window
        self.bindings = bindings if bindings is not None else resolve_bindings()
        self._rows: Dict[int, str] = {}

    def _center(self, row_offset: int, text: str) -> None:
        self._rows[row_offset] = text
        height, width = self.window.getmaxyx()
        y = min(max(height // 2 + row_offset, 0), max(height - 1, 0))
        text = text[: max(width - 1, 0)]
        x = max((width - len(text)) // 2, 0)
        self.window.move(y, 0)
        self.window.clrtoeol()
        self.window.addstr(y, x, text)

    def _wipe(self) -> None:
        self._rows = {}
        self.window.clear()

    def _redraw(self) -> None:
        rows = dict(self._rows)
        self.window.clear()
        for row_offset, text in rows.items():
            self._center(row_offset, text)
        self.window.refresh()

    def _next_key(self) -> tuple[int, Optional[str]]:
        while True:
            key = self.window.getch()
            if key == curses.KEY_RESIZE:
                self._redraw()
                continue
            action = self.bindings.get(key)
            if action == QUIT:
                raise QuitRequested("quit key pressed")
            return key, action

    def show(self, text: str) -> None:
        self._wipe()
        self._center(0, text)
        self._center(HINT_ROW_OFFSET, READY_HINT)
        self.window.refresh()

    def wait_confirm(self) -> None:
        while True:
            _key, action = self._next_key()
            if action == CONFIRM:
                return

    def clear(self) -> None:
        self._wipe()
        self.window.refresh()

    def read_answer(self) -> str:
        buf: List[str] = []
        self._wipe()
        self._center(HINT_ROW_OFFSET, ANSWER_HINT)
        self._center(ANSWER_ROW_OFFSET, "")
        self.window.refresh()
        while True:
            key, action = self._next_key()
            if action == CONFIRM:
                return "".join(buf)
            if action == ERASE:
                if buf:
                    buf.pop()
            elif 32 <= key < 127:
                buf.append(chr(key))
            else:
                continue
            self._center(ANSWER_ROW_OFFSET, "".join(buf))
            self.window.refresh()

    def inform(self, msg: str) -> None:
        self._wipe()
        lines = msg.splitlines() or [""]
        for i, line in enumerate(lines):
            self._center(i - len(lines) // 2, line)
        self.window.refresh()


class ScreenSession:
    """Owns the curses screen for the length of a ``with`` block.

    The terminal is always restored on exit, including when the quit action
    or Ctrl-C unwinds the run, or when setting the screen up fails part way.
    """

    def __init__(self, bindings: Optional[Dict[int, str]] = None) -> None:
        self.bindings = bindings
        self._stdscr: Any = None

    def __enter__(self) -> ScreenTerminal:
        # Esc quits by default; keep its detection delay short.
        os.environ.setdefault("ESCDELAY", str(ESC_DELAY_MS))
        self._stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self._stdscr.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                pass
        except BaseException:
            self._restore()
            raise
        return ScreenTerminal(self._stdscr, self.bindings)

    def _restore(self) -> None:
        if self._stdscr is None:
            return
        stdscr, self._stdscr = self._stdscr, None
        try:
            stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._restore()
        return False
