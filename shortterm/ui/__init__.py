from __future__ import annotations

"""Terminal front-ends shared by the plain and full-screen modes."""

from typing import Protocol

from .keys import QuitRequested


class Terminal(Protocol):
    def show(self, text: str) -> None: ...

    def wait_confirm(self) -> None: ...

    def clear(self) -> None: ...

    def read_answer(self) -> str: ...

    def inform(self, msg: str) -> None: ...


__all__ = ["QuitRequested", "Terminal"]
