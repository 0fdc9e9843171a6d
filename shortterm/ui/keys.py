from __future__ import annotations

"""Symbolic key actions for the full-screen mode.

Config binds each action to a list of key names; the screen terminal only
ever sees the resolved ``{key code: action}`` map.
"""

import curses
from typing import Dict, Iterable, List, Mapping, Tuple

QUIT = "quit"
CONFIRM = "confirm"
ERASE = "erase"
ACTIONS: Tuple[str, ...] = (QUIT, CONFIRM, ERASE)

DEFAULT_BINDINGS: Dict[str, List[str]] = {
    CONFIRM: ["enter"],
    ERASE: ["backspace"],
    QUIT: ["esc"],
}

KEY_NAMES: Dict[str, Tuple[int, ...]] = {
    "enter": (10, 13, curses.KEY_ENTER),
    "backspace": (8, 127, curses.KEY_BACKSPACE),
    "delete": (curses.KEY_DC,),
    "esc": (27,),
    "tab": (9,),
    "space": (32,),
    "ctrl-c": (3,),
    "ctrl-d": (4,),
}


class QuitRequested(Exception):
    """The user asked to abandon the run."""


def key_codes(name: str) -> Tuple[int, ...]:
    """Return the key codes a key name stands for.

    Named keys come from ``KEY_NAMES``; any single printable character
    stands for itself.
    """
    n = str(name).strip()
    lowered = n.lower()
    if lowered in KEY_NAMES:
        return KEY_NAMES[lowered]
    if len(n) == 1 and n.isprintable():
        return (ord(n),)
    raise ValueError(f"Unknown key name: {name!r}")


def resolve_bindings(bindings: Mapping[str, Iterable[str]] | None = None) -> Dict[int, str]:
    """Turn ``{action: [key names]}`` into ``{key code: action}``.

    Actions missing from ``bindings`` keep their defaults. A key bound to
    two actions is rejected.
    """
    merged: Dict[str, List[str]] = {a: list(k) for a, k in DEFAULT_BINDINGS.items()}
    for action, names in (bindings or {}).items():
        if action not in ACTIONS:
            raise ValueError(f"Unknown key action: {action!r}")
        if isinstance(names, str):
            names = [names]
        merged[action] = list(names)

    resolved: Dict[int, str] = {}
    for action, names in merged.items():
        for name in names:
            for code in key_codes(name):
                other = resolved.get(code)
                if other is not None and other != action:
                    raise ValueError(f"Key {name!r} is bound to both {other!r} and {action!r}")
                resolved[code] = action
    return resolved
