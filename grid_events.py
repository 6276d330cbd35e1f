import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class EventKind(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    BACKSPACE = "backspace"
    CHARACTER = "character"
    SUBMIT = "submit"
    REDRAW = "redraw"


@dataclass(frozen=True)
class GridEvent:
    kind: EventKind
    char: Optional[str] = None

    @classmethod
    def character(cls, ch: str) -> "GridEvent":
        return cls(EventKind.CHARACTER, ch)


UP = GridEvent(EventKind.MOVE_UP)
DOWN = GridEvent(EventKind.MOVE_DOWN)
LEFT = GridEvent(EventKind.MOVE_LEFT)
RIGHT = GridEvent(EventKind.MOVE_RIGHT)
BACKSPACE = GridEvent(EventKind.BACKSPACE)
SUBMIT = GridEvent(EventKind.SUBMIT)
REDRAW = GridEvent(EventKind.REDRAW)

_SPECIAL_KEYS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_BACKSPACE: BACKSPACE,
    curses.KEY_ENTER: SUBMIT,
    curses.KEY_RESIZE: REDRAW,
}

_CONTROL_CHARS = {
    "\n": SUBMIT,
    "\r": SUBMIT,
    "\x7f": BACKSPACE,
    "\b": BACKSPACE,
}


def event_from_key(key: Union[str, int]) -> Optional[GridEvent]:
    """Map a ``get_wch`` result to an event, or None for keys the prompt ignores."""
    if isinstance(key, int):
        if key in _SPECIAL_KEYS:
            return _SPECIAL_KEYS[key]
        if key < 0 or curses.KEY_MIN <= key <= curses.KEY_MAX:
            return None
        # getch-style codes for plain characters
        try:
            key = chr(key)
        except (ValueError, OverflowError):
            return None

    if key in _CONTROL_CHARS:
        return _CONTROL_CHARS[key]
    if len(key) == 1 and key.isprintable():
        return GridEvent.character(key)
    return None
