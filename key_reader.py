import curses
import logging

from grid_events import event_from_key

logger = logging.getLogger(__name__)


class KeyReader:
    """Event source: yields prompt events from a curses window, in key order."""

    def __init__(self, win):
        self.win = win
        self.win.keypad(True)

    def __iter__(self):
        while True:
            try:
                key = self.win.get_wch()
            except curses.error:
                # read timeout or no input yet
                continue
            event = event_from_key(key)
            if event is None:
                logger.debug("ignored key %r", key)
                continue
            yield event
