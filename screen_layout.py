import curses

from table_format import line_text


class ScreenLayout:
    """Curses render sink: draws the prompt frame, error line below it."""

    PAIR_PREFIX = 1
    PAIR_ACCENT = 2
    PAIR_ERROR = 3

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.styles = {}
        self._cursor_state = None
        self.last_frame = None

    def start(self):
        try:
            self._cursor_state = curses.curs_set(0)
        except curses.error:
            self._cursor_state = None
        self._init_styles()

    def _init_styles(self):
        self.styles = {
            "bold": curses.A_BOLD,
            "dim": curses.A_DIM,
            "prefix": curses.A_NORMAL,
            "accent": curses.A_BOLD,
            "error": curses.A_NORMAL,
        }
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_PREFIX, curses.COLOR_GREEN, -1)
            curses.init_pair(self.PAIR_ACCENT, curses.COLOR_CYAN, -1)
            curses.init_pair(self.PAIR_ERROR, curses.COLOR_RED, -1)
        except curses.error:
            return
        self.styles["prefix"] = curses.color_pair(self.PAIR_PREFIX)
        self.styles["accent"] = curses.color_pair(self.PAIR_ACCENT) | curses.A_BOLD
        self.styles["error"] = curses.color_pair(self.PAIR_ERROR)

    def _attr(self, style):
        if style is None:
            return curses.A_NORMAL
        return self.styles.get(style, curses.A_NORMAL)

    def _draw_line(self, y, line, width):
        x = 0
        for span in line:
            if x >= width:
                break
            try:
                self.stdscr.addnstr(y, x, span.text, width - x, self._attr(span.style))
            except curses.error:
                # writing into the last cell of the window raises after drawing
                pass
            x += len(span.text)

    def render(self, frame):
        self.last_frame = frame
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()
        lines = list(frame.lines)
        if frame.error:
            lines.append(frame.error)
        for y, line in enumerate(lines):
            if y >= h:
                break
            self._draw_line(y, line, w)
        self.stdscr.refresh()

    def done(self):
        if self._cursor_state is None:
            return
        try:
            curses.curs_set(self._cursor_state)
        except curses.error:
            pass
        self._cursor_state = None

    @staticmethod
    def plain(frame) -> str:
        text = frame.main_text
        if frame.error:
            text += "\n" + line_text(frame.error)
        return text
