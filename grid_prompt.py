import logging
from typing import Any, Callable, Iterable, Optional

from grid_config import GridConfig
from grid_events import EventKind, GridEvent
from grid_renderer import Frame, render_frame
from pagination import Paginator
from value_grid import ValueGrid

logger = logging.getLogger(__name__)

DEFAULT_INVALID_MESSAGE = "Invalid input"


class ValidationRejected(Exception):
    def __init__(self, message: str = DEFAULT_INVALID_MESSAGE):
        super().__init__(message)
        self.message = message


class PromptAborted(Exception):
    """The event source ran dry before a submit was accepted."""


class GridPrompt:
    """Keyboard-driven editor for a rows x columns grid of text cells.

    Rows clamp at both ends; columns wrap around. Every transition ends with a
    render to the sink. ``run`` drives the prompt from an event source and
    returns the flat ``{"<row>_<column>": value}`` result once a submit is
    accepted by the validator.
    """

    def __init__(
        self,
        config: GridConfig,
        sink,
        validate: Optional[Callable[[Any], Any]] = None,
        filter: Optional[Callable[[dict], Any]] = None,
        show_instructions: bool = True,
    ):
        self.config = config
        self.sink = sink
        self._validate = validate
        self._filter = filter
        self.show_instructions = show_instructions

        self.row_names = config.rows.names
        self.column_names = config.columns.names
        self.row = 0
        self.column = 0
        self.values = ValueGrid(len(self.row_names), len(self.column_names))
        self.paginator = Paginator(len(self.row_names), config.page_size)

        self.error: Optional[str] = None
        self.done = False
        self.result: Any = None

    @property
    def cursor(self) -> tuple[int, int]:
        return self.row, self.column

    # ---------- navigation ----------
    def move_up(self):
        self.row = max(0, self.row - 1)
        self._after_transition()

    def move_down(self):
        self.row = min(len(self.row_names) - 1, self.row + 1)
        self._after_transition()

    def move_left(self):
        self.column = self.column - 1 if self.column > 0 else len(self.column_names) - 1
        self._after_transition()

    def move_right(self):
        self.column = self.column + 1 if self.column < len(self.column_names) - 1 else 0
        self._after_transition()

    # ---------- editing ----------
    def input_char(self, ch: str):
        value = self.values.append(self.row, self.column, ch)
        logger.debug("cell (%d, %d) -> %r", self.row, self.column, value)
        self._after_transition()

    def backspace(self):
        self.values.backspace(self.row, self.column)
        self._after_transition()

    # ---------- submit ----------
    def current_value(self) -> dict[str, str]:
        return self.values.to_flat(self.row_names, self.column_names)

    def frame_result(self):
        return self.values.to_frame(self.row_names, self.column_names)

    def submit(self) -> bool:
        candidate = self.current_value()
        if self._filter is not None:
            candidate = self._filter(candidate)

        message = self._check(candidate)
        if message is not None:
            logger.info("submit rejected: %s", message)
            self.error = message
            self.render()
            return False

        self.result = candidate
        self.error = None
        self.done = True
        self.render()
        logger.debug("submit accepted at cursor %s", self.cursor)
        return True

    def _check(self, candidate) -> Optional[str]:
        if self._validate is None:
            return None
        try:
            verdict = self._validate(candidate)
        except ValidationRejected as exc:
            return exc.message
        if verdict is True:
            return None
        if isinstance(verdict, str) and verdict:
            return verdict
        return DEFAULT_INVALID_MESSAGE

    # ---------- dispatch ----------
    def handle(self, event: GridEvent):
        if self.done:
            return
        kind = event.kind
        if kind is EventKind.MOVE_UP:
            self.move_up()
        elif kind is EventKind.MOVE_DOWN:
            self.move_down()
        elif kind is EventKind.MOVE_LEFT:
            self.move_left()
        elif kind is EventKind.MOVE_RIGHT:
            self.move_right()
        elif kind is EventKind.BACKSPACE:
            self.backspace()
        elif kind is EventKind.CHARACTER:
            if event.char:
                self.input_char(event.char)
        elif kind is EventKind.SUBMIT:
            self.submit()
        elif kind is EventKind.REDRAW:
            self.render()

    def run(self, events: Iterable[GridEvent]):
        self.sink.start()
        try:
            self.render()
            for event in events:
                self.handle(event)
                if self.done:
                    return self.result
        finally:
            self.sink.done()
        raise PromptAborted("input ended before the grid was submitted")

    # ---------- rendering ----------
    def frame(self) -> Frame:
        return render_frame(
            prefix=self.config.prefix,
            message=self.config.message,
            row_names=self.row_names,
            column_names=self.column_names,
            cursor=self.cursor,
            values=self.values,
            paginator=self.paginator,
            error=self.error,
            show_instructions=self.show_instructions,
        )

    def render(self):
        self.sink.render(self.frame())

    def _after_transition(self):
        self.error = None
        self.paginator.follow(self.row)
        self.render()
