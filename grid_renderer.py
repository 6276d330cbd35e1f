from dataclasses import dataclass, field
from typing import List, Optional

from table_format import Line, Span, format_table, line_text

INSTRUCTION_KEYS = (
    ("<enter>", "to submit"),
    ("<Up and Down>", "to move rows"),
    ("<Left and Right>", "to move columns"),
)
ERROR_MARK = ">> "


@dataclass
class Frame:
    lines: List[Line] = field(default_factory=list)
    error: Optional[Line] = None

    @property
    def main_text(self) -> str:
        return "\n".join(line_text(line) for line in self.lines)

    @property
    def error_text(self) -> str:
        return line_text(self.error) if self.error else ""


def _question_line(prefix, message, show_instructions) -> Line:
    line = [Span(prefix, "prefix"), Span(" "), Span(message, "bold"), Span(" ")]
    if show_instructions:
        line.append(Span("(Press "))
        for i, (key, what) in enumerate(INSTRUCTION_KEYS):
            line.append(Span(key, "accent"))
            tail = ", " if i < len(INSTRUCTION_KEYS) - 1 else ")"
            line.append(Span(f" {what}{tail}"))
    return line


def _cell_text(value: str, selected: bool) -> str:
    left, right = ("[", "]") if selected else (" ", " ")
    return f"{left} {value} {right}"


def render_frame(
    *,
    prefix: str,
    message: str,
    row_names,
    column_names,
    cursor,
    values,
    paginator,
    error: Optional[str] = None,
    show_instructions: bool = True,
) -> Frame:
    """Build the full prompt frame for the current state. Pure; draws nothing."""
    cur_row, cur_col = cursor

    head = [Span(paginator.summary(), "dim")]
    for c, name in enumerate(column_names):
        head.append(Span(name, "accent" if c == cur_col else "bold"))

    body = []
    for r in paginator.visible_rows():
        label_style = "accent" if r == cur_row else None
        cells = [Span(row_names[r], label_style)]
        for c in range(len(column_names)):
            selected = r == cur_row and c == cur_col
            cells.append(Span(_cell_text(values.get(r, c), selected)))
        body.append(cells)

    lines: List[Line] = [_question_line(prefix, message, show_instructions), []]
    lines.extend(format_table(head, body))

    error_line = None
    if error:
        error_line = [Span(ERROR_MARK, "error"), Span(error)]
    return Frame(lines, error_line)
