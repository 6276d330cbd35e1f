from typing import List, NamedTuple, Optional, Sequence


class Span(NamedTuple):
    text: str
    style: Optional[str] = None


Line = List[Span]

BORDER_STYLE = "dim"
PAD = 1

_TOP = ("┌", "┬", "┐")
_MID = ("├", "┼", "┤")
_BOTTOM = ("└", "┴", "┘")
_BAR = "│"
_RULE = "─"


def line_text(line: Sequence[Span]) -> str:
    return "".join(span.text for span in line)


def _column_widths(head: Sequence[Span], rows: Sequence[Sequence[Span]]) -> list[int]:
    widths = [len(cell.text) for cell in head]
    for row in rows:
        for j, cell in enumerate(row):
            widths[j] = max(widths[j], len(cell.text))
    return widths


def _rule(widths: Sequence[int], left: str, joint: str, right: str) -> Line:
    inner = joint.join(_RULE * (w + 2 * PAD) for w in widths)
    return [Span(left + inner + right, BORDER_STYLE)]


def _row(cells: Sequence[Span], widths: Sequence[int]) -> Line:
    line: Line = [Span(_BAR, BORDER_STYLE)]
    for cell, w in zip(cells, widths):
        line.append(Span(" " * PAD))
        line.append(Span(cell.text.ljust(w), cell.style))
        line.append(Span(" " * PAD))
        line.append(Span(_BAR, BORDER_STYLE))
    return line


def format_table(head: Sequence[Span], rows: Sequence[Sequence[Span]]) -> list[Line]:
    """Draw a boxed table with a header row and a rule between every body row."""
    ncols = len(head)
    if any(len(r) != ncols for r in rows):
        raise ValueError("row width != header width")

    widths = _column_widths(head, rows)
    lines = [_rule(widths, *_TOP), _row(head, widths)]
    for row in rows:
        lines.append(_rule(widths, *_MID))
        lines.append(_row(row, widths))
    lines.append(_rule(widths, *_BOTTOM))
    return lines
