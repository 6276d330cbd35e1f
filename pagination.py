def paginate(page_size: int, row: int, total_rows: int) -> tuple[int, int]:
    """Return the inclusive (first, last) row window that keeps ``row`` centered.

    Near the bottom edge the window is shifted up so it stays page_size wide.
    """
    middle = page_size // 2
    first = max(0, row - middle)
    last = min(first + page_size - 1, total_rows - 1)
    short_by = page_size - 1 - last + first
    return max(0, first - short_by), last


class Paginator:
    def __init__(self, total_rows: int, page_size: int = 5):
        self.page_size = page_size
        self.total_rows = max(0, total_rows)
        self.row = 0
        self._window = paginate(self.page_size, self.row, self.total_rows)

    def follow(self, row: int):
        if row < 0:
            row = 0
        if self.total_rows and row > self.total_rows - 1:
            row = self.total_rows - 1
        self.row = row
        self._window = paginate(self.page_size, self.row, self.total_rows)

    @property
    def window(self) -> tuple[int, int]:
        return self._window

    @property
    def page_start(self) -> int:
        return self._window[0]

    @property
    def page_end(self) -> int:
        return self._window[1] + 1

    def visible_rows(self) -> range:
        return range(self.page_start, self.page_end)

    def summary(self) -> str:
        first, last = self._window
        return f"{first + 1}-{last + 1} of {self.total_rows}"
