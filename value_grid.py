from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class CellRecord:
    row: str
    column: str
    value: str


class ValueGrid:
    """Fixed-shape text store for the prompt; every cell starts out empty."""

    def __init__(self, n_rows: int, n_cols: int):
        self.shape = (n_rows, n_cols)
        self._cells = np.full(self.shape, "", dtype=object)

    def get(self, row: int, col: int) -> str:
        return self._cells[row, col]

    def append(self, row: int, col: int, text: str) -> str:
        value = self._cells[row, col] + text
        self._cells[row, col] = value
        return value

    def backspace(self, row: int, col: int) -> str:
        value = self._cells[row, col]
        if value:
            value = value[:-1]
            self._cells[row, col] = value
        return value

    def snapshot(self) -> np.ndarray:
        return self._cells.copy()

    def is_empty(self) -> bool:
        return not any(self._cells.flat)

    # ---------- result shaping ----------
    def records(self, rows: Sequence[str], columns: Sequence[str]) -> list[CellRecord]:
        self._check_labels(rows, columns)
        out = []
        for r, row_name in enumerate(rows):
            for c, col_name in enumerate(columns):
                out.append(CellRecord(row_name, col_name, self._cells[r, c]))
        return out

    def to_flat(self, rows: Sequence[str], columns: Sequence[str]) -> dict[str, str]:
        return {f"{rec.row}_{rec.column}": rec.value for rec in self.records(rows, columns)}

    def to_frame(self, rows: Sequence[str], columns: Sequence[str]) -> pd.DataFrame:
        self._check_labels(rows, columns)
        return pd.DataFrame(
            self.snapshot(),
            index=pd.Index(list(rows), name="row"),
            columns=list(columns),
        )

    def _check_labels(self, rows, columns):
        if (len(rows), len(columns)) != self.shape:
            raise ValueError(
                f"labels {len(rows)}x{len(columns)} do not match grid {self.shape[0]}x{self.shape[1]}"
            )
