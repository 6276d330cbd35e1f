import json
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

from config_paths import PAGE_SIZE_DEFAULT


class GridConfigError(ValueError):
    """Raised when a prompt is constructed with an unusable configuration."""


@dataclass(frozen=True)
class AxisEntry:
    name: str
    index: int


class Axis:
    """Ordered, immutable sequence of uniquely labelled entries."""

    def __init__(self, kind: str, entries: Iterable[Any]):
        self.kind = kind
        names = [self._entry_name(kind, raw) for raw in entries]
        if not names:
            raise GridConfigError(f"{kind} axis must have at least one entry")
        seen = set()
        for name in names:
            if name in seen:
                raise GridConfigError(f"duplicate {kind} label '{name}'")
            seen.add(name)
        self._entries: Tuple[AxisEntry, ...] = tuple(
            AxisEntry(name, idx) for idx, name in enumerate(names)
        )

    @staticmethod
    def _entry_name(kind: str, raw: Any) -> str:
        if isinstance(raw, dict):
            raw = raw.get("name")
        if raw is None or isinstance(raw, (dict, list, tuple, set)):
            raise GridConfigError(f"{kind} entry needs a name")
        name = str(raw)
        if not name.strip():
            raise GridConfigError(f"{kind} entry needs a name")
        return name

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AxisEntry]:
        return iter(self._entries)

    def __getitem__(self, idx: int) -> AxisEntry:
        return self._entries[idx]

    @property
    def names(self) -> list[str]:
        return [e.name for e in self._entries]


@dataclass(frozen=True)
class GridConfig:
    message: str
    rows: Axis
    columns: Axis
    page_size: int = PAGE_SIZE_DEFAULT
    prefix: str = "?"

    def __post_init__(self):
        if not isinstance(self.message, str) or not self.message.strip():
            raise GridConfigError("message is required")
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise GridConfigError(f"page_size must be an integer, got {self.page_size!r}")
        if self.page_size < 1:
            raise GridConfigError(f"page_size must be positive, got {self.page_size}")

    @classmethod
    def from_dict(cls, data: dict, page_size_default: int = PAGE_SIZE_DEFAULT) -> "GridConfig":
        if not isinstance(data, dict):
            raise GridConfigError("prompt configuration must be a mapping")
        rows = data.get("rows")
        columns = data.get("columns")
        if not isinstance(rows, (list, tuple)):
            raise GridConfigError("rows must be a list")
        if not isinstance(columns, (list, tuple)):
            raise GridConfigError("columns must be a list")
        page_size = data.get("page_size", data.get("pageSize"))
        if page_size is None:
            page_size = page_size_default
        return cls(
            message=data.get("message", ""),
            rows=Axis("row", rows),
            columns=Axis("column", columns),
            page_size=page_size,
            prefix=data.get("prefix", "?"),
        )


def load_grid_file(path: str, page_size_default: int = PAGE_SIZE_DEFAULT) -> GridConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise GridConfigError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise GridConfigError(f"invalid JSON in {path}: {exc}") from exc
    return GridConfig.from_dict(data, page_size_default=page_size_default)
