from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError, convert, section

# One cell of border on each side of a widget
BORDER = 2

def _sizes(grid: dict, key: str) -> tuple[int, ...]:
    values = grid.get(key) or []
    if not isinstance(values, list):
        raise ConfigurationError(f"grid.{key} must be a list of cell counts")
    sizes = tuple(convert(v, int, f"grid.{key}") for v in values)
    if any(s < 0 for s in sizes):
        raise ConfigurationError(f"grid.{key} must not contain negative sizes: {list(sizes)}")
    return sizes

@dataclass(frozen=True)
class GridSpec:
    columns: tuple[int, ...]
    rows: tuple[int, ...]

    @classmethod
    def from_config(cls, raw: dict) -> "GridSpec":
        grid = section(raw, "grid")
        return cls(columns=_sizes(grid, "columns"), rows=_sizes(grid, "rows"))

    @property
    def empty(self) -> bool:
        return not self.columns or not self.rows

    @property
    def total_width(self) -> int:
        return sum(self.columns)

    @property
    def total_height(self) -> int:
        return sum(self.rows)

@dataclass(frozen=True)
class ModulePosition:
    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

@dataclass(frozen=True)
class ResolvedDimensions:
    content_width: int
    content_height: int

def clamp(x: int, lo: int, hi: int) -> int:
    if lo > x:
        return lo
    if hi < x:
        return hi
    return x

def _clamped_spans(position: ModulePosition, grid: GridSpec) -> tuple[slice, slice]:
    left = clamp(position.left, 0, len(grid.columns) - 1)
    top = clamp(position.top, 0, len(grid.rows) - 1)
    width = clamp(position.width, 0, len(grid.columns) - left)
    height = clamp(position.height, 0, len(grid.rows) - top)
    return slice(left, left + width), slice(top, top + height)

def resolve(position: ModulePosition, grid: GridSpec) -> ResolvedDimensions:
    """Usable interior of a widget, border already subtracted.

    Positions and spans outside the grid are clamped, never rejected. A grid
    without columns or rows has no usable space.
    """
    if grid.empty:
        return ResolvedDimensions(0, 0)

    cols, rows = _clamped_spans(position, grid)
    w = sum(grid.columns[cols]) - BORDER
    h = sum(grid.rows[rows]) - BORDER

    # The usable space may be empty
    return ResolvedDimensions(max(w, 0), max(h, 0))

def origin(position: ModulePosition, grid: GridSpec) -> tuple[int, int]:
    if grid.empty:
        return 0, 0
    cols, rows = _clamped_spans(position, grid)
    return sum(grid.columns[:cols.start]), sum(grid.rows[:rows.start])

def position_from_config(module_cfg: dict) -> ModulePosition:
    pos = section(module_cfg, "position")

    def _uint(key: str) -> int:
        return max(convert(pos.get(key, 0) or 0, int, f"position.{key}"), 0)

    return ModulePosition(
        left=_uint("left"),
        top=_uint("top"),
        width=_uint("width"),
        height=_uint("height"),
    )
