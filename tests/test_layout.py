from __future__ import annotations

import pytest

from termboard.errors import ConfigurationError
from termboard.layout import GridSpec, ModulePosition, ResolvedDimensions, origin, position_from_config, resolve

GRID = GridSpec(columns=(10, 10, 10), rows=(5, 5))


def test_span_past_grid_is_truncated():
    dims = resolve(ModulePosition(left=1, top=0, width=5, height=1), GRID)
    assert dims == ResolvedDimensions(18, 3)


def test_span_inside_grid():
    assert resolve(ModulePosition(0, 0, 3, 2), GRID) == ResolvedDimensions(28, 8)


@pytest.mark.parametrize("left,top", [(0, 0), (1, 1), (2, 0)])
def test_oversized_span_matches_exact_span(left, top):
    exact = ModulePosition(left, top, len(GRID.columns) - left, len(GRID.rows) - top)
    oversized = ModulePosition(left, top, 50, 50)
    assert resolve(oversized, GRID) == resolve(exact, GRID)


def test_origin_outside_grid_is_clamped_to_last_cell():
    dims = resolve(ModulePosition(left=7, top=9, width=1, height=1), GRID)
    assert dims == resolve(ModulePosition(left=2, top=1, width=1, height=1), GRID)
    assert dims == ResolvedDimensions(8, 3)


def test_border_consumes_two_cell_extent():
    grid = GridSpec(columns=(2, 1), rows=(2,))
    assert resolve(ModulePosition(0, 0, 1, 1), grid) == ResolvedDimensions(0, 0)
    # One cell of raw extent still floors at zero
    assert resolve(ModulePosition(1, 0, 1, 1), grid) == ResolvedDimensions(0, 0)


def test_zero_span_has_no_usable_space():
    assert resolve(ModulePosition(1, 1, 0, 0), GRID) == ResolvedDimensions(0, 0)


@pytest.mark.parametrize("grid", [
    GridSpec(columns=(), rows=()),
    GridSpec(columns=(10,), rows=()),
    GridSpec(columns=(), rows=(5,)),
])
def test_empty_grid_returns_zero_dimensions(grid):
    assert resolve(ModulePosition(0, 0, 1, 1), grid) == ResolvedDimensions(0, 0)
    assert origin(ModulePosition(0, 0, 1, 1), grid) == (0, 0)


def test_never_negative():
    grid = GridSpec(columns=(0, 1, 3), rows=(1, 0))
    for left in range(5):
        for top in range(4):
            for width in range(5):
                for height in range(4):
                    dims = resolve(ModulePosition(left, top, width, height), grid)
                    assert dims.content_width >= 0
                    assert dims.content_height >= 0


def test_origin_sums_preceding_spans():
    assert origin(ModulePosition(0, 0, 1, 1), GRID) == (0, 0)
    assert origin(ModulePosition(2, 1, 1, 1), GRID) == (20, 5)
    assert origin(ModulePosition(9, 9, 1, 1), GRID) == (20, 5)


def test_grid_and_position_from_config():
    raw = {"grid": {"columns": [40, "20"], "rows": [10]}}
    assert GridSpec.from_config(raw) == GridSpec(columns=(40, 20), rows=(10,))
    assert GridSpec.from_config({}).empty

    pos = position_from_config({"position": {"left": 1, "width": 2, "top": -3}})
    assert pos == ModulePosition(left=1, top=0, width=2, height=0)
    assert position_from_config({}) == ModulePosition()


@pytest.mark.parametrize(
    "grid",
    [
        {"columns": [10, -5], "rows": [5]},
        {"columns": [10], "rows": ["tall"]},
        {"columns": "10,10", "rows": [5]},
    ],
)
def test_unusable_grid_sizes_are_rejected(grid):
    with pytest.raises(ConfigurationError, match="grid"):
        GridSpec.from_config({"grid": grid})


def test_empty_grid_section_is_an_empty_grid():
    assert GridSpec.from_config({"grid": None}).empty


def test_unreadable_position_is_rejected():
    with pytest.raises(ConfigurationError, match="position.left"):
        position_from_config({"position": {"left": "first"}})
    with pytest.raises(ConfigurationError, match="position"):
        position_from_config({"position": [1, 2]})
    assert position_from_config({"position": None}) == ModulePosition()
