"""GridSpec 既定値補完（grid_spec）と値オブジェクトのテスト群。"""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from polargrid.core.types import (
    SPOKE_BASE_RATIO,
    CircleRing,
    GridResult,
    GridSpec,
    Point,
    PolygonRing,
    as_point,
    grid_spec,
)


def test_grid_spec_defaults() -> None:
    spec = grid_spec()
    assert spec == GridSpec(
        center=Point(0.0, 0.0),
        inner_radius=0.0,
        outer_radius=0.0,
        angles=(),
        radii=(),
        grid_type="polygon",
        radial_lines=True,
        spoke_base_ratio=SPOKE_BASE_RATIO,
    )


def test_grid_spec_coerces_sequences_to_float_tuples() -> None:
    spec = grid_spec(center=[1, 2], outer_radius=3, angles=np.array([0, 90]), radii=[1, 2])
    assert spec.center == Point(1.0, 2.0)
    assert spec.angles == (0.0, 90.0)
    assert spec.radii == (1.0, 2.0)
    assert isinstance(spec.outer_radius, float)


def test_as_point_passes_point_through() -> None:
    p = Point(1.0, 2.0)
    assert as_point(p) is p


def test_as_point_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        as_point((1.0, 2.0, 3.0))


def test_value_objects_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Point(0.0, 0.0).x = 1.0  # type: ignore[misc]


def test_ring_variants_carry_only_their_fields() -> None:
    circle = CircleRing(center=Point(0.0, 0.0), radius=1.0)
    polygon = PolygonRing(center=Point(0.0, 0.0), radius=1.0, vertices=())

    assert circle.kind == "circle"
    assert polygon.kind == "polygon"
    assert {f.name for f in dataclasses.fields(circle)} == {"center", "radius", "kind"}
    assert {f.name for f in dataclasses.fields(polygon)} == {"center", "radius", "vertices", "kind"}


def test_grid_result_is_empty() -> None:
    assert GridResult().is_empty
    assert not GridResult(rings=(CircleRing(center=Point(0.0, 0.0), radius=1.0),)).is_empty
