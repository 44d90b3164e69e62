# どこで: `src/polargrid/__init__.py`。
# 何を: ルート `polargrid` パッケージを定義し、グリッド生成の公開 API を再エクスポートする。
# なぜ: import 起点を `polargrid` に統一するため。

from __future__ import annotations

from polargrid.core.grid import build_grid
from polargrid.core.polar import polar_to_cartesian_array, to_cartesian
from polargrid.core.realize import realize_grid
from polargrid.core.realized_geometry import RealizedGeometry, concat_realized_geometries
from polargrid.core.shapes import build_polygon_outline, build_spoke
from polargrid.core.types import (
    SPOKE_BASE_RATIO,
    CircleRing,
    GridResult,
    GridSpec,
    Point,
    PolygonRing,
    RingShape,
    SpokeShape,
    grid_spec,
)

__all__ = [
    "SPOKE_BASE_RATIO",
    "CircleRing",
    "GridResult",
    "GridSpec",
    "Point",
    "PolygonRing",
    "RealizedGeometry",
    "RingShape",
    "SpokeShape",
    "build_grid",
    "build_polygon_outline",
    "build_spoke",
    "concat_realized_geometries",
    "grid_spec",
    "polar_to_cartesian_array",
    "realize_grid",
    "to_cartesian",
]
