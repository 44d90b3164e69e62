"""
どこで: `src/polargrid/core/realize.py`。GridResult のポリライン化。
何を: スポーク・リングを閉じたポリライン列（RealizedGeometry）へ変換する。
なぜ: SVG 以外の描画先（プロッタ、ラスタ描画など）が座標配列だけで描けるようにするため。
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from polargrid.core.realized_geometry import (
    RealizedGeometry,
    concat_realized_geometries,
    empty_realized_geometry,
)
from polargrid.core.types import CircleRing, GridResult, Point, RingShape, SpokeShape

DEFAULT_CIRCLE_SEGMENTS = 64


def _closed_polyline(points: Sequence[Point]) -> RealizedGeometry:
    if not points:
        return empty_realized_geometry()
    coords = np.asarray([(p.x, p.y) for p in points], dtype=np.float64)
    # 先頭頂点を終端に複製してポリラインを閉じる。
    coords = np.concatenate([coords, coords[:1]], axis=0)
    offsets = np.array([0, coords.shape[0]], dtype=np.int32)
    return RealizedGeometry(coords=coords, offsets=offsets)


def _circle_polyline(ring: CircleRing, segments: int) -> RealizedGeometry:
    theta = np.linspace(0.0, 2.0 * math.pi, num=segments, endpoint=False)
    coords = np.empty((segments + 1, 2), dtype=np.float64)
    coords[:-1, 0] = ring.center.x + ring.radius * np.cos(theta)
    coords[:-1, 1] = ring.center.y - ring.radius * np.sin(theta)
    coords[-1] = coords[0]
    offsets = np.array([0, coords.shape[0]], dtype=np.int32)
    return RealizedGeometry(coords=coords, offsets=offsets)


def realize_spoke(spoke: SpokeShape) -> RealizedGeometry:
    return _closed_polyline(spoke.outline)


def realize_ring(
    ring: RingShape,
    *,
    circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> RealizedGeometry:
    """リング 1 本をポリライン化する。頂点の無い多角形リングは空ジオメトリ。"""
    if ring.kind == "circle":
        return _circle_polyline(ring, circle_segments)
    return _closed_polyline(ring.vertices)


def realize_grid(
    result: GridResult,
    *,
    circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> RealizedGeometry:
    """GridResult 全体を 1 つの RealizedGeometry にまとめる。

    Parameters
    ----------
    result : GridResult
        build_grid の出力。
    circle_segments : int, optional
        真円リングの分割数。3 未満は ValueError。

    Returns
    -------
    RealizedGeometry
        スポーク → リングの順に並んだ閉ポリライン列。
    """
    segments = int(circle_segments)
    if segments < 3:
        raise ValueError(f"circle_segments は 3 以上である必要がある: got={circle_segments!r}")

    parts: list[RealizedGeometry] = [realize_spoke(s) for s in result.spokes]
    for ring in result.rings:
        g = realize_ring(ring, circle_segments=segments)
        if g.n_polylines:
            parts.append(g)
    return concat_realized_geometries(*parts)


__all__ = ["DEFAULT_CIRCLE_SEGMENTS", "realize_grid", "realize_ring", "realize_spoke"]
