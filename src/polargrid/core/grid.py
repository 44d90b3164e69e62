"""
どこで: `src/polargrid/core/grid.py`。極座標グリッドの組み立て。
何を: GridSpec からスポーク列と同心リング列を構築し GridResult として返す。
なぜ: 描画層が受け取った形状を順に描くだけで背景グリッドになるようにするため。
"""

from __future__ import annotations

import logging

from polargrid.core.shapes import build_polygon_outline, build_spoke
from polargrid.core.types import (
    CircleRing,
    GridResult,
    GridSpec,
    PolygonRing,
    RingShape,
    SpokeShape,
)

logger = logging.getLogger(__name__)


def build_spokes(spec: GridSpec) -> tuple[SpokeShape, ...]:
    """angles の順にスポークを構築する。radial_lines=False または angles 空なら空。"""
    if not spec.radial_lines or not spec.angles:
        return ()
    return tuple(
        build_spoke(
            spec.center,
            spec.inner_radius,
            spec.outer_radius,
            angle,
            base_ratio=spec.spoke_base_ratio,
        )
        for angle in spec.angles
    )


def build_rings(spec: GridSpec) -> tuple[RingShape, ...]:
    """radii の順に同心リングを構築する。

    grid_type が "circle" のときだけ真円、それ以外は多角形。
    多角形の頂点はスポークと同じ angles を使うため、角数はスポーク数と一致する。
    """
    if not spec.radii:
        return ()
    if spec.grid_type == "circle":
        return tuple(CircleRing(center=spec.center, radius=r) for r in spec.radii)
    return tuple(
        PolygonRing(
            center=spec.center,
            radius=r,
            vertices=build_polygon_outline(spec.center, r, spec.angles),
        )
        for r in spec.radii
    )


def build_grid(spec: GridSpec) -> GridResult:
    """GridSpec から GridResult を構築する。

    Parameters
    ----------
    spec : GridSpec
        解決済みの入力。

    Returns
    -------
    GridResult
        outer_radius <= 0 のときは spokes/rings とも空。
        それ以外はスポーク、リングを入力順に並べたもの。

    Notes
    -----
    例外は送出しない。不正な数値（NaN など）は NaN を含む形状として出力される。
    """
    if spec.outer_radius <= 0:
        logger.debug("degenerate polar grid: outer_radius=%s", spec.outer_radius)
        return GridResult(spokes=(), rings=())

    return GridResult(spokes=build_spokes(spec), rings=build_rings(spec))


__all__ = ["build_grid", "build_rings", "build_spokes"]
