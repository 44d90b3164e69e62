"""
どこで: `src/polargrid/core/shapes.py`。リング 1 本・スポーク 1 本の形状生成。
何を: 多角形リングの頂点列と、基部に幅を持つ三角形スポークを構築する。
なぜ: グリッド組み立て側が角度・半径ごとに呼び出すだけで済むようにするため。
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from polargrid.core.polar import polar_to_cartesian_array, to_cartesian
from polargrid.core.types import SPOKE_BASE_RATIO, Point, SpokeShape


def build_polygon_outline(
    center: Point,
    radius: float,
    angles: Sequence[float],
) -> tuple[Point, ...]:
    """半径 radius の多角形リング頂点列を返す。

    Parameters
    ----------
    center : Point
        リング中心。
    radius : float
        リング半径。
    angles : Sequence[float]
        頂点角度列 [deg]。重複除去・並べ替えはしない。

    Returns
    -------
    tuple[Point, ...]
        len(angles) 個の頂点。閉じる頂点（先頭の複製）は含まない。
        描画は先頭へ move、以降へ line、最後に close の順で固定。
        angles が空なら空タプル（描画側で抑止する）。
    """
    if len(angles) == 0:
        return ()
    xy = polar_to_cartesian_array(center, radius, angles)
    return tuple(Point(float(x), float(y)) for x, y in xy)


def build_spoke(
    center: Point,
    inner_radius: float,
    outer_radius: float,
    angle_deg: float,
    *,
    base_ratio: float = SPOKE_BASE_RATIO,
) -> SpokeShape:
    """角度 angle_deg のスポークを細い三角形として構築する。

    Parameters
    ----------
    center : Point
        グリッド中心。基部の 2 頂点はここを基準に置く。
    inner_radius : float
        スポーク始点の半径。基部幅の算出にのみ使う。
    outer_radius : float
        先端の半径。
    angle_deg : float
        スポーク角度 [deg]。
    base_ratio : float, optional
        基部半幅 = (始点→先端ベクトルを 90° 回転した成分) / base_ratio。
        0 や NaN も検証せず、基部頂点に inf/NaN として伝播させる。

    Returns
    -------
    SpokeShape
        base_left → tip → base_right の三角形。長さ 0 のスポークは
        3 頂点とも center に縮退するが、そのまま返す。
    """
    start = to_cartesian(center, inner_radius, angle_deg)
    tip = to_cartesian(center, outer_radius, angle_deg)

    a = tip.x - start.x
    b = tip.y - start.y
    # float64 の除算は 0 除算でも例外にせず inf/NaN を返す。
    with np.errstate(divide="ignore", invalid="ignore"):
        da = float(np.float64(a) / np.float64(base_ratio))
        db = float(np.float64(b) / np.float64(base_ratio))
    base_left = Point(center.x - db, center.y + da)
    base_right = Point(center.x + db, center.y - da)
    return SpokeShape(base_left=base_left, tip=tip, base_right=base_right)


__all__ = ["build_polygon_outline", "build_spoke"]
