# どこで: `src/polargrid/core/types.py`。
# 何を: 極座標グリッドの入力（GridSpec）と出力（SpokeShape / RingShape / GridResult）の型を定義する。
# なぜ: 座標変換・形状生成・組み立ての各段で同じ不変な値オブジェクトを共有するため。

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

GridType = Literal["polygon", "circle"]

SPOKE_BASE_RATIO = 150.0
"""スポーク基部の半幅を決める比率。基部半幅 = スポークベクトル成分 / この値。"""


@dataclass(frozen=True, slots=True)
class Point:
    """2D 直交座標。y は画面座標系（下向き正）。"""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class GridSpec:
    """極座標グリッドの解決済み入力。

    Parameters
    ----------
    center : Point
        グリッド中心。
    inner_radius : float
        スポーク始点の半径。
    outer_radius : float
        スポーク先端の半径。0 以下のときグリッド全体が退化し何も出力しない。
    angles : tuple[float, ...]
        スポーク/多角形頂点の角度列 [deg]。順序がそのまま描画順になる。
    radii : tuple[float, ...]
        同心リングの半径列。
    grid_type : GridType
        "circle" なら真円、それ以外は angles を頂点とする多角形。
    radial_lines : bool
        False ならスポークを出力しない。
    spoke_base_ratio : float
        スポーク基部の幅比率。

    Notes
    -----
    値の検証は行わない。NaN や負の半径はそのまま出力へ伝播する。
    """

    center: Point
    inner_radius: float
    outer_radius: float
    angles: tuple[float, ...]
    radii: tuple[float, ...]
    grid_type: GridType = "polygon"
    radial_lines: bool = True
    spoke_base_ratio: float = SPOKE_BASE_RATIO


@dataclass(frozen=True, slots=True)
class SpokeShape:
    """基部に幅を持つ細い三角形として表したスポーク。"""

    base_left: Point
    tip: Point
    base_right: Point

    @property
    def outline(self) -> tuple[Point, Point, Point]:
        """描画順（base_left → tip → base_right、閉じる）の頂点を返す。"""
        return (self.base_left, self.tip, self.base_right)


@dataclass(frozen=True, slots=True)
class CircleRing:
    center: Point
    radius: float
    kind: Literal["circle"] = "circle"


@dataclass(frozen=True, slots=True)
class PolygonRing:
    """angles の各角度に頂点を置いた閉多角形リング。

    vertices が空の場合は退化リングで、描画側でスキップする。
    """

    center: Point
    radius: float
    vertices: tuple[Point, ...]
    kind: Literal["polygon"] = "polygon"


RingShape = CircleRing | PolygonRing


@dataclass(frozen=True, slots=True)
class GridResult:
    spokes: tuple[SpokeShape, ...] = ()
    rings: tuple[RingShape, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.spokes and not self.rings


def as_point(value: Point | Sequence[float]) -> Point:
    """Point または (x, y) の 2 要素シーケンスを Point に正規化して返す。"""
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except Exception as exc:
        raise ValueError(f"center は長さ 2 のシーケンスである必要がある: got={value!r}") from exc
    return Point(float(x), float(y))


def grid_spec(
    *,
    center: Point | Sequence[float] = (0.0, 0.0),
    inner_radius: float = 0.0,
    outer_radius: float = 0.0,
    angles: Sequence[float] | None = None,
    radii: Sequence[float] | None = None,
    grid_type: GridType = "polygon",
    radial_lines: bool = True,
    spoke_base_ratio: float = SPOKE_BASE_RATIO,
) -> GridSpec:
    """既定値を補完して GridSpec を構築する。

    Parameters
    ----------
    center : Point | Sequence[float], optional
        グリッド中心。既定は原点。
    inner_radius, outer_radius : float, optional
        スポークの内外半径。既定は 0（outer=0 は退化グリッド）。
    angles, radii : Sequence[float] or None, optional
        None は空列として扱う。
    grid_type : GridType, optional
        リング形状。既定は "polygon"。
    radial_lines : bool, optional
        スポーク出力の有無。既定は True。
    spoke_base_ratio : float, optional
        スポーク基部の幅比率。

    Returns
    -------
    GridSpec
        数値を float に揃えた解決済み入力。
    """
    return GridSpec(
        center=as_point(center),
        inner_radius=float(inner_radius),
        outer_radius=float(outer_radius),
        angles=tuple(float(a) for a in (() if angles is None else angles)),
        radii=tuple(float(r) for r in (() if radii is None else radii)),
        grid_type=grid_type,
        radial_lines=bool(radial_lines),
        spoke_base_ratio=float(spoke_base_ratio),
    )


__all__ = [
    "CircleRing",
    "GridResult",
    "GridSpec",
    "GridType",
    "Point",
    "PolygonRing",
    "RingShape",
    "SPOKE_BASE_RATIO",
    "SpokeShape",
    "as_point",
    "grid_spec",
]
