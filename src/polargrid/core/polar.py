"""
どこで: `src/polargrid/core/polar.py`。極座標から直交座標への変換。
何を: 中心・半径・角度 [deg] から画面座標系の点を求める。
なぜ: スポークと多角形リングが同じ角度規約で頂点を共有するため。
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from polargrid.core.types import Point


def to_cartesian(center: Point, radius: float, angle_deg: float) -> Point:
    """極座標 (radius, angle_deg) を center 基準の直交座標へ変換する。

    0° で +X 方向、角度は反時計回りに増える。画面座標系のため y は反転する。
    radius の検証はしない（0 は center、負値は center を挟んだ反対側）。
    """
    theta = math.radians(angle_deg)
    return Point(
        center.x + radius * math.cos(theta),
        center.y - radius * math.sin(theta),
    )


def polar_to_cartesian_array(
    center: Point,
    radius: float,
    angles_deg: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """角度列をまとめて変換し shape (N, 2) の float64 配列を返す。

    Notes
    -----
    `to_cartesian` と同じ式を numpy でベクトル化したもの。
    angles_deg が空なら shape (0, 2) を返す。
    """
    theta = np.deg2rad(np.asarray(angles_deg, dtype=np.float64).reshape(-1))
    r = np.float64(radius)
    out = np.empty((theta.shape[0], 2), dtype=np.float64)
    out[:, 0] = center.x + r * np.cos(theta)
    out[:, 1] = center.y - r * np.sin(theta)
    return out


__all__ = ["polar_to_cartesian_array", "to_cartesian"]
