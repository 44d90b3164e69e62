# src/polargrid/core/realized_geometry.py
# グリッド形状をポリライン配列（coords/offsets）として表すモデルと検証ロジック。

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class RealizedGeometry:
    """ポリライン列の実体配列を表現する。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で返す。
    offsets と coords の整合性はコンストラクタ内で検証する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.asarray(self.coords)
        offsets = np.asarray(self.offsets)

        if coords.ndim == 1 and coords.size == 0:
            coords = coords.reshape((0, 2))

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")

        if coords.dtype != np.float64:
            coords = coords.astype(np.float64, copy=False)

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")

        if offsets.dtype != np.int32:
            offsets = offsets.astype(np.int32, copy=False)

        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")

        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")

        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")

        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        # 呼び出し元の配列を凍結しないようにコピーしてから writeable=False にする。
        coords = coords.copy() if coords.flags.writeable else coords
        offsets = offsets.copy() if offsets.flags.writeable else offsets
        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @property
    def n_polylines(self) -> int:
        return int(self.offsets.shape[0] - 1)

    def polylines(self) -> list[np.ndarray]:
        """各ポリラインの (K, 2) ビューを順に返す。"""
        return [
            self.coords[int(s) : int(e)]
            for s, e in zip(self.offsets[:-1], self.offsets[1:])
        ]


def empty_realized_geometry() -> RealizedGeometry:
    return RealizedGeometry(
        coords=np.zeros((0, 2), dtype=np.float64),
        offsets=np.zeros((1,), dtype=np.int32),
    )


def concat_realized_geometries(*geometries: RealizedGeometry) -> RealizedGeometry:
    """複数の RealizedGeometry を連結して 1 つにまとめる。

    Parameters
    ----------
    geometries : RealizedGeometry
        連結対象のジオメトリ列。

    Returns
    -------
    RealizedGeometry
        結合後の実体ジオメトリ。空入力なら空ジオメトリ。
    """
    if not geometries:
        return empty_realized_geometry()

    total_coords = np.concatenate([g.coords for g in geometries], axis=0)

    new_offsets: list[int] = [0]
    offset_base = 0
    for g in geometries:
        # 先頭 0 を除いた差分部分だけをシフトして足し込む。
        shifted = g.offsets[1:] + offset_base
        new_offsets.extend(shifted.tolist())
        offset_base += int(g.offsets[-1])

    return RealizedGeometry(
        coords=total_coords,
        offsets=np.asarray(new_offsets, dtype=np.int32),
    )


__all__ = ["RealizedGeometry", "concat_realized_geometries", "empty_realized_geometry"]
