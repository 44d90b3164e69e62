# どこで: `src/polargrid/core/path.py`。
# 何を: 閉じたアウトライン（多角形リング・スポーク）を SVG path の d 文字列へ変換する。
# なぜ: 描画手順（move → line → close）を 1 か所に固定し、出力を決定的にするため。

from __future__ import annotations

from collections.abc import Sequence

from polargrid.core.types import Point, SpokeShape

DEFAULT_DECIMALS = 3


def fmt_number(value: float, *, decimals: int = DEFAULT_DECIMALS) -> str:
    """float を固定小数桁の文字列へ変換して返す。"-0.000" は "0.000" に正規化する。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def outline_to_path_d(
    points: Sequence[Point],
    *,
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """頂点列を "M x,y L x,y ... Z" 形式の d 文字列へ変換する。

    空の頂点列は空文字列を返す（呼び出し側で描画をスキップする）。
    """
    if not points:
        return ""
    parts: list[str] = []
    for i, p in enumerate(points):
        cmd = "L" if i else "M"
        parts.append(
            f"{cmd} {fmt_number(p.x, decimals=decimals)},{fmt_number(p.y, decimals=decimals)}"
        )
    parts.append("Z")
    return " ".join(parts)


def spoke_to_path_d(spoke: SpokeShape, *, decimals: int = DEFAULT_DECIMALS) -> str:
    """スポーク三角形を "M{x} {y} L{x} {y} L{x} {y} Z" 形式の d 文字列へ変換する。"""
    parts = []
    for cmd, p in zip(("M", "L", "L"), spoke.outline):
        parts.append(
            f"{cmd}{fmt_number(p.x, decimals=decimals)} {fmt_number(p.y, decimals=decimals)}"
        )
    parts.append("Z")
    return " ".join(parts)


__all__ = ["DEFAULT_DECIMALS", "fmt_number", "outline_to_path_d", "spoke_to_path_d"]
