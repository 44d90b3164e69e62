"""
どこで: `src/polargrid/export/svg.py`。
何を: GridResult を SVG 文字列として組み立て、ファイルへ保存する関数を提供する。
なぜ: 極座標グリッドを描画ツリーに依存せず headless に出力し、反復可能にするため。
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

from polargrid.core.path import (
    DEFAULT_DECIMALS,
    fmt_number,
    outline_to_path_d,
    spoke_to_path_d,
)
from polargrid.core.types import GridResult, RingShape

logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_STROKE = "#ccc"


def _ring_element(ring: RingShape, *, index: int, stroke_attrs: str, decimals: int) -> str | None:
    """リング 1 本の SVG 要素を返す。描画できない多角形リングは None。"""
    if ring.kind == "circle":
        return (
            f'      <circle class="polar-grid-concentric-circle" '
            f'cx="{fmt_number(ring.center.x, decimals=decimals)}" '
            f'cy="{fmt_number(ring.center.y, decimals=decimals)}" '
            f'r="{fmt_number(ring.radius, decimals=decimals)}" '
            f'{stroke_attrs} fill="none" />'
        )

    d = outline_to_path_d(ring.vertices, decimals=decimals)
    if not d:
        logger.warning("skip polygon ring without vertices: index=%d radius=%s", index, ring.radius)
        return None
    return (
        f'      <path class="polar-grid-concentric-polygon" d="{d}" '
        f'{stroke_attrs} fill="none" />'
    )


def render_svg(
    result: GridResult,
    *,
    canvas_size: tuple[int, int],
    stroke: str = DEFAULT_STROKE,
    stroke_width: float = 1.0,
    decimals: int = DEFAULT_DECIMALS,
    view_box: tuple[float, float, float, float] | None = None,
) -> str:
    """GridResult を SVG 文書文字列へ変換して返す。

    Parameters
    ----------
    result : GridResult
        build_grid の出力。
    canvas_size : tuple[int, int]
        キャンバス寸法 (width, height)。view_box 未指定時は viewBox にも使う。
    stroke : str, optional
        線色。スポークとリングに共通で適用する。
    stroke_width : float, optional
        線幅。
    decimals : int, optional
        座標の小数桁数。
    view_box : tuple[float, float, float, float] or None, optional
        viewBox の (min_x, min_y, width, height)。None なら (0, 0, width, height)。

    Returns
    -------
    str
        末尾改行付きの SVG 文書。

    Raises
    ------
    ValueError
        canvas_size または view_box の幅・高さが正でない場合。
    """
    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    if view_box is None:
        view_box_text = f"0 0 {int(canvas_w)} {int(canvas_h)}"
    else:
        vb_x, vb_y, vb_w, vb_h = view_box
        if not (vb_w > 0 and vb_h > 0):
            raise ValueError("view_box の幅・高さは正の値である必要がある")
        view_box_text = " ".join(fmt_number(v, decimals=decimals) for v in (vb_x, vb_y, vb_w, vb_h))

    stroke_attrs = (
        f'stroke="{escape(str(stroke), quote=True)}" '
        f'stroke-width="{fmt_number(stroke_width, decimals=decimals)}"'
    )

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="{view_box_text}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )

    if not result.is_empty:
        lines.append('  <g class="polar-grid">')

        if result.spokes:
            lines.append('    <g class="polar-grid-angle">')
            for spoke in result.spokes:
                d = spoke_to_path_d(spoke, decimals=decimals)
                lines.append(f'      <path d="{d}" {stroke_attrs} />')
            lines.append("    </g>")

        if result.rings:
            lines.append('    <g class="polar-grid-concentric">')
            for i, ring in enumerate(result.rings):
                element = _ring_element(
                    ring, index=i, stroke_attrs=stroke_attrs, decimals=decimals
                )
                if element is not None:
                    lines.append(element)
            lines.append("    </g>")

        lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(
    result: GridResult,
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    stroke: str = DEFAULT_STROKE,
    stroke_width: float = 1.0,
    decimals: int = DEFAULT_DECIMALS,
    view_box: tuple[float, float, float, float] | None = None,
) -> Path:
    """GridResult を SVG として保存し、保存先パスを返す。"""
    _path = Path(path)
    text = render_svg(
        result,
        canvas_size=canvas_size,
        stroke=stroke,
        stroke_width=stroke_width,
        decimals=decimals,
        view_box=view_box,
    )

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    return _path


__all__ = ["DEFAULT_STROKE", "export_svg", "render_svg"]
