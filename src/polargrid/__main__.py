# どこで: `src/polargrid/__main__.py`。
# 何を: `python -m polargrid` で極座標グリッドを SVG として書き出す CLI を提供する。
# なぜ: 角度・半径を渡すだけでグリッドの見た目を確認できるようにするため。

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from polargrid.core.grid import build_grid
from polargrid.core.runtime_config import output_root_dir, runtime_config, set_config_path
from polargrid.core.types import grid_spec
from polargrid.export.svg import export_svg

logger = logging.getLogger("polargrid")

DEFAULT_OUTPUT_NAME = "polar_grid.svg"


def _parse_float_list(text: str, *, option: str) -> list[float]:
    parts = [p.strip() for p in str(text).split(",") if p.strip()]
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise SystemExit(f"{option} はカンマ区切りの数値である必要があります: {text!r}")


def _parse_size(text: str) -> tuple[int, int]:
    try:
        w, h = (int(p) for p in str(text).split(","))
    except ValueError:
        raise SystemExit(f"--size は W,H の整数である必要があります: {text!r}")
    if w <= 0 or h <= 0:
        raise SystemExit(f"--size は正の値である必要があります: {text!r}")
    return w, h


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="polargrid", description="極座標グリッドを SVG で出力する")
    p.add_argument("--angles", default="", help="スポーク角度 [deg] をカンマ区切りで指定（例: 0,90,180,270）")
    p.add_argument("--radii", default="", help="同心リング半径をカンマ区切りで指定（例: 5,10）")
    p.add_argument("--inner-radius", type=float, default=0.0, help="スポーク始点の半径")
    p.add_argument("--outer-radius", type=float, default=0.0, help="スポーク先端の半径（0 以下なら何も描かない）")
    p.add_argument("--cx", type=float, default=0.0, help="中心 x")
    p.add_argument("--cy", type=float, default=0.0, help="中心 y")
    p.add_argument("--grid-type", choices=("polygon", "circle"), default="polygon", help="リング形状")
    p.add_argument("--no-radial-lines", action="store_true", help="スポークを描かない")
    p.add_argument("--size", default="", help="キャンバス寸法 W,H（省略時はグリッド全体が収まるよう中心と外半径から決める）")
    p.add_argument("--config", default=None, help="config.yaml のパス")
    p.add_argument("--out", default=None, help="出力 SVG パス（省略時は <output_dir>/polar_grid.svg）")
    p.add_argument("-v", "--verbose", action="store_true", help="debug ログを出す")
    return p.parse_args(argv)


def _auto_view_box(
    cx: float,
    cy: float,
    outer_radius: float,
    radii: list[float],
    *,
    margin: float,
) -> tuple[tuple[float, float, float, float], tuple[int, int]]:
    """グリッド全体を中心に収める viewBox と、それに合わせたキャンバス寸法を返す。"""
    finite = [abs(v) for v in (outer_radius, *radii) if math.isfinite(v)]
    extent = max(finite, default=0.0) + margin
    if extent <= 0:
        extent = 1.0
    cx_f = cx if math.isfinite(cx) else 0.0
    cy_f = cy if math.isfinite(cy) else 0.0
    side = 2.0 * extent
    view_box = (cx_f - extent, cy_f - extent, side, side)
    size = max(int(math.ceil(side)), 1)
    return view_box, (size, size)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        set_config_path(args.config)
    cfg = runtime_config()

    angles = _parse_float_list(args.angles, option="--angles")
    radii = _parse_float_list(args.radii, option="--radii")
    spec = grid_spec(
        center=(args.cx, args.cy),
        inner_radius=args.inner_radius,
        outer_radius=args.outer_radius,
        angles=angles,
        radii=radii,
        grid_type=args.grid_type,
        radial_lines=not args.no_radial_lines,
        spoke_base_ratio=cfg.spoke_base_ratio,
    )
    result = build_grid(spec)

    view_box = None
    if args.size:
        canvas_size = _parse_size(args.size)
    else:
        view_box, canvas_size = _auto_view_box(
            args.cx, args.cy, args.outer_radius, radii, margin=cfg.stroke_width
        )

    out = Path(args.out) if args.out else output_root_dir() / DEFAULT_OUTPUT_NAME
    path = export_svg(
        result,
        out,
        canvas_size=canvas_size,
        stroke=cfg.stroke,
        stroke_width=cfg.stroke_width,
        decimals=cfg.decimals,
        view_box=view_box,
    )
    logger.info("wrote %s (spokes=%d rings=%d)", path, len(result.spokes), len(result.rings))
    print(f"[polargrid] wrote: {path}")  # noqa: T201
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
