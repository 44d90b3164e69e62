"""閉アウトラインの SVG path d 文字列化のテスト群。"""

from __future__ import annotations

from polargrid.core.path import fmt_number, outline_to_path_d, spoke_to_path_d
from polargrid.core.types import Point, SpokeShape


def test_fmt_number_normalizes_negative_zero() -> None:
    assert fmt_number(-0.0) == "0.000"
    assert fmt_number(-0.0001) == "0.000"
    assert fmt_number(-1.5) == "-1.500"
    assert fmt_number(2.0, decimals=1) == "2.0"


def test_outline_moves_lines_and_closes() -> None:
    pts = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)]
    assert outline_to_path_d(pts) == "M 0.000,0.000 L 1.000,0.000 L 1.000,1.000 Z"


def test_single_point_outline_is_move_and_close() -> None:
    assert outline_to_path_d([Point(2.0, 3.0)], decimals=0) == "M 2,3 Z"


def test_empty_outline_is_empty_string() -> None:
    assert outline_to_path_d([]) == ""


def test_spoke_path() -> None:
    spoke = SpokeShape(
        base_left=Point(0.0, 1.0),
        tip=Point(150.0, 0.0),
        base_right=Point(0.0, -1.0),
    )
    assert spoke_to_path_d(spoke, decimals=1) == "M0.0 1.0 L150.0 0.0 L0.0 -1.0 Z"
