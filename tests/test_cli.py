"""`python -m polargrid` CLI のテスト。"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from polargrid.__main__ import main
from polargrid.core.runtime_config import set_config_path

_NS = {"svg": "http://www.w3.org/2000/svg"}


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


def test_cli_writes_svg_to_explicit_path(tmp_path: Path) -> None:
    out = tmp_path / "grid.svg"
    rc = main(
        [
            "--angles", "0,90,180,270",
            "--radii", "5,10",
            "--outer-radius", "10",
            "--cx", "10",
            "--cy", "10",
            "--size", "20,20",
            "--out", str(out),
        ]
    )

    assert rc == 0
    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert root.attrib["viewBox"] == "0 0 20 20"
    assert len(root.findall(".//svg:path", _NS)) == 4 + 2


def test_cli_defaults_to_configured_output_dir(tmp_path: Path) -> None:
    rc = main(["--angles", "0,120,240", "--radii", "3", "--outer-radius", "3", "--grid-type", "circle"])

    assert rc == 0
    out = tmp_path / "data" / "output" / "polar_grid.svg"
    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert len(root.findall(".//svg:circle", _NS)) == 1


def _path_points(d: str) -> list[tuple[float, float]]:
    nums = [float(v) for v in re.findall(r"-?\d+(?:\.\d+)?", d)]
    return list(zip(nums[0::2], nums[1::2]))


@pytest.mark.parametrize("center", [("0", "0"), ("-50", "-20"), ("7.5", "100")])
def test_cli_auto_view_box_contains_whole_grid(tmp_path: Path, center: tuple[str, str]) -> None:
    """--size 省略時は中心の位置によらず全スポーク・全リング頂点が viewBox 内に収まる。"""
    out = tmp_path / "auto.svg"
    main(
        [
            "--angles", "0,90,180,270",
            "--radii", "1.5,3",
            "--outer-radius", "3",
            "--cx", center[0],
            "--cy", center[1],
            "--out", str(out),
        ]
    )

    root = ET.fromstring(out.read_text(encoding="utf-8"))
    vb_x, vb_y, vb_w, vb_h = (float(v) for v in root.attrib["viewBox"].split())
    assert vb_w > 0 and vb_h > 0
    assert float(root.attrib["width"]) >= vb_w

    points = [pt for p in root.findall(".//svg:path", _NS) for pt in _path_points(p.attrib["d"])]
    assert len(points) == 4 * 3 + 2 * 4
    for x, y in points:
        assert vb_x <= x <= vb_x + vb_w
        assert vb_y <= y <= vb_y + vb_h


def test_cli_uses_config_styling(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text('render:\n  stroke: "#123456"\n', encoding="utf-8")
    out = tmp_path / "styled.svg"

    main(["--config", str(cfg), "--angles", "0", "--outer-radius", "1", "--out", str(out)])

    root = ET.fromstring(out.read_text(encoding="utf-8"))
    (spoke,) = root.findall(".//svg:path", _NS)
    assert spoke.attrib["stroke"] == "#123456"


def test_cli_no_radial_lines(tmp_path: Path) -> None:
    out = tmp_path / "rings.svg"
    main(["--angles", "0,90,180", "--radii", "1", "--outer-radius", "1", "--no-radial-lines", "--out", str(out)])

    root = ET.fromstring(out.read_text(encoding="utf-8"))
    paths = root.findall(".//svg:path", _NS)
    assert [p.attrib.get("class") for p in paths] == ["polar-grid-concentric-polygon"]


@pytest.mark.parametrize(
    "argv",
    [
        ["--angles", "0,x"],
        ["--radii", "1,,two"],
        ["--size", "10"],
        ["--size", "0,10"],
    ],
)
def test_cli_rejects_malformed_numbers(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        main([*argv, "--outer-radius", "1"])
