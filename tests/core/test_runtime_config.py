from pathlib import Path

import pytest

from polargrid.core.runtime_config import output_root_dir, runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    assert output_root_dir() == Path("data") / "output"
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.spoke_base_ratio == 150.0
    assert cfg.stroke == "#ccc"
    assert cfg.stroke_width == 1.0
    assert cfg.decimals == 3


def test_discovered_config_overrides_packaged_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = _write(
        tmp_path / ".polargrid" / "config.yaml",
        'paths:\n  output_dir: "./out_discovered"\nrender:\n  stroke: "#000"\n',
    )

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.output_dir == Path("out_discovered")
    assert cfg.stroke == "#000"
    # 部分上書きでは同じ mapping 内の他キーは既定値のまま残る。
    assert cfg.decimals == 3


def test_explicit_config_overrides_discovered_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    _isolate_config_discovery(tmp_path, monkeypatch)

    _write(tmp_path / ".polargrid" / "config.yaml", "grid:\n  spoke_base_ratio: 100\n")
    explicit = _write(tmp_path / "explicit.yaml", "grid:\n  spoke_base_ratio: 75\n")

    set_config_path(explicit)
    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.spoke_base_ratio == 75.0


def test_runtime_config_is_cached_until_path_changes(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    _isolate_config_discovery(tmp_path, monkeypatch)

    assert runtime_config() is runtime_config()

    explicit = _write(tmp_path / "explicit.yaml", "render:\n  decimals: 1\n")
    set_config_path(explicit)
    assert runtime_config().decimals == 1


def test_missing_explicit_config_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(tmp_path / "missing.yaml")
    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "render: [1, 2]\n",
        "render:\n  decimals: many\n",
        "render:\n  stroke_width: true\n",
        "- not\n- a mapping\n",
        "grid: {spoke_base_ratio: [oops\n",
    ],
)
def test_malformed_config_raises_runtime_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str
):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "bad.yaml", text))
    with pytest.raises(RuntimeError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "grid:\n  spoke_base_ratio: 0\n",
        "render:\n  stroke_width: -1\n",
        "render:\n  decimals: -1\n",
    ],
)
def test_out_of_range_values_raise_value_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str
):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "bad.yaml", text))
    with pytest.raises(ValueError):
        runtime_config()
