from pathlib import Path

import pytest

from figures.config import StudioConfig, config_from_dict, load_config
from figures.models.canvas_model import OutputFormat
from figures.models.shape_model import ShapeKind


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config() == StudioConfig()


def test_load_from_yaml(tmp_path):
    path = tmp_path / "studio.yaml"
    path.write_text(
        "figure:\n"
        "  width: 64\n"
        "  height: 32\n"
        "  color: [1, 2, 3]\n"
        "  opacity: 10\n"
        "  shape: Ellipse\n"
        "output:\n"
        "  format: gif\n"
        "  directory: renders\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert (cfg.width, cfg.height) == (64, 32)
    assert cfg.color == (1, 2, 3)
    assert cfg.opacity == 10
    assert cfg.shape is ShapeKind.ELLIPSE
    assert cfg.output_format is OutputFormat.GIF
    assert cfg.output_dir == Path("renders")
    assert cfg.log_level == "DEBUG"


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "studio.yaml"
    path.write_text("figure:\n  width: 10\nextra: ignored\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.width == 10
    assert cfg.height == StudioConfig().height


def test_empty_file_is_defaults(tmp_path):
    path = tmp_path / "studio.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == StudioConfig()


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "raw",
    [
        {"figure": {"width": "wide"}},
        {"figure": {"color": [1, 2]}},
        {"figure": {"shape": "triangle"}},
        {"output": {"format": "bmp"}},
        {"figure": ["not", "a", "dict"]},
    ],
)
def test_invalid_values(raw):
    with pytest.raises(ValueError):
        config_from_dict(raw)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("figure: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_build_figure():
    cfg = StudioConfig(width=20, height=10, color=(5, 6, 7), opacity=3, shape=ShapeKind.ELLIPSE, output_format=OutputFormat.JPEG)
    fig = cfg.build_figure()
    assert fig.size == (20, 10)
    assert fig.get_background_color() == (5, 6, 7)
    assert fig.opacity == 3
    assert fig.shape_kind is ShapeKind.ELLIPSE
    assert fig.canvas.output_format is OutputFormat.JPEG
    assert fig.raster is None


def test_repo_config_file_loads():
    path = Path(__file__).resolve().parent.parent / "config" / "studio.yaml"
    cfg = load_config(path)
    assert cfg.build_figure().create().raster.size == (cfg.width, cfg.height)
