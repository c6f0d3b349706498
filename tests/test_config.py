"""Tests for YAML configuration loading."""

import pytest

from leatherman.config import DEFAULT_VIZ_CONFIG, Config, VizConfig, load_config


def test_defaults():
    assert DEFAULT_VIZ_CONFIG.lifetime == 500.0
    assert DEFAULT_VIZ_CONFIG.pose_arrow_scale == (0.1, 0.015, 0.015)
    assert Config().logging == {}


def test_load_config(tmp_path):
    path = tmp_path / "leatherman.yaml"
    path.write_text(
        "viz:\n"
        "  lifetime: 10.0\n"
        "  alpha: 0.8\n"
        "  pose_arrow_scale: [0.2, 0.02, 0.03]\n"
        "logging:\n"
        "  viz: debug\n"
        "  io.stl: error\n"
    )
    config = load_config(str(path))
    assert config.viz == VizConfig(lifetime=10.0, alpha=0.8, pose_arrow_scale=(0.2, 0.02, 0.03))
    assert config.logging == {"viz": "debug", "io.stl": "error"}


def test_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()


def test_unknown_viz_key(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("viz:\n  colour: red\n")
    with pytest.raises(ValueError, match="colour"):
        load_config(str(path))


def test_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))
