"""Tests for environment driven analyzer settings."""

import pydantic
import pytest

from unity_scene_graph.core.settings import AnalyzerSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("UNITY_SCENE_GRAPH_MAX_WORKERS", "UNITY_SCENE_GRAPH_SCENE_SUFFIX", "UNITY_SCENE_GRAPH_ASSETS_DIR"):
        monkeypatch.delenv(name, raising=False)

    settings = AnalyzerSettings.from_env()

    assert 1 <= settings.max_workers <= 32
    assert settings.scene_suffix == ".unity"
    assert settings.script_suffix == ".cs"
    assert settings.assets_dir == "Assets"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNITY_SCENE_GRAPH_MAX_WORKERS", "3")
    monkeypatch.setenv("UNITY_SCENE_GRAPH_SCENE_SUFFIX", ".scene")
    monkeypatch.setenv("UNITY_SCENE_GRAPH_ASSETS_DIR", "Content")

    settings = AnalyzerSettings.from_env()

    assert settings.max_workers == 3
    assert settings.scene_suffix == ".scene"
    assert settings.assets_dir == "Content"


def test_empty_variable_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNITY_SCENE_GRAPH_ASSETS_DIR", "")
    assert AnalyzerSettings.from_env().assets_dir == "Assets"


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_invalid_worker_count(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("UNITY_SCENE_GRAPH_MAX_WORKERS", value)
    with pytest.raises(pydantic.ValidationError):
        AnalyzerSettings.from_env()
