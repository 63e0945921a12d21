import os

from pydantic import BaseModel, Field, PositiveInt


def _default_max_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


class AnalyzerSettings(BaseModel):
    max_workers: PositiveInt = Field(default_factory=_default_max_workers)
    scene_suffix: str = ".unity"
    script_suffix: str = ".cs"
    assets_dir: str = "Assets"

    @classmethod
    def from_env(cls) -> "AnalyzerSettings":
        values: dict[str, str] = {}
        for field_name, env_name in (
            ("max_workers", "UNITY_SCENE_GRAPH_MAX_WORKERS"),
            ("scene_suffix", "UNITY_SCENE_GRAPH_SCENE_SUFFIX"),
            ("assets_dir", "UNITY_SCENE_GRAPH_ASSETS_DIR"),
        ):
            value = os.getenv(env_name)
            if value:
                values[field_name] = value
        return cls.model_validate(values)
