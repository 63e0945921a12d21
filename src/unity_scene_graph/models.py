from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ExportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GameObjectInfo(_ExportModel):
    name: str
    depth: int
    file_id: str
    parent_id: str | None = None


class SceneAnalysisResult(_ExportModel):
    scene_name: str
    game_objects: list[GameObjectInfo] = Field(default_factory=list)
    hierarchy: str = ""


class ReferenceIssue(_ExportModel):
    scene_name: str
    game_object_name: str
    asset_type: str
    reference_type: str
    missing_guid: str
    description: str


class MissingReferenceResult(_ExportModel):
    scene_issues: dict[str, list[ReferenceIssue]] = Field(default_factory=dict)
    total_broken_references: int = 0
    affected_scenes: int = 0
    missing_asset_types: dict[str, int] = Field(default_factory=dict)


class FieldInfo(_ExportModel):
    name: str
    type: str


class ScriptInfo(_ExportModel):
    file_path: str
    relative_path: str
    class_name: str
    serialized_fields: list[FieldInfo] = Field(default_factory=list)


class ComponentInfo(_ExportModel):
    component_type: str
    category: str
    usage_count: int = 0
    scenes_used: set[str] = Field(default_factory=set)


class ComponentAnalysisResult(_ExportModel):
    scene_components: dict[str, list[ComponentInfo]] = Field(default_factory=dict)
    all_components: list[ComponentInfo] = Field(default_factory=list)
    component_categories: dict[str, list[ComponentInfo]] = Field(default_factory=dict)


class ProjectAnalysis(_ExportModel):
    project_path: str
    scenes: list[SceneAnalysisResult] = Field(default_factory=list)
    scripts: list[ScriptInfo] = Field(default_factory=list)
    unused_scripts: list[ScriptInfo] = Field(default_factory=list)
    components: ComponentAnalysisResult = Field(default_factory=ComponentAnalysisResult)
    missing_references: MissingReferenceResult = Field(default_factory=MissingReferenceResult)
