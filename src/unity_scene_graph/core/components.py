"""Component usage statistics keyed by Unity's built-in class IDs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from unity_scene_graph.core.documents import Record
from unity_scene_graph.models import ComponentAnalysisResult, ComponentInfo

SCRIPT_COMPONENT = "MonoBehaviour Script"

_CLASS_IDS: dict[int, str] = {
    1: "GameObject",
    2: "Component",
    4: "Transform",
    8: "Behaviour",
    20: "Camera",
    21: "Material",
    23: "MeshRenderer",
    25: "Renderer",
    27: "Texture",
    28: "Texture2D",
    29: "SceneSettings",
    30: "GraphicsSettings",
    33: "MeshFilter",
    43: "Mesh",
    45: "Skybox",
    48: "Shader",
    49: "TextAsset",
    50: "Rigidbody2D",
    54: "Rigidbody",
    56: "Collider",
    57: "Joint",
    58: "CircleCollider2D",
    59: "HingeJoint",
    60: "PolygonCollider2D",
    61: "BoxCollider2D",
    62: "PhysicsMaterial2D",
    64: "MeshCollider",
    65: "BoxCollider",
    68: "EdgeCollider2D",
    70: "CapsuleCollider2D",
    74: "AnimationClip",
    75: "ConstantForce",
    81: "AudioListener",
    82: "AudioSource",
    83: "AudioClip",
    84: "RenderTexture",
    89: "Cubemap",
    90: "Avatar",
    91: "AnimatorController",
    95: "Animator",
    96: "TrailRenderer",
    102: "TextMesh",
    104: "RenderSettings",
    108: "Light",
    111: "Animation",
    114: "MonoBehaviour",
    115: "MonoScript",
    119: "Projector",
    120: "LineRenderer",
    122: "Halo",
    123: "LensFlare",
    124: "FlareLayer",
    128: "Font",
    134: "PhysicMaterial",
    135: "SphereCollider",
    136: "CapsuleCollider",
    137: "SkinnedMeshRenderer",
    138: "FixedJoint",
    143: "CharacterController",
    144: "CharacterJoint",
    145: "SpringJoint",
    146: "WheelCollider",
    153: "ConfigurableJoint",
    154: "TerrainCollider",
    156: "TerrainData",
    157: "LightmapSettings",
    164: "AudioReverbFilter",
    165: "AudioHighPassFilter",
    166: "AudioChorusFilter",
    167: "AudioReverbZone",
    168: "AudioEchoFilter",
    169: "AudioLowPassFilter",
    170: "AudioDistortionFilter",
    182: "WindZone",
    183: "Cloth",
    191: "OffMeshLink",
    192: "OcclusionArea",
    193: "Tree",
    195: "NavMeshAgent",
    196: "NavMeshSettings",
    198: "ParticleSystem",
    199: "ParticleSystemRenderer",
    205: "LODGroup",
    208: "NavMeshObstacle",
    210: "SortingGroup",
    212: "SpriteRenderer",
    213: "Sprite",
    215: "ReflectionProbe",
    218: "Terrain",
    220: "LightProbeGroup",
    222: "CanvasRenderer",
    223: "Canvas",
    224: "RectTransform",
    225: "CanvasGroup",
    227: "BillboardRenderer",
    231: "SpringJoint2D",
    232: "DistanceJoint2D",
    233: "HingeJoint2D",
    234: "SliderJoint2D",
    235: "WheelJoint2D",
    245: "LightProbes",
    246: "LightProbeProxyVolume",
    247: "ParticleSystemForceField",
    248: "VideoPlayer",
    249: "VideoClip",
    319: "AimConstraint",
    321: "ParentConstraint",
    323: "PositionConstraint",
    324: "RotationConstraint",
    325: "ScaleConstraint",
}

_CATEGORIES: tuple[tuple[str, frozenset[str]], ...] = (
    (
        "Rendering",
        frozenset(
            {
                "MeshRenderer",
                "SpriteRenderer",
                "LineRenderer",
                "TrailRenderer",
                "ParticleSystem",
                "CanvasRenderer",
                "ParticleSystemRenderer",
                "SkinnedMeshRenderer",
                "BillboardRenderer",
            }
        ),
    ),
    (
        "Physics",
        frozenset(
            {
                "BoxCollider",
                "SphereCollider",
                "CapsuleCollider",
                "MeshCollider",
                "Rigidbody",
                "TerrainCollider",
                "CharacterController",
                "WheelCollider",
                "BoxCollider2D",
                "CircleCollider2D",
                "PolygonCollider2D",
                "EdgeCollider2D",
                "CapsuleCollider2D",
                "Rigidbody2D",
            }
        ),
    ),
    (
        "Audio",
        frozenset(
            {
                "AudioSource",
                "AudioListener",
                "AudioReverbFilter",
                "AudioHighPassFilter",
                "AudioChorusFilter",
                "AudioReverbZone",
                "AudioEchoFilter",
                "AudioLowPassFilter",
                "AudioDistortionFilter",
            }
        ),
    ),
    ("UI", frozenset({"Canvas", "CanvasGroup", "RectTransform"})),
    ("Animation", frozenset({"Animator", "Animation"})),
    ("Navigation", frozenset({"NavMeshAgent", "NavMeshObstacle", "OffMeshLink"})),
    ("Lighting", frozenset({"Light", "ReflectionProbe", "LightProbeGroup", "LightProbes", "LightProbeProxyVolume"})),
    ("Transform", frozenset({"Transform"})),
    ("Camera", frozenset({"Camera"})),
    ("Effects", frozenset({"WindZone", "ParticleSystemForceField", "LODGroup"})),
    ("Terrain", frozenset({"Terrain", "Tree", "TerrainData"})),
    (
        "Joints",
        frozenset(
            {
                "HingeJoint",
                "SpringJoint",
                "FixedJoint",
                "ConfigurableJoint",
                "CharacterJoint",
                "WheelJoint2D",
                "HingeJoint2D",
                "SpringJoint2D",
                "DistanceJoint2D",
                "SliderJoint2D",
            }
        ),
    ),
)


def component_type_name(type_id: int) -> str:
    return _CLASS_IDS.get(type_id, f"Unknown ({type_id})")


def categorize_component(component_type: str) -> str:
    for category, members in _CATEGORIES:
        if component_type in members:
            return category
    if "Script" in component_type or component_type == "MonoBehaviour":
        return "Scripting"
    if component_type == "GameObject":
        return "Core"
    return "Other"


def count_scene_components(records: Iterable[Record]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for record in records:
        if not record.body or record.type_id <= 0:
            continue
        counts[component_type_name(record.type_id)] += 1
        if any("m_Script:" in line for line in record.body):
            counts[SCRIPT_COMPONENT] += 1
    return dict(counts)


def analyze_components(scene_counts: Mapping[str, Mapping[str, int]]) -> ComponentAnalysisResult:
    """Aggregate per-scene component counts into project-wide usage and categories."""
    result = ComponentAnalysisResult()
    totals: dict[str, ComponentInfo] = {}

    for scene_name, counts in scene_counts.items():
        scene_components: list[ComponentInfo] = []
        for component_type, count in counts.items():
            category = categorize_component(component_type)
            scene_components.append(ComponentInfo(component_type=component_type, category=category, usage_count=count))
            total = totals.setdefault(component_type, ComponentInfo(component_type=component_type, category=category))
            total.usage_count += count
            total.scenes_used.add(scene_name)
        result.scene_components[scene_name] = scene_components

    result.all_components = sorted(totals.values(), key=lambda c: c.usage_count, reverse=True)
    for component in result.all_components:
        result.component_categories.setdefault(component.category, []).append(component)
    return result
