import json
from typing import Any, Dict, Iterable, List
from core.math import Vec3
from core.material import Material
from core.geometry import Sphere, Box, Primitive
from core.scene import Scene
from core.camera import Camera


class ReferenceSceneBuilder:
    """기준 장면들: 구 5개 + 구 광원, 박스 광원 장면, 둘을 합친 장면"""

    def build_scene(self) -> Scene:
        scene = Scene()
        # position, radius, surface color, reflectivity, transparency, emission color
        scene.add_object(_sphere((1.0, -10004, -20), 10000, (0.20, 0.20, 0.20), 0, 0.0))  # 바닥
        scene.add_object(_sphere((0.0, 0, -20), 4, (1.00, 0.32, 0.36), 1, 0.5))
        scene.add_object(_sphere((5.0, -1, -15), 2, (0.90, 0.76, 0.46), 1, 0.0))
        scene.add_object(_sphere((5.0, 0, -25), 3, (0.65, 0.77, 0.97), 1, 0.0))
        scene.add_object(_sphere((-5.5, 0, -15), 3, (0.90, 0.90, 0.90), 1, 0.0))
        # 광원
        scene.add_object(_sphere((0.0, 20, -30), 3, (0.00, 0.00, 0.00), 0, 0.0, (3, 3, 3)))
        return scene

    def build_box_scene(self) -> Scene:
        scene = Scene()
        # 박스 광원
        scene.add_object(_box((0, 10, -10), (20, 20, -5), (0.20, 0.20, 0.20), 0, 0.0, (3, 3, 3)))
        scene.add_object(_box((-5, -5, -100), (5, 5, -50), (0.00, 1.00, 0.00), 1, 0.0))
        return scene

    def build_combined_scene(self) -> Scene:
        scene = self.build_scene()
        for obj in self.build_box_scene().objects:
            scene.add_object(obj)
        return scene

    def create_camera(self, width: int, height: int, fov: float = 30.0) -> Camera:
        return Camera(width, height, fov)


def _sphere(center, radius, surface, refl=0.0, transp=0.0, emission=(0, 0, 0)) -> Sphere:
    return Sphere(Vec3(*center), radius, Material(Vec3(*surface), refl, transp, Vec3(*emission)))


def _box(min_pt, max_pt, surface, refl=0.0, transp=0.0, emission=(0, 0, 0)) -> Box:
    return Box(Vec3(*min_pt), Vec3(*max_pt), Material(Vec3(*surface), refl, transp, Vec3(*emission)))


def _vec(desc: Dict[str, Any], key: str, default=None) -> Vec3:
    value = desc.get(key, default)
    if value is None:
        raise ValueError(f"Primitive descriptor missing '{key}': {desc}")
    if len(value) != 3:
        raise ValueError(f"'{key}' must have 3 components, got {value!r}")
    return Vec3(*value)


def primitive_from_descriptor(desc: Dict[str, Any]) -> Primitive:
    """{"kind": "sphere"|"box", 기하 정보, surface_color, reflection, transparency, emission_color}"""
    material = Material(
        surface_color=_vec(desc, "surface_color"),
        reflection=desc.get("reflection", 0.0),
        transparency=desc.get("transparency", 0.0),
        emission_color=_vec(desc, "emission_color", (0, 0, 0)),
    )
    kind = desc.get("kind")
    if kind == "sphere":
        if "radius" not in desc:
            raise ValueError(f"Sphere descriptor missing 'radius': {desc}")
        return Sphere(_vec(desc, "center"), desc["radius"], material)
    elif kind == "box":
        return Box(_vec(desc, "min"), _vec(desc, "max"), material)
    raise ValueError(f"Unknown primitive kind: {kind!r}")


def scene_from_descriptors(descriptors: Iterable[Dict[str, Any]]) -> Scene:
    return Scene([primitive_from_descriptor(d) for d in descriptors])


def load_scene_file(path: str) -> Scene:
    """JSON 파일에서 장면 로드. {"primitives": [...]} 또는 리스트 그대로"""
    with open(path, 'r') as f:
        data = json.load(f)
    descriptors: List[Dict[str, Any]] = data["primitives"] if isinstance(data, dict) else data
    return scene_from_descriptors(descriptors)
