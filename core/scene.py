from typing import List, Optional
from dataclasses import dataclass
from core.math import Vec3, Ray
from core.material import HitRecord
from core.geometry import Primitive, intersect, surface_normal

# 아무것도 맞지 않았을 때의 하늘색 (밝은 회색, sink에서 흰색으로 포화)
BACKGROUND_COLOR = Vec3(2.0, 2.0, 2.0)


@dataclass
class RenderSettings:
    width: int = 640
    height: int = 480
    fov: float = 30.0
    max_depth: int = 20


class Scene:
    def __init__(self, objects: Optional[List[Primitive]] = None):
        self.objects: List[Primitive] = list(objects) if objects else []

    def add_object(self, obj: Primitive):
        self.objects.append(obj)

    @property
    def lights(self) -> List[Primitive]:
        return [obj for obj in self.objects if obj.material.is_light]

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        """선형 탐색으로 가장 가까운 교차를 찾는다. t0 < 0 이면 t1 사용, 둘 다 음수면 무시"""
        tnear = float('inf')
        nearest = None
        for obj in self.objects:
            interval = intersect(obj, ray)
            if interval is None:
                continue
            t0, t1 = interval
            if t0 < 0:
                t0 = t1
            if t0 < 0:
                continue
            if t0 < tnear:
                tnear = t0
                nearest = obj

        if nearest is None:
            return None

        rec = HitRecord()
        rec.t = tnear
        rec.point = ray.point_at_parameter(tnear)
        rec.normal = surface_normal(nearest, rec.point)
        rec.primitive = nearest
        return rec

    def __len__(self):
        return len(self.objects)
