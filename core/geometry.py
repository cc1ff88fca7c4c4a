import math
from typing import Optional, Tuple, Union
from core.math import Vec3, Ray
from core.material import Material


class Sphere:
    def __init__(self, center: Vec3, radius: float, material: Material):
        self.center = center
        self.radius = float(radius)
        self.radius2 = self.radius * self.radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Tuple[float, float]]:
        # 원점->중심 벡터를 광선 방향에 투영 (tca)
        l = self.center - ray.origin
        tca = l.dot(ray.direction)
        if tca < 0:
            return None
        d2 = l.dot(l) - tca * tca
        if d2 > self.radius2:
            return None
        thc = math.sqrt(self.radius2 - d2)
        return tca - thc, tca + thc

    def normal_at(self, point: Vec3) -> Vec3:
        return (point - self.center).normalize()

    def centroid(self) -> Vec3:
        return self.center

    def __repr__(self):
        return f"Sphere(center={self.center}, radius={self.radius:.3f})"


class Box:
    """축 정렬 박스 (AABB). min < max (성분별)"""

    def __init__(self, min_pt: Vec3, max_pt: Vec3, material: Material):
        self.min = min_pt
        self.max = max_pt
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Tuple[float, float]]:
        # Slab 방법. 축마다 구간 순서는 방향 역수의 부호로 결정한다 (swap 비교 X)
        tx = _slab(self.min.x, self.max.x, ray.origin.x, ray.direction.x)
        ty = _slab(self.min.y, self.max.y, ray.origin.y, ray.direction.y)
        if tx is None or ty is None:
            return None
        tmin, tmax = tx
        tymin, tymax = ty

        if tmin > tymax or tymin > tmax:
            return None
        if tymin > tmin:
            tmin = tymin
        if tymax < tmax:
            tmax = tymax

        tz = _slab(self.min.z, self.max.z, ray.origin.z, ray.direction.z)
        if tz is None:
            return None
        tzmin, tzmax = tz

        if tmin > tzmax or tzmin > tmax:
            return None
        if tzmin > tmin:
            tmin = tzmin
        if tzmax < tmax:
            tmax = tzmax

        return tmin, tmax

    def normal_at(self, point: Vec3) -> Vec3:
        # 점이 놓인 면의 바깥쪽 법선: 반쪽 크기 대비 중심에서 가장 멀리 떨어진 축
        center = self.centroid()
        local = point - center
        half = (self.max - self.min) * 0.5
        ratios = (abs(local.x) / half.x, abs(local.y) / half.y, abs(local.z) / half.z)
        axis = ratios.index(max(ratios))
        if axis == 0:
            return Vec3(math.copysign(1.0, local.x), 0, 0)
        elif axis == 1:
            return Vec3(0, math.copysign(1.0, local.y), 0)
        return Vec3(0, 0, math.copysign(1.0, local.z))

    def centroid(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def __repr__(self):
        return f"Box(min={self.min}, max={self.max})"


Primitive = Union[Sphere, Box]


def _slab(lo: float, hi: float, o: float, d: float) -> Optional[Tuple[float, float]]:
    # 방향 성분 0: 원점이 슬랩 안이면 이 축은 제한 없음, 밖이면 교차 없음
    if d == 0:
        if o < lo or o > hi:
            return None
        return -math.inf, math.inf
    inv = 1.0 / d
    if inv < 0:
        return (hi - o) * inv, (lo - o) * inv
    return (lo - o) * inv, (hi - o) * inv


def intersect(primitive: Primitive, ray: Ray) -> Optional[Tuple[float, float]]:
    match primitive:
        case Sphere():
            return primitive.intersect(ray)
        case Box():
            return primitive.intersect(ray)
    raise TypeError(f"Unknown primitive: {type(primitive).__name__}")


def surface_normal(primitive: Primitive, point: Vec3) -> Vec3:
    match primitive:
        case Sphere() | Box():
            return primitive.normal_at(point)
    raise TypeError(f"Unknown primitive: {type(primitive).__name__}")


def light_center(primitive: Primitive) -> Vec3:
    """광원을 점광원으로 근사할 때의 위치 (박스는 min/max 중심)"""
    match primitive:
        case Sphere() | Box():
            return primitive.centroid()
    raise TypeError(f"Unknown primitive: {type(primitive).__name__}")
