import math
from typing import List

from core.math import Vec3, Ray, mix
from core.geometry import intersect, light_center
from core.scene import Scene, BACKGROUND_COLOR
from renderers.base_renderer import BaseRenderer, RendererFactory

# 최대 재귀 깊이
MAX_RAY_DEPTH = 20
# 2차 광선 시작점 오프셋 (자기 자신과 다시 교차하는 것 방지)
BIAS = 1e-4
IOR = 1.1


class CPURenderer(BaseRenderer):
    """CPU 기반 Whitted 레이트레이싱 렌더러"""

    def __init__(self):
        super().__init__("cpu_raytracer")

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "shadows",
            "reflection",
            "refraction",
            "point_lights",
        ]

    def trace(self, ray: Ray, scene: Scene, depth: int, max_depth: int = MAX_RAY_DEPTH) -> Vec3:
        """레이트레이싱 함수"""
        rec = scene.hit(ray)
        if rec is None:
            # 배경: 밝은 회색 하늘
            return BACKGROUND_COLOR

        obj = rec.primitive
        mat = obj.material
        phit = rec.point
        nhit = rec.normal

        # 법선과 광선이 같은 방향이면 물체 내부에서 나가는 중
        inside = False
        if ray.direction.dot(nhit) > 0:
            nhit = -nhit
            inside = True

        if (mat.transparency > 0 or mat.reflection > 0) and depth < max_depth:
            surface_color = self._shade_specular(ray, scene, depth, max_depth,
                                                 phit, nhit, inside, mat)
        else:
            surface_color = self._shade_diffuse(scene, obj, phit, nhit)

        return surface_color + mat.emission_color

    def _shade_specular(self, ray, scene, depth, max_depth, phit, nhit, inside, mat) -> Vec3:
        facingratio = -ray.direction.dot(nhit)
        fresnel = mix((1 - facingratio) ** 3, 1, 0.1)

        # 1) Reflection
        refl_dir = ray.direction.reflect(nhit).normalize()
        reflection = self.trace(Ray(phit + nhit * BIAS, refl_dir), scene, depth + 1, max_depth)

        # 2) Refraction (투명할 때만)
        refraction = Vec3(0, 0, 0)
        if mat.transparency > 0:
            eta = IOR if inside else 1 / IOR
            cosi = -nhit.dot(ray.direction)
            k = 1 - eta * eta * (1 - cosi * cosi)
            # k < 0: 전반사 -> 굴절 기여 없음
            if k >= 0:
                refr_dir = (ray.direction * eta + nhit * (eta * cosi - math.sqrt(k))).normalize()
                refraction = self.trace(Ray(phit - nhit * BIAS, refr_dir), scene, depth + 1, max_depth)

        return (reflection * fresnel +
                refraction * ((1 - fresnel) * mat.transparency)) * mat.surface_color

    def _shade_diffuse(self, scene, obj, phit, nhit) -> Vec3:
        # Lambert + 그림자 (광원은 중심에 놓인 점광원으로 근사)
        color = Vec3(0, 0, 0)
        shadow_origin = phit + nhit * BIAS
        for light in scene.lights:
            if light is obj:
                continue
            light_dir = (light_center(light) - phit).normalize()
            shadow_ray = Ray(shadow_origin, light_dir)
            if self._occluded(scene, light, shadow_ray):
                continue
            diff = max(0.0, nhit.dot(light_dir))
            color += obj.material.surface_color * diff * light.material.emission_color
        return color

    @staticmethod
    def _occluded(scene: Scene, light, shadow_ray: Ray) -> bool:
        for other in scene.objects:
            if other is light:
                continue
            interval = intersect(other, shadow_ray)
            # 광선 시작점 뒤쪽에서 끝나는 교차는 가리지 않는다
            if interval is not None and interval[1] > 0:
                return True
        return False


# 렌더러 등록
RendererFactory.register("cpu_raytracer", CPURenderer)
