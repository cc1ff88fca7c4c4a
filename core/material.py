from core.math import Vec3


class Material:
    def __init__(self,
                 surface_color: Vec3 = None,
                 reflection=0.0,
                 transparency=0.0,
                 emission_color: Vec3 = None):
        """
        surface_color: Vec3, 알베도 (RGB, 0~1)
        reflection: 반사 여부 게이트 (0~1), 가중치로는 쓰지 않음 - 가중치는 Fresnel 항
        transparency: 투명도 (0~1), 굴절 광선 기여에 곱해짐
        emission_color: Vec3, 자체 발광. x > 0 이면 광원으로 취급
        """
        self.surface_color = surface_color if surface_color is not None else Vec3(0, 0, 0)
        self.reflection = float(reflection)
        self.transparency = float(transparency)
        self.emission_color = emission_color if emission_color is not None else Vec3(0, 0, 0)

    @property
    def is_light(self) -> bool:
        return self.emission_color.x > 0


class HitRecord:
    def __init__(self):
        self.t = float('inf')
        self.point = None
        self.normal = None
        self.primitive = None
