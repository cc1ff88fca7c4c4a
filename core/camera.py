import math
from core.math import Vec3, Ray


class Camera:
    """원점에 놓인 핀홀 카메라, -z 방향을 바라본다"""

    def __init__(self,
                 width: int,
                 height: int,
                 fov: float = 30.0):   # FOV(deg)
        self.origin = Vec3(0, 0, 0)
        self.width = width
        self.height = height
        self.inv_width = 1.0 / width
        self.inv_height = 1.0 / height
        self.aspect = width / float(height)
        self.angle = math.tan(math.pi * 0.5 * fov / 180.0)

    def get_ray(self, x: int, y: int) -> Ray:
        # 픽셀 중심 -> 정규화 좌표 -> tan(fov/2), 종횡비 스케일
        xx = (2 * ((x + 0.5) * self.inv_width) - 1) * self.angle * self.aspect
        yy = (1 - 2 * ((y + 0.5) * self.inv_height)) * self.angle
        direction = Vec3(xx, yy, -1).normalize()
        return Ray(self.origin, direction)
