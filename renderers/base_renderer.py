import time
from abc import ABC, abstractmethod
from typing import Dict, List, Type
import numpy as np

from core.math import Vec3, Ray
from core.camera import Camera
from core.image import new_buffer
from core.scene import Scene, RenderSettings


class BaseRenderer(ABC):
    """픽셀당 1차 광선 하나를 쏘는 렌더 루프. 광선 색 계산(trace)은 하위 클래스 몫"""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def trace(self, ray: Ray, scene: Scene, depth: int, max_depth: int) -> Vec3:
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        pass

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings) -> np.ndarray:
        """(height, width, 3) float 버퍼를 행 우선으로 채워 반환. 장면은 읽기만 한다"""
        start_time = time.time()

        print(f"{self.name} 렌더링 시작: {settings.width}x{settings.height}, {len(scene)} objects")

        image = new_buffer(settings.width, settings.height)
        for y in range(settings.height):
            for x in range(settings.width):
                ray = camera.get_ray(x, y)
                image[y, x] = self.trace(ray, scene, 0, settings.max_depth).to_np()

            if y % 50 == 0:
                print(f"{self.name} is working for you...: {settings.height - y}")

        elapsed = time.time() - start_time
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        print(f"{self.name} 렌더링 완료: {minutes}분 {seconds:.2f}초")

        return image

    def get_name(self) -> str:
        return self.name

    def supports(self, feature: str) -> bool:
        return feature in self.get_capabilities()


class RendererFactory:
    """이름 -> 렌더러 클래스 등록부"""

    _renderers: Dict[str, Type[BaseRenderer]] = {}

    @classmethod
    def register(cls, name: str, renderer_class: Type[BaseRenderer]):
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        return sorted(cls._renderers)
