"""Pytest configuration and shared fixtures."""

import pytest

from core.math import Vec3
from core.material import Material
from core.geometry import Sphere
from renderers.cpu_renderer import CPURenderer
from scene_builders.reference_scene_builder import ReferenceSceneBuilder


@pytest.fixture
def renderer():
    return CPURenderer()


@pytest.fixture
def scene_builder():
    return ReferenceSceneBuilder()


@pytest.fixture
def opaque_sphere():
    """(0, 0, -20)에 놓인 반지름 4 불투명 회색 구"""
    return Sphere(Vec3(0, 0, -20), 4, Material(Vec3(0.5, 0.5, 0.5)))


@pytest.fixture
def make_light():
    """구 광원 생성 함수"""
    def _make(center, radius=1.0, emission=3.0):
        return Sphere(Vec3(*center), radius,
                      Material(Vec3(0, 0, 0), emission_color=Vec3(emission, emission, emission)))
    return _make
