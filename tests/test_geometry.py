import pytest

from core.math import Vec3, Ray
from core.material import Material
from core.geometry import Sphere, Box, intersect, surface_normal, light_center
from core.scene import Scene


@pytest.fixture
def unit_sphere():
    return Sphere(Vec3(0, 0, 0), 1, Material(Vec3(1, 1, 1)))


@pytest.fixture
def unit_box():
    return Box(Vec3(-1, -1, -1), Vec3(1, 1, 1), Material(Vec3(1, 1, 1)))


class TestSphere:
    def test_head_on_hit(self, unit_sphere):
        t0, t1 = intersect(unit_sphere, Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)))
        assert t0 == pytest.approx(4.0)
        assert t1 == pytest.approx(6.0)

    def test_sphere_behind_origin_is_miss(self, unit_sphere):
        assert intersect(unit_sphere, Ray(Vec3(0, 0, 5), Vec3(0, 0, 1))) is None

    def test_ray_passing_beside_is_miss(self, unit_sphere):
        assert intersect(unit_sphere, Ray(Vec3(2, 0, 5), Vec3(0, 0, -1))) is None

    def test_origin_inside_gives_negative_t0(self, unit_sphere):
        ray = Ray(Vec3(0, 0, 0.5), Vec3(0, 0, -1))
        t0, t1 = intersect(unit_sphere, ray)
        assert t0 < 0
        assert t1 == pytest.approx(1.5)

    def test_normal_points_outward(self, unit_sphere):
        n = surface_normal(unit_sphere, Vec3(0, 0, 1))
        assert n == Vec3(0, 0, 1)

    def test_light_center(self, unit_sphere):
        assert light_center(unit_sphere) == Vec3(0, 0, 0)


class TestBox:
    def test_head_on_hit(self, unit_box):
        t0, t1 = intersect(unit_box, Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)))
        assert t0 == pytest.approx(4.0)
        assert t1 == pytest.approx(6.0)

    def test_zero_component_outside_slab_is_miss(self, unit_box):
        # x 방향 성분 0, 원점이 x 슬랩 밖
        assert intersect(unit_box, Ray(Vec3(2, 0, 5), Vec3(0, 0, -1))) is None
        assert intersect(unit_box, Ray(Vec3(0, -3, 5), Vec3(0, 0, -1))) is None

    def test_zero_component_origin_on_face_plane(self):
        # 원점 x 가 min.x 면 위에 있고 방향 x 성분 0 -> 구간에 NaN 이 없어야 한다
        box = Box(Vec3(0, -1, -1), Vec3(2, 1, 1), Material(Vec3(1, 1, 1)))
        t0, t1 = intersect(box, Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)))
        assert t0 == pytest.approx(4.0)
        assert t1 == pytest.approx(6.0)
        t0, t1 = intersect(box, Ray(Vec3(2, 1, 5), Vec3(0.0, -0.0, -1)))
        assert t0 == pytest.approx(4.0)
        assert t1 == pytest.approx(6.0)

    def test_face_plane_ray_counts_as_nearest_hit(self):
        box = Box(Vec3(0, -1, -3), Vec3(2, 1, -1), Material(Vec3(1, 1, 1)))
        rec = Scene([box]).hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)))
        assert rec is not None
        assert rec.t == pytest.approx(1.0)

    def test_negative_zero_component(self, unit_box):
        t0, t1 = intersect(unit_box, Ray(Vec3(0.5, 0.5, 5), Vec3(-0.0, -0.0, -1)))
        assert t0 == pytest.approx(4.0)
        assert t1 == pytest.approx(6.0)

    def test_oblique_hit(self, unit_box):
        d = Vec3(-1, 0, -1).normalize()
        t0, t1 = intersect(unit_box, Ray(Vec3(3, 0, 3), d))
        assert t0 == pytest.approx(2 * 2 ** 0.5)
        assert t1 == pytest.approx(4 * 2 ** 0.5)

    def test_oblique_miss(self, unit_box):
        d = Vec3(-1, 0, -1).normalize()
        assert intersect(unit_box, Ray(Vec3(5, 0, 1), d)) is None

    def test_box_behind_reports_negative_interval(self, unit_box):
        t0, t1 = intersect(unit_box, Ray(Vec3(0, 0, 5), Vec3(0, 0, 1)))
        assert t0 < 0 and t1 < 0

    def test_face_normals(self, unit_box):
        assert surface_normal(unit_box, Vec3(0, 0, 1)) == Vec3(0, 0, 1)
        assert surface_normal(unit_box, Vec3(-1, 0.2, 0.3)) == Vec3(-1, 0, 0)
        assert surface_normal(unit_box, Vec3(0.5, -1, 0.1)) == Vec3(0, -1, 0)

    def test_light_center_is_midpoint(self):
        box = Box(Vec3(0, 10, -10), Vec3(20, 20, -5), Material(Vec3(0, 0, 0)))
        assert light_center(box) == Vec3(10, 15, -7.5)


def test_unknown_primitive_rejected():
    with pytest.raises(TypeError):
        intersect(object(), Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)))
