"""
Tests for the handle geometry model.

Verifies:
- Center = offset + radius on both axes
- Inclusive circular hit test
- Per-event translation accumulation
- Recentering in a surface
"""
import math
import pytest
from models.transform import Vec2, HandleTransform


# ══════════════════════════════════════════════════════════════════════════
# Geometry
# ══════════════════════════════════════════════════════════════════════════

class TestHandleGeometry:

    def test_initial_box_fits_radius(self):
        t = HandleTransform(radius=50)
        assert t.radius == 50
        assert t.box_size == 100

    def test_set_radius_resizes_box(self):
        t = HandleTransform()
        t.set_radius(75)
        assert t.box_size == 150

    def test_center_is_offset_plus_radius(self):
        t = HandleTransform(radius=40)
        t.offset = Vec2(10, 20)
        assert t.center() == Vec2(50, 60)

    def test_vec2_unpacks(self):
        x, y = Vec2(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)


# ══════════════════════════════════════════════════════════════════════════
# Hit Test
# ══════════════════════════════════════════════════════════════════════════

class TestHitTest:

    @pytest.fixture
    def handle(self):
        t = HandleTransform(radius=50)
        t.recenter(400, 400)
        return t

    def test_center_hits(self, handle):
        assert handle.hit_test(200, 200)

    def test_boundary_is_inclusive(self, handle):
        assert handle.hit_test(250, 200)
        assert handle.hit_test(200, 150)

    def test_just_outside_misses(self, handle):
        assert not handle.hit_test(250.001, 200)

    def test_box_corner_outside_circle_misses(self, handle):
        # Inside the bounding square but outside the inscribed circle
        assert not handle.hit_test(155, 155)

    @pytest.mark.parametrize("angle", [0, 30, 90, 135, 225, 300])
    def test_points_inside_radius_hit(self, handle, angle):
        rad = math.radians(angle)
        assert handle.hit_test(200 + 49 * math.cos(rad), 200 + 49 * math.sin(rad))


# ══════════════════════════════════════════════════════════════════════════
# Translate / Recenter
# ══════════════════════════════════════════════════════════════════════════

class TestTranslation:

    def test_translate_accumulates(self):
        t = HandleTransform(radius=50)
        t.translate(10, 5)
        t.translate(-3, 2)
        assert t.offset == Vec2(7, 7)

    def test_zero_translate_keeps_center(self):
        t = HandleTransform(radius=50)
        t.recenter(300, 200)
        before = t.center()
        for _ in range(5):
            t.translate(0, 0)
        assert t.center() == before

    def test_translate_is_unbounded(self):
        t = HandleTransform(radius=50)
        t.recenter(400, 400)
        t.translate(-1000, 5000)
        assert t.center() == Vec2(-800, 5200)

    def test_recenter(self):
        t = HandleTransform(radius=50)
        t.translate(33, 44)
        t.recenter(400, 300)
        assert t.offset == Vec2(150, 100)
        assert t.center() == Vec2(200, 150)
