"""Pruebas unitarias para test_angle."""

import math
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from core.angle import (
    UNSET,
    Angle,
    BaseCorner,
    FixedAngle,
    PlacementAngle,
    clamp_placement,
    forms_triangle,
    third_angle,
)


class _Size:
    """Rectángulo mínimo con `width()` y `height()`."""

    def __init__(self, width, height):
        self._width = width
        self._height = height

    def width(self):
        return self._width

    def height(self):
        return self._height


class AngleTest(unittest.TestCase):
    """Casos de prueba para Angle."""

    def test_degree_radian_conversion(self):
        angle = Angle.from_degrees(90.0)
        self.assertAlmostEqual(angle.radians, math.pi / 2)
        self.assertAlmostEqual(Angle.from_radians(math.pi).degrees, 180.0)
        self.assertEqual(Angle.straight(), Angle.from_radians(math.pi))

    def test_arithmetic_and_ordering(self):
        a = Angle.from_degrees(30.0)
        b = Angle.from_degrees(50.0)
        self.assertAlmostEqual((a + b).degrees, 80.0)
        self.assertAlmostEqual((b - a).degrees, 20.0)
        self.assertAlmostEqual((-a).degrees, -30.0)
        self.assertLess(a, b)
        self.assertGreater(b, Angle.zero())

    def test_arithmetic_with_numbers_is_rejected(self):
        with self.assertRaises(TypeError):
            Angle.from_degrees(10.0) + 5.0

    def test_isclose_uses_degree_tolerance(self):
        a = Angle.from_degrees(180.0)
        self.assertTrue(a.isclose(Angle.from_degrees(180.0 + 1e-8)))
        self.assertFalse(a.isclose(Angle.from_degrees(180.001)))


class AngleSpecTest(unittest.TestCase):
    """Casos de prueba para las especificaciones de ángulo."""

    def test_unset_and_fixed(self):
        rect = _Size(200.0, 100.0)
        self.assertIsNone(UNSET.evaluate(rect))
        fixed = Angle.from_degrees(40.0)
        self.assertEqual(FixedAngle(fixed).evaluate(rect), fixed)
        self.assertEqual(FixedAngle(fixed).evaluate(_Size(1.0, 5.0)), fixed)

    def test_placement_angles_depend_on_rect(self):
        left = PlacementAngle(0.5, BaseCorner.LEFT)
        right = PlacementAngle(0.5, BaseCorner.RIGHT)
        self.assertAlmostEqual(left.evaluate(_Size(200.0, 100.0)).degrees, 45.0)
        self.assertAlmostEqual(right.evaluate(_Size(200.0, 100.0)).degrees, 45.0)
        self.assertAlmostEqual(
            left.evaluate(_Size(100.0, 100.0)).degrees,
            math.degrees(math.atan(2.0)),
        )

    def test_placement_edges_do_not_divide_by_zero(self):
        rect = _Size(200.0, 100.0)
        at_left = PlacementAngle(0.0, BaseCorner.LEFT).evaluate(rect)
        at_right = PlacementAngle(1.0, BaseCorner.RIGHT).evaluate(rect)
        self.assertAlmostEqual(at_left.degrees, 90.0)
        self.assertAlmostEqual(at_right.degrees, 90.0)
        self.assertTrue(at_left.is_finite())
        self.assertTrue(at_right.is_finite())

    def test_placement_is_clamped(self):
        self.assertEqual(clamp_placement(-0.5), 0.0)
        self.assertEqual(clamp_placement(1.5), 1.0)
        self.assertEqual(PlacementAngle(3.0, BaseCorner.LEFT).placement, 1.0)


class TriangleAnglesTest(unittest.TestCase):
    """Casos de prueba para third_angle y forms_triangle."""

    def test_third_angle(self):
        self.assertIsNone(third_angle(None, Angle.from_degrees(10.0)))
        c = third_angle(Angle.from_degrees(50.0), Angle.from_degrees(60.0))
        self.assertAlmostEqual(c.degrees, 70.0)

    def test_forms_triangle(self):
        a = Angle.from_degrees(50.0)
        b = Angle.from_degrees(60.0)
        self.assertTrue(forms_triangle(a, b, third_angle(a, b)))
        self.assertFalse(forms_triangle(a, None, None))
        self.assertFalse(forms_triangle(a, b, Angle.from_degrees(80.0)))

    def test_forms_triangle_rejects_non_positive(self):
        zero = Angle.zero()
        b = Angle.from_degrees(60.0)
        self.assertFalse(forms_triangle(zero, b, third_angle(zero, b)))
        big = Angle.from_degrees(100.0)
        self.assertFalse(forms_triangle(big, big, third_angle(big, big)))


if __name__ == "__main__":
    unittest.main()
