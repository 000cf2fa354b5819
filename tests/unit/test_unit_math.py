"""
Unit tests for the mathutils types.

Tests cover Vec3 arithmetic and in-place helpers, Box3 construction, union
and queries, and the Ray convenience methods.
"""

import unittest
import numpy as np

from conefrustum.mathutils.vec3 import Vec3
from conefrustum.mathutils.box3 import Box3
from conefrustum.mathutils.frustum_ray import Ray
from test_fixtures.assertions import assert_vec_close, assert_box_close


class Vec3UnitTests(unittest.TestCase):
    """Tests for Vec3 construction, arithmetic and helpers"""

    def testConstructFromComponentsAndSequences(self):
        """Vec3 accepts three scalars, tuples, lists, arrays and other Vec3s"""
        expected = Vec3(1, 2, 3)
        self.assertEqual(Vec3((1, 2, 3)), expected)
        self.assertEqual(Vec3([1.0, 2.0, 3.0]), expected)
        self.assertEqual(Vec3(np.array([1.0, 2.0, 3.0])), expected)
        self.assertEqual(Vec3(expected), expected)
        self.assertIsInstance(Vec3(1, 2, 3).x, float)

    def testIndexingAndIteration(self):
        v = Vec3(4, 5, 6)
        self.assertEqual((v[0], v[1], v[2]), (4.0, 5.0, 6.0))
        self.assertEqual(list(v), [4.0, 5.0, 6.0])
        self.assertEqual(len(v), 3)
        with self.assertRaises(IndexError):
            v[3]

    def testArithmetic(self):
        a = Vec3(1, 2, 3)
        b = Vec3(4, -5, 6)
        self.assertEqual(a + b, Vec3(5, -3, 9))
        self.assertEqual(a - b, Vec3(-3, 7, -3))
        self.assertEqual(a * 2, Vec3(2, 4, 6))
        self.assertEqual(2 * a, Vec3(2, 4, 6))
        self.assertEqual(b / 2, Vec3(2, -2.5, 3))
        self.assertEqual(-a, Vec3(-1, -2, -3))
        self.assertEqual(abs(b), Vec3(4, 5, 6))
        self.assertEqual(a + (1, 1, 1), Vec3(2, 3, 4))
        self.assertEqual((1, 1, 1) - a, Vec3(0, -1, -2))

    def testDotCrossAndLength(self):
        a = Vec3(1, 0, 0)
        b = Vec3(0, 1, 0)
        self.assertEqual(a.dot(b), 0.0)
        self.assertEqual(a.cross(b), Vec3(0, 0, 1))
        self.assertEqual(Vec3(3, 4, 12).length(), 13.0)
        self.assertEqual(Vec3(3, 4, 12).length_sq(), 169.0)

    def testNormalized(self):
        v = Vec3(0, 0, 7).normalized()
        self.assertEqual(v, Vec3(0, 0, 1))
        self.assertAlmostEqual(Vec3(1, -2, 3).normalized().length(), 1.0, places=12)

    def testNormalizedZeroVectorStaysZero(self):
        self.assertEqual(Vec3(0, 0, 0).normalized(), Vec3(0, 0, 0))

    def testEqualityIsExact(self):
        self.assertEqual(Vec3(0.1, 0.2, 0.3), Vec3(0.1, 0.2, 0.3))
        self.assertNotEqual(Vec3(0.1, 0.2, 0.3), Vec3(0.1, 0.2, 0.3 + 1e-15))
        self.assertNotEqual(Vec3(1, 2, 3), "not a vector")

    def testVec3IsUnhashable(self):
        with self.assertRaises(TypeError):
            hash(Vec3(1, 2, 3))

    def testInPlaceHelpers(self):
        v = Vec3()
        result = v.set(1, 2, 3)
        self.assertIs(result, v)
        self.assertEqual(v, Vec3(1, 2, 3))

        result = v.copy_from((7, 8, 9))
        self.assertIs(result, v)
        self.assertEqual(v, Vec3(7, 8, 9))

    def testCloneIsIndependent(self):
        v = Vec3(1, 2, 3)
        c = v.clone()
        c.x = 10.0
        self.assertEqual(v, Vec3(1, 2, 3))

    def testAddScaled(self):
        self.assertEqual(Vec3(1, 1, 1).add_scaled((0, 2, 0), 1.5), Vec3(1, 4, 1))

    def testConversions(self):
        v = Vec3(1, 2, 3)
        self.assertEqual(v.to_tuple(), (1.0, 2.0, 3.0))
        self.assertEqual(v.to_list(), [1.0, 2.0, 3.0])
        arr = v.to_array()
        self.assertEqual(arr.dtype, np.float64)
        self.assertTrue(np.array_equal(arr, [1.0, 2.0, 3.0]))


class Box3UnitTests(unittest.TestCase):
    """Tests for Box3 construction, union and queries"""

    def testDefaultBoxIsEmpty(self):
        box = Box3()
        self.assertTrue(box.is_empty())
        self.assertEqual(box.size(), Vec3(0, 0, 0))
        self.assertEqual(box.center(), Vec3(0, 0, 0))

    def testCornersAreTakenAsGiven(self):
        box = Box3((-1, -2, -3), (1, 2, 3))
        self.assertEqual(box.min, Vec3(-1, -2, -3))
        self.assertEqual(box.max, Vec3(1, 2, 3))
        self.assertFalse(box.is_empty())
        self.assertEqual(box.center(), Vec3(0, 0, 0))
        self.assertEqual(box.size(), Vec3(2, 4, 6))

    def testUnion(self):
        box = Box3((0, 0, 0), (1, 1, 1))
        result = box.union(Box3((-1, 0.5, 0.5), (0.5, 2, 0.75)))
        self.assertIs(result, box)
        assert_box_close(self, box, (-1, 0, 0), (1, 2, 1))

    def testUnionWithEmptyBoxIsIdentity(self):
        box = Box3((0, 0, 0), (1, 1, 1))
        box.union(Box3())
        assert_box_close(self, box, (0, 0, 0), (1, 1, 1))

        empty = Box3()
        empty.union(Box3((2, 2, 2), (3, 3, 3)))
        assert_box_close(self, empty, (2, 2, 2), (3, 3, 3))

    def testExpandByPoint(self):
        box = Box3()
        box.expand_by_point((1, 2, 3))
        box.expand_by_point(Vec3(-1, 0, 5))
        assert_box_close(self, box, (-1, 0, 3), (1, 2, 5))

    def testContainsPoint(self):
        box = Box3((0, 0, 0), (1, 1, 1))
        self.assertTrue(box.contains_point((0.5, 0.5, 0.5)))
        self.assertTrue(box.contains_point((1, 1, 1)), "Boundary is inclusive")
        self.assertFalse(box.contains_point((1.001, 0.5, 0.5)))
        self.assertTrue(box.contains_point((1.001, 0.5, 0.5), tolerance=0.01))

    def testFromPoints(self):
        rng = np.random.default_rng(0)
        points = rng.normal(size=(50, 3))
        box = Box3.from_points(points)
        assert_box_close(self, box, points.min(axis=0), points.max(axis=0))
        for p in points:
            self.assertTrue(box.contains_point(p))

    def testFromNoPointsIsEmpty(self):
        self.assertTrue(Box3.from_points(np.zeros((0, 3))).is_empty())

    def testCopyCloneAndEquals(self):
        box = Box3((0, 0, 0), (1, 2, 3))
        clone = box.clone()
        self.assertEqual(box, clone)
        clone.max.x = 5.0
        self.assertEqual(box.max.x, 1.0)
        self.assertNotEqual(box, clone)

        target = Box3()
        self.assertIs(target.copy(box), target)
        self.assertTrue(target.equals(box))

    def testToArray(self):
        arr = Box3((0, 0, 0), (1, 2, 3)).to_array()
        self.assertEqual(arr.shape, (2, 3))
        self.assertTrue(np.array_equal(arr, [[0, 0, 0], [1, 2, 3]]))


class RayUnitTests(unittest.TestCase):
    """Tests for Ray helpers"""

    def testFieldsAreCoercedToVec3(self):
        ray = Ray((0, 1, 2), np.array([0.0, 0.0, 2.0]))
        self.assertIsInstance(ray.origin, Vec3)
        self.assertIsInstance(ray.direction, Vec3)
        self.assertEqual(ray.direction, Vec3(0, 0, 2), "Direction is not normalized")

    def testPointAtT(self):
        ray = Ray((1, 0, 0), (0, 2, 0))
        assert_vec_close(self, ray.point_at_t(1.5), (1, 3, 0))

    def testProjectPoint(self):
        ray = Ray((0, 0, 0), (2, 0, 0))
        self.assertAlmostEqual(ray.project_point((4, 3, -1)), 2.0)

    def testFromPoints(self):
        ray = Ray.from_points((1, 1, 1), (1, 1, 5))
        assert_vec_close(self, ray.origin, (1, 1, 1))
        assert_vec_close(self, ray.direction, (0, 0, 1))

    def testFromPointsTooClose(self):
        self.assertIsNone(Ray.from_points((1, 1, 1), (1, 1, 1 + 1e-9)))


if __name__ == '__main__':
    unittest.main()
