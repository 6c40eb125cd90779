
import doctest
import json
from dataclasses import FrozenInstanceError
from itertools import product
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from ssection.core.errors import DegenerateVector, GeometryError
from ssection.core.preprocessing import vector
from ssection.core.preprocessing.vector import (
    Point3, Vector3, add, cross, divide, dot, length, negate, normalize,
    point_from_vector, scale, subtract, vector_from_point
)


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


SAMPLES = (
    Vector3(1, 0, 0), Vector3(0, -2.5, 4), Vector3(3, 4, 0),
    Vector3(-1.2, 0.7, 9.1), Vector3(1e-3, -5e2, 0.25),
)


class TestVector3(TestCase):

    def test_arithmetic(self):
        a, b = Vector3(1, 2, 3), Vector3(-4, 0.5, 2)
        self.assertEqual(add(a, b), Vector3(-3, 2.5, 5))
        self.assertEqual(subtract(a, b), Vector3(5, 1.5, 1))
        self.assertEqual(negate(a), Vector3(-1, -2, -3))
        self.assertEqual(a + b, add(a, b))
        self.assertEqual(a - b, subtract(a, b))
        self.assertEqual(-a, negate(a))

    def test_scale(self):
        v = Vector3(1, -2, 0.5)
        self.assertEqual(scale(v, 2), Vector3(2, -4, 1))
        self.assertEqual(
            scale(v, 2), scale(2, v),
            'Scaling must not depend on the order of vector and scalar.'
        )
        self.assertEqual(3 * v, v * 3)

    def test_divide(self):
        v = Vector3(1, -2, 0.5)
        self.assertEqual(divide(v, 2), Vector3(0.5, -1, 0.25))
        self.assertEqual(v / 4, Vector3(0.25, -0.5, 0.125))
        with self.assertRaises(ZeroDivisionError):
            divide(v, 0)

    def test_unsupported_operands(self):
        v = Vector3(1, 2, 3)
        with self.assertRaises(TypeError):
            v * v
        with self.assertRaises(TypeError):
            v + 1
        with self.assertRaises(TypeError):
            v / Vector3(1, 1, 1)

    def test_dot(self):
        self.assertEqual(dot(Vector3(1, 2, 3), Vector3(4, -5, 6)), 12)
        for a, b in product(SAMPLES, repeat=2):
            self.assertEqual(
                dot(a, b), dot(b, a), 'The dot product must be commutative.'
            )

    def test_cross(self):
        self.assertEqual(cross(Vector3.i(), Vector3.j()), Vector3.k())
        self.assertEqual(cross(Vector3.j(), Vector3.k()), Vector3.i())
        self.assertEqual(cross(Vector3.k(), Vector3.i()), Vector3.j())
        for a, b in product(SAMPLES, repeat=2):
            assert_allclose(
                cross(a, b).as_array(), (-cross(b, a)).as_array(),
                err_msg='The cross product must be anticommutative.'
            )
            c = cross(a, b)
            assert_allclose(
                [dot(c, a), dot(c, b)], [0, 0],
                err_msg='The cross product must be perpendicular to both '
                        'factors.'
            )

    def test_length(self):
        self.assertEqual(length(Vector3(3, 4, 0)), 5.0)
        self.assertEqual(Vector3.zero().length, 0.0)
        for v in SAMPLES:
            self.assertGreaterEqual(length(v), 0)
            assert_allclose(length(v) ** 2, dot(v, v))

    def test_normalize(self):
        assert_allclose(
            normalize(Vector3(3, 4, 0)).as_array(), [0.6, 0.8, 0.0]
        )
        for v in SAMPLES:
            assert_allclose(normalize(v).length, 1.0)
        with self.assertRaises(
            DegenerateVector, msg='A zero vector can not be normalized.'
        ):
            normalize(Vector3.zero())
        with self.assertRaises(DegenerateVector):
            Vector3(0.0, -0.0, 0.0).unit()

    def test_degenerate_vector_error_kinds(self):
        with self.assertRaises(ZeroDivisionError):
            normalize(Vector3(0, 0, 0))
        self.assertTrue(issubclass(DegenerateVector, GeometryError))
        self.assertTrue(issubclass(DegenerateVector, ValueError))

    def test_constants(self):
        self.assertEqual(Vector3.zero(), Vector3(0, 0, 0))
        self.assertEqual(Vector3.negative_i(), -Vector3.i())
        self.assertEqual(Vector3.negative_j(), -Vector3.j())
        self.assertEqual(Vector3.negative_k(), -Vector3.k())
        self.assertEqual(Vector3.unit_scale(), Vector3(1, 1, 1))
        self.assertEqual(Vector3.from_xyz(1, 2, 3), Vector3(1, 2, 3))

    def test_immutable(self):
        v = Vector3(1, 2, 3)
        with self.assertRaises(FrozenInstanceError):
            v.x = 5
        w = v.with_x(5)
        self.assertEqual(w, Vector3(5, 2, 3))
        self.assertEqual(
            v, Vector3(1, 2, 3),
            'Changing a component must return a new vector.'
        )
        self.assertEqual(v.with_y(0), Vector3(1, 0, 3))
        self.assertEqual(v.with_z(0), Vector3(1, 2, 0))
        self.assertEqual(len({v, Vector3(1, 2, 3)}), 1)

    def test_str(self):
        self.assertEqual(str(Vector3(1.0, -2.5, 0.0)), '1.0, -2.5, 0.0')
        self.assertEqual(
            str(Vector3(1e-12, 0.0, 2.0)), '~0, 0.0, 2.0',
            'Near-zero components must be displayed as ~0.'
        )

    def test_as_array(self):
        arr = Vector3(1, 2, 3).as_array()
        self.assertEqual(arr.shape, (3,))
        assert_allclose(arr, np.array([1.0, 2.0, 3.0]))
        self.assertEqual(tuple(Vector3(1, 2, 3)), (1, 2, 3))

    def test_persistence(self):
        v = Vector3(0.1, 1 / 3, -2.2250738585072014e-308)
        self.assertEqual(Vector3.from_dict(v.to_dict()), v)
        self.assertEqual(
            Vector3.from_dict(json.loads(json.dumps(v.to_dict()))), v,
            'Components must survive a JSON round trip exactly.'
        )


class TestPoint3(TestCase):

    def test_conversion(self):
        p = Point3(0.1, -7.0, 1 / 3)
        v = vector_from_point(p)
        self.assertEqual(v, Vector3(0.1, -7.0, 1 / 3))
        self.assertEqual(
            point_from_vector(v), p,
            'Converting a point to a vector and back must be lossless.'
        )
        self.assertEqual(Vector3.from_point(p).to_point(), p)

    def test_persistence(self):
        p = Point3(1.5, 0.1, -3.0)
        self.assertEqual(Point3.from_dict(p.to_dict()), p)
        self.assertEqual(tuple(p), (1.5, 0.1, -3.0))


class TestVectorDocs(TestCase):

    def test_docstring_examples(self):
        result = doctest.testmod(vector)
        self.assertGreater(result.attempted, 0)
        self.assertEqual(
            result.failed, 0,
            'The examples in the docstrings of the vector module must match '
            'the printed results.'
        )
