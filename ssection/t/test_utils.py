
from typing import Optional, Sequence, get_type_hints
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from ssection.core.errors import DegenerateVector
from ssection.core.logger_mixin import table_properties
from ssection.core.preprocessing.vector import Point3, Vector3
from ssection.core.utils import local_axes


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


class TestLocalAxes(TestCase):

    def test_horizontal_member(self):
        assert_allclose(
            local_axes(Point3(0, 0, 0), Point3(2, 0, 0)),
            np.array([[1, 0, 0], [0, 0, 1], [0, -1, 0]]),
            err_msg='For a member along x the local y-axis must point in '
                    'the direction of the global z-axis.'
        )

    def test_vertical_member(self):
        assert_allclose(
            local_axes(Point3(1, 1, 0), Point3(1, 1, 5)),
            np.array([[0, 0, 1], [0, 1, 0], [-1, 0, 0]]),
            err_msg='For members along z the global y-axis must be used as '
                    'web direction.'
        )

    def test_orthonormal(self):
        web = Vector3(0, 0.3, 2)
        m = local_axes(Point3(1, 2, 3), Point3(4, -1, 7), web)
        assert_allclose(m @ m.T, np.eye(3))
        assert_allclose(np.linalg.det(m), 1.0)
        assert_allclose(m[0], np.array([3, -3, 4]) / np.sqrt(34))
        self.assertAlmostEqual(float(m[2] @ web.as_array()), 0.0)
        self.assertGreater(
            float(m[1] @ web.as_array()), 0,
            'The local y-axis must lie on the side of the web direction.'
        )

    def test_degenerate(self):
        with self.assertRaises(DegenerateVector):
            local_axes(Point3(1, 2, 3), Point3(1, 2, 3))
        with self.assertRaises(
            DegenerateVector,
            msg='A web direction parallel to the member must be rejected.'
        ):
            local_axes(Point3(0, 0, 0), Point3(1, 1, 0), Vector3(-2, -2, 0))
        with self.assertRaises(DegenerateVector):
            local_axes(Point3(0, 0, 0), Point3(1, 0, 0), Vector3.zero())


class TestTableProperties(TestCase):

    def test_labels(self):
        table = table_properties([[1.0, 2.0], [3.0, 4.0]], ['A', 'Iy'],
                                 decimals=2)
        self.assertIn('1.00', table)
        self.assertIn('4.00', table)
        self.assertEqual(table.count('\n') + 1, 7)
        table = table_properties([[1.0]], ['A'], labels=['origin'])
        self.assertIn('origin', table)

    def test_default_labels(self):
        table = table_properties([[1.5], [2.5]], ['A'])
        rows = [line for line in table.splitlines() if line.startswith('|')]
        self.assertEqual(
            [r.split('|')[1].strip() for r in rows], ['', '1', '2'],
            'Rows without labels must be numbered from 1.'
        )
        self.assertEqual(
            get_type_hints(table_properties)['labels'],
            Optional[Sequence[str]]
        )
