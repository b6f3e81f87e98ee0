import unittest
from unittest import TestCase
import dataclasses
from fractions import Fraction

import numpy as np

import math3 as m3
from math3 import vector as vec


class TestAsReal(TestCase):

    def test_numbers(self):

        for value, expected in [(1, 1.0), (2.5, 2.5), (np.float32(0.5), 0.5), (np.int64(-3), -3.0)]:

            with self.subTest(value=value):

                result = m3.as_real(value)

                self.assertIsInstance(result, float)
                self.assertEqual(result, expected)

    def test_numeric_text(self):

        self.assertEqual(m3.as_real('2.5'), 2.5)
        self.assertEqual(m3.as_real('  -4 \n'), -4.0)
        self.assertEqual(m3.as_real('1e3'), 1000.0)
        self.assertEqual(m3.as_real('-inf'), -np.inf)
        self.assertTrue(np.isnan(m3.as_real('nan')))

    def test_invalid(self):

        for value in ['abc', '', '   ', '1,2', '1_000', None, True, [1.0], object()]:

            with self.subTest(value=value):

                with self.assertRaises(m3.CoercionError):
                    m3.as_real(value)

    def test_coercion_error_is_value_error(self):

        with self.assertRaises(ValueError):
            m3.as_real('not a number')


class TestVector3(TestCase):

    def test_creation(self):

        v = m3.Vector3(1, 2, 3)

        self.assertEqual((v.x, v.y, v.z), (1.0, 2.0, 3.0))

        for component in v:
            self.assertIsInstance(component, float)

    def test_creation_rejects_non_real(self):

        for bad in ['1', None, True, [1], 1 + 2j]:

            with self.subTest(bad=bad):

                with self.assertRaises(TypeError):
                    m3.Vector3(bad, 0, 0)

                with self.assertRaises(TypeError):
                    m3.Vector3(0, 0, bad)

    def test_creation_arity(self):

        with self.assertRaises(TypeError):
            m3.Vector3(1, 2)

        with self.assertRaises(TypeError):
            m3.Vector3(1, 2, 3, 4)

    def test_nan_propagates(self):

        v = m3.Vector3(np.nan, 1, 2)

        result = m3.add(v, m3.Vector3(1, 1, 1))

        self.assertTrue(np.isnan(result.x))
        self.assertEqual(result.y, 2.0)
        self.assertTrue(np.isnan(m3.length(v)))
        self.assertTrue(np.isnan(m3.dot(v, v)))

    def test_coerce(self):

        self.assertEqual(m3.Vector3.coerce('1', 2, ' 3.5 '), m3.Vector3(1, 2, 3.5))

        with self.assertRaises(m3.CoercionError):
            m3.Vector3.coerce('1', 'two', 3)

    def test_immutable(self):

        v = m3.Vector3(1, 2, 3)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            v.x = 5

    def test_equality_and_hash(self):

        self.assertEqual(m3.Vector3(1, 2, 3), m3.Vector3(1.0, 2.0, 3.0))
        self.assertNotEqual(m3.Vector3(1, 2, 3), m3.Vector3(1, 2, 4))
        self.assertEqual(hash(m3.Vector3(1, 2, 3)), hash(m3.Vector3(1, 2, 3)))

    def test_sequence_protocol(self):

        v = m3.Vector3(4, 5, 6)

        x, y, z = v

        self.assertEqual((x, y, z), (4.0, 5.0, 6.0))
        self.assertEqual(len(v), 3)
        self.assertEqual(v[1], 5.0)
        self.assertEqual(v[-1], 6.0)

        with self.assertRaises(IndexError):
            _ = v[3]

    def test_array_round_trip(self):

        for seq_type in [list, tuple, np.array]:

            with self.subTest(seq_type=seq_type):

                v = m3.Vector3.from_array(seq_type([1, 2, 3]))

                self.assertEqual(v, m3.Vector3(1, 2, 3))

        array = m3.Vector3(1, 2, 3).to_array()

        self.assertEqual(array.dtype, np.float64)
        np.testing.assert_array_equal(array, [1, 2, 3])

    def test_from_array_bad_shape(self):

        for bad in [[1, 2], [1, 2, 3, 4], np.eye(3), 5]:

            with self.subTest(bad=bad):

                with self.assertRaises(ValueError):
                    m3.Vector3.from_array(bad)

    def test_from_array_rejects_non_numeric(self):

        for bad in [['1', '2', '3'], [1, 2, None], [True, False, True], np.array([True, False, True])]:

            with self.subTest(bad=bad):

                with self.assertRaises(TypeError):
                    m3.Vector3.from_array(bad)

    def test_creation_too_large(self):

        with self.assertRaises(ValueError):
            m3.Vector3(10 ** 400, 0, 0)

        with self.assertRaises(m3.CoercionError):
            m3.as_real(10 ** 400)

    def test_to_array_is_a_copy(self):

        v = m3.Vector3(1, 2, 3)

        array = v.to_array()
        array[0] = 10

        self.assertEqual(v.x, 1.0)

    def test_operators(self):

        a = m3.Vector3(1, 2, 3)
        b = m3.Vector3(4, 5, 6)

        self.assertEqual(a + b, m3.Vector3(5, 7, 9))
        self.assertEqual(b - a, m3.Vector3(3, 3, 3))
        self.assertEqual(-a, m3.Vector3(-1, -2, -3))
        self.assertEqual(a * 2, m3.Vector3(2, 4, 6))
        self.assertEqual(2 * a, m3.Vector3(2, 4, 6))
        self.assertEqual(np.float64(2) * a, m3.Vector3(2, 4, 6))
        self.assertEqual(b * 0.5, m3.Vector3(2, 2.5, 3))

    def test_operators_reject_other_types(self):

        a = m3.Vector3(1, 2, 3)

        with self.assertRaises(TypeError):
            _ = a * a

        with self.assertRaises(TypeError):
            _ = a + 1

        with self.assertRaises(TypeError):
            _ = a - [1, 2, 3]

        with self.assertRaises(TypeError):
            _ = a * True

        with self.assertRaises(TypeError):
            _ = a / 2

    def test_methods_match_functions(self):

        a = m3.Vector3(1, -2, 0.5)
        b = m3.Vector3(3, 0.25, -1)

        self.assertEqual(a.dot(b), m3.dot(a, b))
        self.assertEqual(a.cross(b), m3.cross(a, b))
        self.assertEqual(a.length(), m3.length(a))
        self.assertEqual(a.unit(), m3.unit(a))
        self.assertTrue(a.isclose(m3.Vector3(1, -2, 0.5)))


class TestVectorOperations(TestCase):

    def test_zero(self):

        self.assertEqual(m3.zero(), m3.Vector3(0, 0, 0))

    def test_add(self):

        self.assertEqual(m3.add(m3.Vector3(1, 2, 3), m3.Vector3(4, 5, 6)), m3.Vector3(5, 7, 9))

    def test_add_identity(self):

        for v in [m3.Vector3(1, 2, 3), m3.Vector3(-0.5, 1e10, -1e-10), m3.Vector3(0, 0, 0)]:

            with self.subTest(v=v):

                self.assertEqual(m3.add(v, m3.zero()), v)

    def test_sub(self):

        self.assertEqual(m3.sub(m3.Vector3(1, 2, 3), m3.Vector3(4, 6, 8)), m3.Vector3(-3, -4, -5))

    def test_neg(self):

        self.assertEqual(m3.neg(m3.Vector3(1, -2, 3)), m3.Vector3(-1, 2, -3))

    def test_scale(self):

        self.assertEqual(m3.scale(m3.Vector3(1, -2, 3), 0.5), m3.Vector3(0.5, -1, 1.5))
        self.assertEqual(m3.scale(m3.Vector3(1, -2, 3), 0), m3.Vector3(0, 0, 0))
        self.assertEqual(m3.scale(m3.Vector3(1, -2, 3), Fraction(1, 2)), m3.Vector3(0.5, -1, 1.5))

    def test_scale_rejects_non_real(self):

        for bad in [True, '2', None, 1 + 2j]:

            with self.subTest(scalar=bad):

                with self.assertRaises(TypeError):
                    m3.scale(m3.Vector3(1, 2, 3), bad)

    def test_length(self):

        self.assertEqual(m3.length(m3.Vector3(3, 4, 0)), 5.0)
        self.assertEqual(m3.length(m3.Vector3(0, 0, 0)), 0.0)
        self.assertEqual(m3.length(m3.Vector3(-2, 0, 0)), 2.0)
        self.assertAlmostEqual(m3.length(m3.Vector3(1, 1, 1)), np.sqrt(3))

    def test_unit(self):

        result = m3.unit(m3.Vector3(3, 4, 0))

        np.testing.assert_array_almost_equal(result.to_array(), [0.6, 0.8, 0.0])

    def test_unit_length(self):

        for v in [m3.Vector3(1, 2, 3), m3.Vector3(-1e-5, 3e-6, 0), m3.Vector3(1e8, -1e8, 5)]:

            with self.subTest(v=v):

                self.assertAlmostEqual(m3.length(m3.unit(v)), 1.0)

    def test_extreme_magnitudes(self):

        self.assertEqual(m3.length(m3.Vector3(1e-200, 0, 0)), 1e-200)
        self.assertEqual(m3.unit(m3.Vector3(1e-200, 0, 0)), m3.Vector3(1, 0, 0))
        self.assertEqual(m3.unit(m3.Vector3(5e-324, 0, 0)), m3.Vector3(1, 0, 0))

        self.assertTrue(np.isclose(m3.length(m3.Vector3(1e200, 1e200, 0)), 1e200 * np.sqrt(2), rtol=1e-15, atol=0))

        for v in [m3.Vector3(1e200, 0, 0), m3.Vector3(1e200, -1e200, 1e199), m3.Vector3(1e-200, 1e-200, 1e-200)]:

            with self.subTest(v=v):

                self.assertAlmostEqual(m3.length(m3.unit(v)), 1.0)

    def test_unit_zero_raises(self):

        with self.assertRaises(m3.ZeroLengthError):
            m3.unit(m3.zero())

        with self.assertRaises(ValueError):
            m3.unit(m3.zero(), zero_policy='raise')

    def test_unit_zero_returns_zero(self):

        with self.assertLogs('math3.vector', level='DEBUG'):
            self.assertEqual(m3.unit(m3.zero(), zero_policy='zero'), m3.zero())

        self.assertEqual(m3.unit(m3.Vector3(0, 2, 0), zero_policy='zero'), m3.Vector3(0, 1, 0))

    def test_unit_bad_policy(self):

        with self.assertRaises(ValueError):
            m3.unit(m3.Vector3(1, 0, 0), zero_policy='ignore')

    def test_unit_nan(self):

        result = m3.unit(m3.Vector3(np.nan, 0, 0))

        self.assertTrue(np.isnan(result.to_array()).all())

    def test_dot(self):

        self.assertEqual(m3.dot(m3.Vector3(1, 2, 3), m3.Vector3(4, 5, 6)), 32.0)
        self.assertEqual(m3.dot(m3.Vector3(1, 0, 0), m3.Vector3(0, 1, 0)), 0.0)

    def test_cross(self):

        x = m3.Vector3(1, 0, 0)
        y = m3.Vector3(0, 1, 0)

        self.assertEqual(m3.cross(x, y), m3.Vector3(0, 0, 1))
        self.assertEqual(m3.cross(y, x), m3.Vector3(0, 0, -1))

        np.testing.assert_array_equal(m3.cross(m3.Vector3(1, 2, 3), m3.Vector3(4, 5, 6)).to_array(),
                                      np.cross([1, 2, 3], [4, 5, 6]))

    def test_cross_anticommutative(self):

        a = m3.Vector3(0.3, -1.2, 2.5)
        b = m3.Vector3(-4, 0.7, 1.1)

        self.assertEqual(m3.cross(a, b), -m3.cross(b, a))

    def test_cross_orthogonal(self):

        pairs = [(m3.Vector3(1, 2, 3), m3.Vector3(4, 5, 6)),
                 (m3.Vector3(0.3, -1.2, 2.5), m3.Vector3(-4, 0.7, 1.1)),
                 (m3.Vector3(1, 0, 0), m3.Vector3(0, 0, 1))]

        for a, b in pairs:

            with self.subTest(a=a, b=b):

                c = m3.cross(a, b)

                self.assertAlmostEqual(m3.dot(c, a), 0.0)
                self.assertAlmostEqual(m3.dot(c, b), 0.0)

    def test_cross_parallel(self):

        self.assertEqual(m3.cross(m3.Vector3(1, 2, 3), m3.Vector3(2, 4, 6)), m3.zero())

    def test_isclose(self):

        a = m3.Vector3(1, 2, 3)

        self.assertTrue(vec.isclose(a, m3.Vector3(1, 2, 3 + 1e-12)))
        self.assertFalse(vec.isclose(a, m3.Vector3(1, 2, 3.1)))
        self.assertTrue(vec.isclose(a, m3.Vector3(1, 2, 3.1), atol=0.2))

    def test_format(self):

        self.assertEqual(m3.format_vector(m3.Vector3(1, 2.5, -3)), '1.00, 2.50, -3.00')
        self.assertEqual(str(m3.Vector3(0.126, 10, 1 / 3)), '0.13, 10.00, 0.33')
        self.assertEqual(repr(m3.Vector3(1, 2, 3)), 'Vector3(x=1.0, y=2.0, z=3.0)')


if __name__ == '__main__':
    unittest.main()
