from unittest import TestCase

import numpy as np

from rotconv.equivalents import EquivalentsSolver, EquivalentsOptions, Equivalents
from rotconv.exceptions import InvalidAxis, InvalidRotationMatrix, InvalidUnit


SQRT2_2 = np.sqrt(2) / 2


class TestEquivalentsOptions(TestCase):

    def test_defaults(self):

        options = EquivalentsOptions()

        self.assertEqual(options.input_unit, 'deg')
        self.assertEqual(options.axis_angle_unit, 'deg')
        self.assertEqual(options.euler_unit, 'deg')
        self.assertEqual(options.matrix_tolerance, 1e-3)
        self.assertEqual(options.digits, 4)

    def test_invalid(self):

        with self.assertRaises(InvalidUnit):
            EquivalentsSolver(EquivalentsOptions(euler_unit='grad'))

        with self.assertRaises(InvalidUnit):
            EquivalentsSolver(EquivalentsOptions(axis_angle_unit='degrees'))

        with self.assertRaises(ValueError):
            EquivalentsSolver(EquivalentsOptions(matrix_tolerance=0))


class TestEquivalentsSolver(TestCase):

    def check_quarter_turn_about_z(self, result: Equivalents):

        np.testing.assert_array_almost_equal(result.quaternion, [0, 0, SQRT2_2, SQRT2_2])
        np.testing.assert_array_almost_equal(result.matrix, [[0, -1, 0], [1, 0, 0], [0, 0, 1]])
        np.testing.assert_array_almost_equal(result.axis, [0, 0, 1])
        self.assertAlmostEqual(result.angle, 90)
        np.testing.assert_array_almost_equal(result.euler, [90, 0, 0])

    def test_axis_angle(self):

        solver = EquivalentsSolver()

        result = solver.solve('axis-angle', [0, 0, 1, 90])

        self.assertEqual(result.source, 'axis-angle')
        self.check_quarter_turn_about_z(result)

    def test_axis_angle_radian_input(self):

        solver = EquivalentsSolver()

        result = solver.solve('axis-angle', [0, 0, 2, np.pi / 2], unit='rad')

        # the input axis is reported normalized and the angle in the output unit
        self.check_quarter_turn_about_z(result)
        self.assertEqual(result.axis_angle_unit, 'deg')

    def test_axis_angle_zero_axis(self):

        solver = EquivalentsSolver()

        with self.assertRaises(InvalidAxis):
            solver.solve('axis-angle', [0, 0, 0, 90])

    def test_euler(self):

        solver = EquivalentsSolver()

        result = solver.solve('euler', [90, 0, 0])

        self.assertEqual(result.source, 'euler')
        self.check_quarter_turn_about_z(result)

    def test_euler_keeps_input_angles(self):

        solver = EquivalentsSolver()

        # beyond gimbal lock the angles would not survive a round trip through the quaternion
        result = solver.solve('euler', [0, 120, 0])

        np.testing.assert_array_almost_equal(result.euler, [0, 120, 0])

    def test_quaternion(self):

        solver = EquivalentsSolver()

        result = solver.solve('quaternion', [0, 0, 2, 2])

        self.assertEqual(result.source, 'quaternion')
        self.check_quarter_turn_about_z(result)

    def test_zero_quaternion(self):

        solver = EquivalentsSolver()

        with self.assertRaises(ValueError):
            solver.solve('quaternion', [0, 0, 0, 0])

    def test_matrix(self):

        solver = EquivalentsSolver()

        result = solver.solve('matrix', [[0, -1, 0], [1, 0, 0], [0, 0, 1]])

        self.assertEqual(result.source, 'matrix')
        self.check_quarter_turn_about_z(result)

        result = solver.solve('matrix', [0, 1, 0, -1, 0, 0, 0, 0, 1])

        self.check_quarter_turn_about_z(result)

    def test_matrix_half_turn(self):

        solver = EquivalentsSolver()

        result = solver.solve('matrix', np.diag([-1, 1, -1]))

        self.assertAlmostEqual(abs(result.axis[1]), 1)
        self.assertAlmostEqual(result.angle, 180)

    def test_invalid_matrix(self):

        solver = EquivalentsSolver()

        with self.assertRaises(InvalidRotationMatrix):
            solver.solve('matrix', np.diag([1, 1, -1]))

        with self.assertRaises(InvalidRotationMatrix):
            solver.solve('matrix', [[1, 0, 0], [0, 1, 0], [0, 0.01, 1]])

    def test_matrix_tolerance(self):

        solver = EquivalentsSolver(EquivalentsOptions(matrix_tolerance=0.1))

        result = solver.solve('matrix', [[1, 0, 0], [0, 1, 0], [0, 0.01, 1]])

        self.assertEqual(result.source, 'matrix')

    def test_bad_input(self):

        solver = EquivalentsSolver()

        with self.assertRaises(ValueError):
            solver.solve('rotvec', [0, 0, 1])

        with self.assertRaises(ValueError):
            solver.solve('euler', [0, 0])

        with self.assertRaises(ValueError):
            solver.solve('quaternion', [0, 0, 1])

        with self.assertRaises(InvalidUnit):
            solver.solve('euler', [0, 0, 0], unit='grad')

    def test_output_units(self):

        solver = EquivalentsSolver(EquivalentsOptions(axis_angle_unit='rad', euler_unit='rad'))

        result = solver.solve('quaternion', [0, 0, SQRT2_2, SQRT2_2])

        self.assertAlmostEqual(result.angle, np.pi / 2)
        np.testing.assert_array_almost_equal(result.euler, [np.pi / 2, 0, 0])

        # input angles stay in degrees whatever the output units are
        result = solver.solve('axis-angle', [0, 0, 1, 90])

        np.testing.assert_array_almost_equal(result.quaternion, [0, 0, SQRT2_2, SQRT2_2])
        self.assertAlmostEqual(result.angle, np.pi / 2)

        result = solver.solve('euler', [90, 0, 0])

        np.testing.assert_array_almost_equal(result.quaternion, [0, 0, SQRT2_2, SQRT2_2])
        np.testing.assert_array_almost_equal(result.euler, [np.pi / 2, 0, 0])

    def test_input_unit(self):

        solver = EquivalentsSolver(EquivalentsOptions(input_unit='rad'))

        result = solver.solve('axis-angle', [0, 0, 1, np.pi / 2])

        self.check_quarter_turn_about_z(result)

        # an explicit unit wins over the configured one
        result = solver.solve('euler', [90, 0, 0], unit='deg')

        self.check_quarter_turn_about_z(result)

        with self.assertRaises(InvalidUnit):
            EquivalentsSolver(EquivalentsOptions(input_unit='grad'))

    def test_digits_option(self):

        solver = EquivalentsSolver(EquivalentsOptions(digits=1))

        result = solver.solve('quaternion', [0, 0, 0, 1])

        self.assertEqual(result.digits, 1)
        self.assertEqual(result.format()['quaternion'], '0.0\t0.0\t0.0\t1.0')
        self.assertEqual(result.format()['matrix'].splitlines()[0], '1.0  0.0  0.0')

        # an explicit precision still overrides the configured one
        self.assertEqual(result.format(3)['quaternion'], '0.000\t0.000\t0.000\t1.000')

    def test_reset_settings(self):

        solver = EquivalentsSolver()

        solver.euler_unit = 'rad'

        np.testing.assert_array_almost_equal(solver.solve('euler', [90, 0, 0]).euler, [np.pi / 2, 0, 0])

        solver.reset_settings()

        self.assertEqual(solver.euler_unit, 'deg')
        self.assertEqual(solver.original_options, EquivalentsOptions())

    def test_format(self):

        solver = EquivalentsSolver()

        formatted = solver.solve('axis-angle', [0, 0, 1, 90]).format()

        self.assertEqual(formatted['axis-angle'], '0.0000\t0.0000\t1.0000\t90.00')
        self.assertEqual(formatted['euler'], '90.00\t0.00\t0.00')
        self.assertEqual(formatted['quaternion'], '0.0000\t0.0000\t0.7071\t0.7071')
        self.assertEqual(formatted['matrix'].splitlines()[2], '0.0000  0.0000  1.0000')

        formatted = EquivalentsSolver(EquivalentsOptions(euler_unit='rad')).solve('euler', [0, 0, 0]).format(2)

        self.assertEqual(formatted['euler'], '0.0000\t0.0000\t0.0000')
        self.assertEqual(formatted['quaternion'], '0.00\t0.00\t0.00\t1.00')
