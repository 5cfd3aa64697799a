from unittest import TestCase

import numpy as np

from rotconv import Rotation, InvalidAxis, InvalidUnit


SQRT2_2 = np.sqrt(2) / 2


class TestRotation(TestCase):

    def check_rotation(self, rotation, quaternion, mupdate):

        np.testing.assert_array_almost_equal(quaternion, rotation.quaternion)
        np.testing.assert_array_almost_equal(quaternion[:3], rotation.q_vector)
        self.assertAlmostEqual(quaternion[-1], rotation.q_scalar)
        self.assertIs(rotation._mupdate, mupdate)

    def test_init(self):

        rot = Rotation()

        self.check_rotation(rot, [0, 0, 0, 1], True)

        rot = Rotation([0, 0, 0, 1])

        self.check_rotation(rot, [0, 0, 0, 1], True)

        rot = Rotation(data=[0, 0, 0, 1])

        self.check_rotation(rot, [0, 0, 0, 1], True)

        rot = Rotation(np.eye(3))

        self.check_rotation(rot, [0, 0, 0, 1], False)

        rot = Rotation([SQRT2_2, 0, 0, SQRT2_2])

        self.check_rotation(rot, [SQRT2_2, 0, 0, SQRT2_2], True)

        # no sign convention is imposed
        rot = Rotation([SQRT2_2, 0, 0, -SQRT2_2])

        self.check_rotation(rot, [SQRT2_2, 0, 0, -SQRT2_2], True)

        rot2 = Rotation(rot)

        self.check_rotation(rot2, [SQRT2_2, 0, 0, -SQRT2_2], True)
        self.assertIsNot(rot, rot2)

        rot2.quaternion = [0, 0, 0, 1]

        self.check_rotation(rot, [SQRT2_2, 0, 0, -SQRT2_2], True)

    def test_init_column_major(self):

        rot = Rotation([0, 1, 0, -1, 0, 0, 0, 0, 1])

        np.testing.assert_array_almost_equal(rot.matrix, [[0, -1, 0], [1, 0, 0], [0, 0, 1]])
        np.testing.assert_array_almost_equal(rot.quaternion, [0, 0, SQRT2_2, SQRT2_2])

    def test_init_bad_data(self):

        with self.assertRaises(ValueError):
            Rotation([0, 0, 1])

        with self.assertRaises(ValueError):
            Rotation([0, 0, 0, 0])

    def test_quaternion_setter(self):

        rot = Rotation()

        rot.quaternion = [0, 0, SQRT2_2, SQRT2_2]

        self.check_rotation(rot, [0, 0, SQRT2_2, SQRT2_2], True)

        with self.assertWarns(UserWarning):
            rot.quaternion = [1, 2, 3, 4]

        self.check_rotation(rot, np.array([1, 2, 3, 4]) / np.sqrt(30), True)

        rot.quaternion = Rotation([1, 0, 0, 0])

        self.check_rotation(rot, [1, 0, 0, 0], True)

        with self.assertRaises(ValueError):
            rot.quaternion = [1, 2, 3]

    def test_matrix_getter(self):

        rot = Rotation([SQRT2_2, 0, 0, SQRT2_2])

        np.testing.assert_array_almost_equal(rot.matrix, [[1, 0, 0], [0, 0, -1], [0, 1, 0]])

        self.assertFalse(rot._mupdate)

        # cached until the quaternion changes
        self.assertIs(rot.matrix, rot.matrix)

        rot.quaternion = [0, 0, 0, 1]

        self.assertTrue(rot._mupdate)

        np.testing.assert_array_almost_equal(rot.matrix, np.eye(3))

    def test_matrix_setter(self):

        rot = Rotation()

        rot.matrix = [[1, 0, 0], [0, 0, -1], [0, 1, 0]]

        self.check_rotation(rot, [SQRT2_2, 0, 0, SQRT2_2], False)

    def test_from_constructors(self):

        expected = [0, 0, SQRT2_2, SQRT2_2]

        self.check_rotation(Rotation.from_quaternion(expected), expected, True)
        self.check_rotation(Rotation.from_matrix([[0, -1, 0], [1, 0, 0], [0, 0, 1]]), expected, False)
        self.check_rotation(Rotation.from_axis_angle([0, 0, 3], 90, 'deg'), expected, True)
        self.check_rotation(Rotation.from_euler(np.pi / 2, 0, 0, 'rad'), expected, True)

        with self.assertRaises(InvalidAxis):
            Rotation.from_axis_angle([0, 0, 0], 90, 'deg')

        with self.assertRaises(InvalidUnit):
            Rotation.from_euler(90, 0, 0, 'grad')

    def test_as_axis_angle(self):

        axis, angle = Rotation([0, 0, SQRT2_2, SQRT2_2]).as_axis_angle('deg')

        np.testing.assert_array_almost_equal(axis, [0, 0, 1])
        self.assertAlmostEqual(angle, 90)

    def test_as_euler(self):

        np.testing.assert_array_almost_equal(Rotation.from_euler(20, -30, 40, 'deg').as_euler('deg'), [20, -30, 40])

    def test_inv(self):

        rot = Rotation([1, 2, 3, 4])

        np.testing.assert_array_almost_equal(rot.inv().quaternion, np.array([-1, -2, -3, 4]) / np.sqrt(30))

        np.testing.assert_array_almost_equal((rot * rot.inv()).quaternion, [0, 0, 0, 1])

    def test_eq(self):

        rot = Rotation([0, 0, SQRT2_2, SQRT2_2])

        self.assertTrue(rot == Rotation([0, 0, SQRT2_2, SQRT2_2]))
        self.assertTrue(rot == Rotation([0, 0, -SQRT2_2, -SQRT2_2]))
        self.assertTrue(rot == [0, 0, SQRT2_2, SQRT2_2])
        self.assertTrue(rot == [[0, -1, 0], [1, 0, 0], [0, 0, 1]])
        self.assertFalse(rot == Rotation())
        self.assertFalse(rot == [1, 2])

    def test_mul(self):

        yaw = Rotation.from_euler(90, 0, 0, 'deg')
        roll = Rotation.from_euler(0, 0, 90, 'deg')

        np.testing.assert_array_almost_equal((yaw * roll).as_euler('deg'), [90, 0, 90])

        np.testing.assert_array_almost_equal((yaw * roll).matrix, yaw.matrix @ roll.matrix)

        with self.assertRaises(TypeError):
            yaw * 2

    def test_copy(self):

        rot = Rotation([0, 0, SQRT2_2, SQRT2_2])

        rot_copy = rot.copy()

        self.assertIsNot(rot, rot_copy)
        self.assertTrue(rot == rot_copy)

        rot_copy.quaternion = [0, 0, 0, 1]

        np.testing.assert_array_almost_equal(rot.quaternion, [0, 0, SQRT2_2, SQRT2_2])

    def test_str(self):

        self.assertEqual(str(Rotation()), str(np.array([0, 0, 0, 1.0])))
        self.assertTrue(repr(Rotation()).startswith('Rotation('))
