from unittest import TestCase

import numpy as np

from rotconv import conversions as cv


SRT3D2 = np.sqrt(3) / 2


class TestRotX(TestCase):

    def test_rot_x(self):

        angles = [np.pi, np.pi/2, np.pi/3, 0, -np.pi/2, -np.pi/3]

        mats = [[[1, 0, 0], [0, -1, 0], [0, 0, -1]],
                [[1, 0, 0], [0, 0, -1], [0, 1, 0]],
                [[1, 0, 0], [0, 0.5, -SRT3D2], [0, SRT3D2, 0.5]],
                [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                [[1, 0, 0], [0, 0, 1], [0, -1, 0]],
                [[1, 0, 0], [0, 0.5, SRT3D2], [0, -SRT3D2, 0.5]]]

        for angle, solu in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(cv.rot_x(angle), solu)


class TestRotY(TestCase):

    def test_rot_y(self):

        angles = [np.pi, np.pi/2, np.pi/3, 0, -np.pi/2, -np.pi/3]

        mats = [[[-1, 0, 0], [0, 1, 0], [0, 0, -1]],
                [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
                [[0.5, 0, SRT3D2], [0, 1, 0], [-SRT3D2, 0, 0.5]],
                [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                [[0, 0, -1], [0, 1, 0], [1, 0, 0]],
                [[0.5, 0, -SRT3D2], [0, 1, 0], [SRT3D2, 0, 0.5]]]

        for angle, solu in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(cv.rot_y(angle), solu)


class TestRotZ(TestCase):

    def test_rot_z(self):

        angles = [np.pi, np.pi/2, np.pi/3, 0, -np.pi/2, -np.pi/3]

        mats = [[[-1, 0, 0], [0, -1, 0], [0, 0, 1]],
                [[0, -1, 0], [1, 0, 0], [0, 0, 1]],
                [[0.5, -SRT3D2, 0], [SRT3D2, 0.5, 0], [0, 0, 1]],
                [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                [[0, 1, 0], [-1, 0, 0], [0, 0, 1]],
                [[0.5, SRT3D2, 0], [-SRT3D2, 0.5, 0], [0, 0, 1]]]

        for angle, solu in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(cv.rot_z(angle), solu)

    def test_matches_axis_angle(self):

        np.testing.assert_array_almost_equal(cv.rot_z(0.3), cv.axis_angle_to_matrix([0, 0, 1], 0.3, 'rad'))


class TestSkew(TestCase):

    def test_skew(self):

        np.testing.assert_array_equal(cv.skew([1, 2, 3]), [[0, -3, 2], [3, 0, -1], [-2, 1, 0]])

    def test_cross_product(self):

        np.testing.assert_array_almost_equal(cv.skew([1, 2, 3]) @ [4, -5, 6], np.cross([1, 2, 3], [4, -5, 6]))

    def test_wrong_shape(self):

        with self.assertRaises(ValueError):
            cv.skew([1, 2])
