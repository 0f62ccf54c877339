import os
import unittest
import warnings

import numpy as np

import cachematrix


class MatrixLike:
    """Minimal object exposing the rows()/cols()/get(i, j) matrix protocol."""

    def __init__(self, data):
        self._data = data

    def rows(self):
        return len(self._data)

    def cols(self):
        return len(self._data[0]) if self._data else 0

    def get(self, i, j):
        return self._data[i][j]


class TestInvert(unittest.TestCase):
    def test_returns_numpy_inverse(self):
        m = [[4.0, 7.0], [2.0, 6.0]]
        inv = cachematrix.invert(m)
        self.assertIsInstance(inv, np.ndarray)
        np.testing.assert_allclose(inv, [[0.6, -0.7], [-0.2, 0.4]])

    def test_matrix_protocol_input(self):
        inv = cachematrix.invert(MatrixLike([[2.0, 0.0], [0.0, 4.0]]))
        np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.25]])

    def test_one_by_one(self):
        np.testing.assert_allclose(cachematrix.invert([[4.0]]), [[0.25]])

    def test_rejects_non_2d(self):
        with self.assertRaises(cachematrix.ShapeError):
            cachematrix.invert([1.0, 2.0])

    def test_rejects_empty(self):
        with self.assertRaises(cachematrix.ShapeError):
            cachematrix.invert(np.empty((0, 0)))
        with self.assertRaises(cachematrix.ShapeError):
            cachematrix.invert(MatrixLike([]))

    def test_rejects_ragged(self):
        with self.assertRaises(cachematrix.ShapeError):
            cachematrix.invert([[1.0, 2.0], [3.0]])

    def test_rejects_none(self):
        with self.assertRaises(cachematrix.ShapeError):
            cachematrix.invert(None)

    def test_warns_on_non_finite(self):
        m = np.array([[1.0, np.nan], [0.0, 1.0]])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                cachematrix.invert(m)
            except cachematrix.SingularMatrixError:
                pass
        self.assertTrue(
            any(issubclass(w.category, cachematrix.CacheMatrixNumericWarning) for w in caught)
        )
        self.assertTrue(issubclass(cachematrix.CacheMatrixNumericWarning, cachematrix.CacheMatrixWarning))
        self.assertTrue(issubclass(cachematrix.CacheMatrixWarning, UserWarning))

    def test_warning_points_at_direct_caller(self):
        m = np.array([[1.0, np.inf], [0.0, 1.0]])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                cachematrix.invert(m)
            except cachematrix.SingularMatrixError:
                pass
        numeric = [w for w in caught if issubclass(w.category, cachematrix.CacheMatrixNumericWarning)]
        self.assertEqual(len(numeric), 1)
        self.assertEqual(os.path.normcase(numeric[0].filename), os.path.normcase(__file__))

    def test_warning_points_at_cache_solve_caller(self):
        cm = cachematrix.CacheableMatrix(np.array([[1.0, np.inf], [0.0, 1.0]]))
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                cachematrix.cache_solve(cm)
            except cachematrix.SingularMatrixError:
                pass
        numeric = [w for w in caught if issubclass(w.category, cachematrix.CacheMatrixNumericWarning)]
        self.assertEqual(len(numeric), 1)
        self.assertEqual(os.path.normcase(numeric[0].filename), os.path.normcase(__file__))


if __name__ == "__main__":
    unittest.main()
