# File: kernel_svm/core/kernels.py

"""
Kernel collaborators

A kernel maps two training-example indices to a float64 similarity and
carries the name written into model files. Feature-based kernels evaluate
each pair on demand through sklearn.metrics.pairwise; nothing is cached here.

Available kernels:
- CustomKernel: precomputed Gram matrix
- LinearKernel: k(x, y) = <x, y>
- GaussianKernel: k(x, y) = exp(-||x - y||^2 / width)
- PolyKernel: k(x, y) = (<x, y> + c)^degree, c = 1 if inhomogeneous else 0
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
from sklearn.metrics.pairwise import linear_kernel, polynomial_kernel, rbf_kernel
from sklearn.utils import check_array

logger = logging.getLogger(__name__)


class Kernel(ABC):

    @abstractmethod
    def kernel(self, i: int, j: int) -> float:
        """Evaluate the kernel between examples ``i`` and ``j``."""

    @abstractmethod
    def get_name(self) -> str:
        """Name used verbatim in the ``kernel='<name>';`` model line."""

    @abstractmethod
    def get_num_vec(self) -> int:
        """Number of examples the kernel is defined on."""

    def _check_pair(self, i: int, j: int) -> None:
        n = self.get_num_vec()
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"kernel index pair ({i}, {j}) out of range [0, {n})")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.get_name()!r}, num_vec={self.get_num_vec()})"


class CustomKernel(Kernel):
    """Kernel backed by a precomputed square Gram matrix."""

    def __init__(self, matrix: np.ndarray):
        matrix = check_array(matrix, dtype=np.float64)
        if matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Gram matrix must be square, got shape {matrix.shape}")
        self.matrix = matrix

    def kernel(self, i: int, j: int) -> float:
        self._check_pair(i, j)
        return float(self.matrix[i, j])

    def get_name(self) -> str:
        return 'Custom'

    def get_num_vec(self) -> int:
        return self.matrix.shape[0]


class _FeatureKernel(Kernel):
    """Shared storage for kernels defined on a feature matrix."""

    def __init__(self, features: np.ndarray):
        self.features = check_array(features, dtype=np.float64)

    def get_num_vec(self) -> int:
        return self.features.shape[0]

    def _rows(self, i: int, j: int):
        self._check_pair(i, j)
        return self.features[i:i + 1], self.features[j:j + 1]

    def kernel_matrix(self) -> np.ndarray:
        """Full Gram matrix, mainly for inspection and tests."""
        return self._pairwise(self.features, self.features)

    def kernel(self, i: int, j: int) -> float:
        x, y = self._rows(i, j)
        return float(self._pairwise(x, y)[0, 0])

    @abstractmethod
    def _pairwise(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        pass


class LinearKernel(_FeatureKernel):

    def _pairwise(self, X, Y):
        return linear_kernel(X, Y)

    def get_name(self) -> str:
        return 'Linear'


class GaussianKernel(_FeatureKernel):

    def __init__(self, features: np.ndarray, width: float = 1.0):
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        super().__init__(features)
        self.width = width

    def _pairwise(self, X, Y):
        return rbf_kernel(X, Y, gamma=1.0 / self.width)

    def get_name(self) -> str:
        return 'Gaussian'


class PolyKernel(_FeatureKernel):

    def __init__(self, features: np.ndarray, degree: int = 2, inhomogene: bool = True):
        if degree < 1:
            raise ValueError(f"degree must be >= 1, got {degree}")
        super().__init__(features)
        self.degree = degree
        self.inhomogene = inhomogene

    def _pairwise(self, X, Y):
        return polynomial_kernel(X, Y, degree=self.degree, gamma=1.0,
                                 coef0=1.0 if self.inhomogene else 0.0)

    def get_name(self) -> str:
        return 'Poly'
