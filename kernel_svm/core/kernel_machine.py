# File: kernel_svm/core/kernel_machine.py

"""
Kernel machine base class

Holds the collaborators every kernel-based classifier needs: the kernel,
the training labels and the bias. Subclasses provide the support-vector
expansion through ``get_num_support_vectors``, ``get_support_vector`` and
``get_alpha``; ``classify_example`` evaluates

    f(x_idx) = sum_k alpha_k * k(sv_k, idx) + b
"""

import logging
from typing import Iterable, Optional

import numpy as np

from ..exceptions import PreconditionError
from .kernels import Kernel
from .labels import Labels

logger = logging.getLogger(__name__)


class KernelMachine:

    def __init__(self, kernel: Optional[Kernel] = None, labels: Optional[Labels] = None):
        self.kernel = kernel
        self.labels = labels
        self.bias = 0.0
        self.use_bias = True

    # Collaborators

    def set_kernel(self, kernel: Optional[Kernel]) -> None:
        self.kernel = kernel

    def get_kernel(self) -> Optional[Kernel]:
        return self.kernel

    def set_labels(self, labels: Optional[Labels]) -> None:
        self.labels = labels

    def get_labels(self) -> Optional[Labels]:
        return self.labels

    def get_label(self, i: int) -> float:
        if self.labels is None:
            raise PreconditionError("labels not set")
        return self.labels.get_label(i)

    def set_bias(self, bias: float) -> None:
        self.bias = float(bias)

    def get_bias(self) -> float:
        return self.bias

    def set_bias_enabled(self, enable: bool) -> None:
        self.use_bias = bool(enable)

    def get_bias_enabled(self) -> bool:
        return self.use_bias

    # Support-vector expansion, supplied by subclasses

    def get_num_support_vectors(self) -> int:
        raise NotImplementedError

    def get_support_vector(self, i: int) -> int:
        raise NotImplementedError

    def get_alpha(self, i: int) -> float:
        raise NotImplementedError

    # Classification

    def classify_example(self, idx: int) -> float:
        """Decision value for training example ``idx``."""

        if self.kernel is None:
            raise PreconditionError("kernel not set")

        result = 0.0
        for k in range(self.get_num_support_vectors()):
            result += self.get_alpha(k) * self.kernel.kernel(self.get_support_vector(k), idx)

        if self.use_bias:
            result += self.bias
        return result

    def classify(self, indices: Optional[Iterable[int]] = None) -> np.ndarray:
        """
        Decision values for a set of examples.

        Defaults to every example the labels cover, or every example the
        kernel is defined on when no labels are attached.
        """

        if indices is None:
            if self.labels is not None:
                n = self.labels.get_num_labels()
            elif self.kernel is not None:
                n = self.kernel.get_num_vec()
            else:
                raise PreconditionError("kernel not set")
            indices = range(n)

        outputs = np.array([self.classify_example(int(i)) for i in indices], dtype=np.float64)
        logger.debug(f"Classified {len(outputs)} examples")
        return outputs
