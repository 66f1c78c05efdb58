# File: kernel_svm/core/svm.py

"""
Trained SVM model

This module holds the state of a trained kernel SVM:
- Support-vector indices into the training set and their dual coefficients
- Bias and solver hyperparameters (C1/C2, epsilon, tube epsilon, nu, qpsize)
- Optional linear term consumed by custom-loss QP formulations
- MKL callback registration
- Text persistence and dual/primal objective evaluation

Training is done elsewhere: a solver allocates the model with
``create_new_model`` and fills it through the per-index setters.
"""

import logging
from typing import Any, Dict, IO, Optional, Sequence, Tuple

import numpy as np

from ..config import SVMConfig
from ..exceptions import (
    AllocationError, IndexOutOfRange, PreconditionError, ShapeMismatchError
)
from .kernel_machine import KernelMachine
from .kernels import Kernel
from .labels import Labels
from .mkl_hook import MKLCallback, MKLCallbackHook
from .model_io import INT32_MAX, INT32_MIN, read_model, write_model
from .objective import compute_svm_dual_objective, compute_svm_primal_objective

logger = logging.getLogger(__name__)


class SVM(KernelMachine):

    def __init__(self, num_sv: int = 0, C: Optional[float] = None,
                 kernel: Optional[Kernel] = None, labels: Optional[Labels] = None,
                 config: Optional[SVMConfig] = None):

        super().__init__(kernel=kernel, labels=labels)

        self._apply_config(config or SVMConfig())
        if C is not None:
            self.set_C(C, C)

        self.objective = 0.0
        self.svm_loaded = False
        self.load_error_ = None
        self.loaded_kernel_name_ = None

        self.support_vector_index_ = np.zeros(0, dtype=np.int32)
        self.alphas_ = np.zeros(0, dtype=np.float64)

        self.linear_term_ = None

        self.mkl_hook = MKLCallbackHook()

        if num_sv != 0:
            self.create_new_model(num_sv)

    def _apply_config(self, config: SVMConfig) -> None:
        self.C1 = float(config.C1)
        self.C2 = float(config.C2)
        self.epsilon = float(config.epsilon)
        self.tube_epsilon = float(config.tube_epsilon)
        self.nu = float(config.nu)
        self.qpsize = int(config.qpsize)
        self.use_bias = bool(config.use_bias)
        self.use_shrinking = bool(config.use_shrinking)
        self.use_batch_computation = bool(config.use_batch_computation)
        self.use_linadd = bool(config.use_linadd)

    # Model state

    def create_new_model(self, num: int) -> None:
        """
        Allocate zeroed index and alpha arrays for ``num`` support vectors.

        Any previous model is discarded.
        """

        if isinstance(num, bool) or not isinstance(num, (int, np.integer)):
            raise ValueError(f"number of support vectors must be an int, got {type(num).__name__}")
        if num < 0:
            raise ValueError(f"number of support vectors must be >= 0, got {num}")

        try:
            # drop the old model before allocating the new one
            self.support_vector_index_ = np.zeros(0, dtype=np.int32)
            self.alphas_ = np.zeros(0, dtype=np.float64)

            self.support_vector_index_ = np.zeros(int(num), dtype=np.int32)
            self.alphas_ = np.zeros(int(num), dtype=np.float64)
        except MemoryError as e:
            self.support_vector_index_ = self.support_vector_index_[:0]
            self.alphas_ = self.alphas_[:0]
            raise AllocationError(f"cannot allocate model with {num} support vectors") from e

        logger.debug(f"New model allocated: {num} support vectors")

    def get_num_support_vectors(self) -> int:
        return len(self.support_vector_index_)

    def _check_index(self, i: int) -> None:
        n = len(self.support_vector_index_)
        if not 0 <= i < n:
            raise IndexOutOfRange(i, n)

    def set_support_vector(self, i: int, value: int) -> None:
        self._check_index(i)
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"support vector index {value} does not fit in int32")
        self.support_vector_index_[i] = value

    def get_support_vector(self, i: int) -> int:
        self._check_index(i)
        return int(self.support_vector_index_[i])

    def set_alpha(self, i: int, value: float) -> None:
        self._check_index(i)
        self.alphas_[i] = value

    def get_alpha(self, i: int) -> float:
        self._check_index(i)
        return float(self.alphas_[i])

    def get_support_vectors(self) -> np.ndarray:
        return self.support_vector_index_.copy()

    def get_alphas(self) -> np.ndarray:
        return self.alphas_.copy()

    def set_support_vectors(self, values: Sequence[int]) -> None:
        wide = np.asarray(values, dtype=np.int64)
        if wide.size and (wide.min() < INT32_MIN or wide.max() > INT32_MAX):
            raise ValueError("support vector indices do not fit in int32")
        values = wide.astype(np.int32)
        self._check_model_shape(values, "support vectors")
        self.support_vector_index_[:] = values

    def set_alphas(self, values: Sequence[float]) -> None:
        values = np.asarray(values, dtype=np.float64)
        self._check_model_shape(values, "alphas")
        self.alphas_[:] = values

    def _check_model_shape(self, values: np.ndarray, what: str) -> None:
        n = self.get_num_support_vectors()
        if values.ndim != 1 or len(values) != n:
            raise ShapeMismatchError(
                f"{what} must have length {n} (number of support vectors), got shape {values.shape}",
                expected=n, actual=values.size
            )

    # Hyperparameters

    def set_C(self, c1: float, c2: float) -> None:
        self.C1 = float(c1)
        self.C2 = float(c2)

    def get_C1(self) -> float:
        return self.C1

    def get_C2(self) -> float:
        return self.C2

    def set_epsilon(self, eps: float) -> None:
        self.epsilon = float(eps)

    def get_epsilon(self) -> float:
        return self.epsilon

    def set_tube_epsilon(self, eps: float) -> None:
        self.tube_epsilon = float(eps)

    def get_tube_epsilon(self) -> float:
        return self.tube_epsilon

    def set_nu(self, nu: float) -> None:
        self.nu = float(nu)

    def get_nu(self) -> float:
        return self.nu

    def set_qpsize(self, qpsize: int) -> None:
        self.qpsize = int(qpsize)

    def get_qpsize(self) -> int:
        return self.qpsize

    def set_shrinking_enabled(self, enable: bool) -> None:
        self.use_shrinking = bool(enable)

    def get_shrinking_enabled(self) -> bool:
        return self.use_shrinking

    def set_batch_computation_enabled(self, enable: bool) -> None:
        self.use_batch_computation = bool(enable)

    def get_batch_computation_enabled(self) -> bool:
        return self.use_batch_computation

    def set_linadd_enabled(self, enable: bool) -> None:
        self.use_linadd = bool(enable)

    def get_linadd_enabled(self) -> bool:
        return self.use_linadd

    def set_objective(self, objective: float) -> None:
        self.objective = float(objective)

    def get_objective(self) -> float:
        return self.objective

    @property
    def is_loaded(self) -> bool:
        return self.svm_loaded

    def get_config(self) -> SVMConfig:
        return SVMConfig(
            C1=self.C1, C2=self.C2,
            epsilon=self.epsilon, tube_epsilon=self.tube_epsilon,
            nu=self.nu, qpsize=self.qpsize,
            use_bias=self.use_bias, use_shrinking=self.use_shrinking,
            use_batch_computation=self.use_batch_computation,
            use_linadd=self.use_linadd
        )

    def get_parameters(self) -> Dict[str, Any]:
        """Registered model parameters by name"""

        return {
            'C1': self.C1,
            'C2': self.C2,
            'svm_loaded': self.svm_loaded,
            'epsilon': self.epsilon,
            'tube_epsilon': self.tube_epsilon,
            'nu': self.nu,
            'objective': self.objective,
            'qpsize': self.qpsize,
            'use_shrinking': self.use_shrinking,
            'use_bias': self.use_bias,
            'use_batch_computation': self.use_batch_computation,
            'use_linadd': self.use_linadd,
            'linear_term': self.get_linear_term_array(),
            'mkl': self.get_mkl(),
        }

    # Linear term

    def set_linear_term(self, values: Optional[Sequence[float]], length: Optional[int] = None) -> None:
        """
        Replace the linear term by a copy of ``values``.

        ``values=None`` or ``length=0`` clears it and is always allowed.
        Otherwise labels must be attached and the length must equal the
        number of labels.
        """

        if values is None or length == 0:
            self.linear_term_ = None
            return

        values = np.array(values, dtype=np.float64)
        if values.ndim != 1:
            raise ShapeMismatchError(f"linear term must be 1D, got shape {values.shape}")
        if length is None:
            length = len(values)
        if length == 0:
            self.linear_term_ = None
            return

        if self.labels is None:
            raise PreconditionError("labels not set, assign labels before the linear term")

        num_labels = self.labels.get_num_labels()
        if length != num_labels:
            raise ShapeMismatchError(
                f"number of labels ({num_labels}) does not match number of entries ({length}) in linear term",
                expected=num_labels, actual=length
            )
        if len(values) != length:
            raise ShapeMismatchError(
                f"linear term has {len(values)} values but length {length} was given",
                expected=length, actual=len(values)
            )

        self.linear_term_ = values

    def get_linear_term_array(self) -> Optional[np.ndarray]:
        """Copy of the linear term, None when unset."""
        if self.linear_term_ is None:
            return None
        return self.linear_term_.copy()

    def get_linear_term_ptr(self, want_length: bool = True) -> Optional[Tuple[int, Optional[np.ndarray]]]:
        """
        ``(length, view)`` of the internal linear term.

        The view is live storage meant for the QP solver; writes through it
        change the model and are not synchronised with anything else.
        Returns None when ``want_length`` is False.
        """

        if not want_length:
            return None
        if self.linear_term_ is None:
            return 0, None
        return len(self.linear_term_), self.linear_term_

    # MKL

    def set_callback_function(self, mkl: Any, callback: Optional[MKLCallback]) -> None:
        self.mkl_hook.set_callback_function(mkl, callback)

    def get_callback_function(self) -> Optional[MKLCallback]:
        return self.mkl_hook.callback

    def get_mkl(self) -> Any:
        return self.mkl_hook.mkl

    def clear_callback_function(self) -> None:
        self.mkl_hook.clear()

    def __del__(self):
        hook = getattr(self, 'mkl_hook', None)
        if hook is not None and hook.mkl is not None:
            hook.clear()

    # Objectives

    def compute_svm_dual_objective(self) -> float:
        return compute_svm_dual_objective(self)

    def compute_svm_primal_objective(self) -> float:
        return compute_svm_primal_objective(self)

    # Persistence

    def load(self, stream: IO, diagnostics: Optional[logging.Logger] = None) -> bool:
        """Restore the model from a text stream; False if it is malformed."""
        return read_model(self, stream, diagnostics)

    def save(self, stream: IO) -> bool:
        return write_model(self, stream)

    def save_model(self, filepath: str) -> None:
        """Write the model file to ``filepath``"""

        with open(filepath, 'w', encoding='utf-8') as f:
            self.save(f)

        logger.info(f"Model saved to {filepath}")

    @classmethod
    def load_model(cls, filepath: str, kernel: Optional[Kernel] = None,
                   labels: Optional[Labels] = None,
                   diagnostics: Optional[logging.Logger] = None) -> 'SVM':
        """
        Build a model from a model file.

        Unlike ``load`` this raises the FormatError when the file is
        malformed. The kernel is not restored from its name; pass it in.
        """

        model = cls(kernel=kernel, labels=labels)

        with open(filepath, 'r', encoding='utf-8') as f:
            if not model.load(f, diagnostics):
                raise model.load_error_

        logger.info(f"Model loaded from {filepath}")
        return model

    def __repr__(self) -> str:
        state = "loaded" if self.svm_loaded else "unloaded"
        return (f"SVM(C1={self.C1}, C2={self.C2}, "
                f"n_support_vectors={self.get_num_support_vectors()}, "
                f"bias={self.bias}, {state})")
