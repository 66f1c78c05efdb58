# File: kernel_svm/__init__.py

"""
kernel-svm: Trained Kernel SVM Models
=====================================

In-memory representation of a trained kernel Support Vector Machine:
support-vector indices, dual coefficients, bias and hyperparameters, with
a plain-text model format and dual/primal objective evaluation.

Main Components:
---------------
- SVM model state, linear term and MKL callback registration
- %SVM text model codec
- Dual and primal objective evaluation
- Kernel and label collaborators

Usage Example:
--------------
>>> import numpy as np
>>> from kernel_svm import SVM, LinearKernel, Labels

>>> X = np.array([[1.0, 0.0], [0.0, 1.0]])
>>> svm = SVM(num_sv=2, C=1.0, kernel=LinearKernel(X), labels=Labels([1.0, -1.0]))
>>> svm.set_support_vector(0, 0); svm.set_alpha(0, 0.5)
>>> svm.set_support_vector(1, 1); svm.set_alpha(1, -0.5)
>>> svm.compute_svm_dual_objective()

>>> with open('model.svm', 'w') as f:
...     svm.save(f)
"""

import logging

__version__ = "1.0.0"
__license__ = "MIT"

from .config import SVMConfig, load_config
from .exceptions import (
    AllocationError, FormatError, IndexOutOfRange, PreconditionError,
    ShapeMismatchError, SVMError
)
from .core.svm import SVM
from .core.kernel_machine import KernelMachine
from .core.kernels import CustomKernel, GaussianKernel, Kernel, LinearKernel, PolyKernel
from .core.labels import Labels
from .core.mkl_hook import MKLCallbackHook, RefCounted

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Model
    'SVM',
    'KernelMachine',

    # Collaborators
    'Kernel',
    'CustomKernel',
    'LinearKernel',
    'GaussianKernel',
    'PolyKernel',
    'Labels',
    'MKLCallbackHook',
    'RefCounted',

    # Configuration
    'SVMConfig',
    'load_config',

    # Errors
    'SVMError',
    'AllocationError',
    'IndexOutOfRange',
    'PreconditionError',
    'ShapeMismatchError',
    'FormatError',
]
