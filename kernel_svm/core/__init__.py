# File: kernel_svm/core/__init__.py

from .kernel_machine import KernelMachine
from .kernels import CustomKernel, GaussianKernel, Kernel, LinearKernel, PolyKernel
from .labels import Labels
from .mkl_hook import MKLCallbackHook, RefCounted
from .model_io import ModelScanner, read_model, write_model
from .objective import compute_svm_dual_objective, compute_svm_primal_objective
from .svm import SVM

__all__ = [
    'SVM',
    'KernelMachine',
    'Kernel',
    'CustomKernel',
    'LinearKernel',
    'GaussianKernel',
    'PolyKernel',
    'Labels',
    'MKLCallbackHook',
    'RefCounted',
    'ModelScanner',
    'read_model',
    'write_model',
    'compute_svm_dual_objective',
    'compute_svm_primal_objective',
]
