# File: kernel_svm/core/objective.py

"""
Dual and primal SVM objectives

For n support vectors with training indices idx(i):

    dual   = sum_i -alpha_i * y_idx(i)
           + sum_i sum_j 0.5 * alpha_i * alpha_j * K(idx(i), idx(j))

    primal = sum_i sum_j -0.5 * alpha_i * alpha_j * K(idx(i), idx(j))
           + sum_i -C1 * max(0, 1 - y_idx(i) * f(idx(i)))

Both loops run i outer, j inner, accumulating in that order so results are
reproducible bit for bit. Every pair is evaluated through the kernel; no
caching happens here.
"""

import logging
from typing import TYPE_CHECKING

from ..exceptions import PreconditionError

if TYPE_CHECKING:
    from .svm import SVM

logger = logging.getLogger(__name__)


def _check_collaborators(svm: 'SVM') -> None:
    if svm.get_labels() is None or svm.get_kernel() is None:
        raise PreconditionError("cannot compute objective, labels or kernel not set")


def compute_svm_dual_objective(svm: 'SVM') -> float:
    """Dual objective; also stored as the model's objective."""

    _check_collaborators(svm)

    kernel = svm.get_kernel()
    labels = svm.get_labels()
    n = svm.get_num_support_vectors()

    objective = 0.0
    for i in range(n):
        ii = svm.get_support_vector(i)
        alpha_i = svm.get_alpha(i)
        objective -= alpha_i * labels.get_label(ii)

        for j in range(n):
            jj = svm.get_support_vector(j)
            objective += 0.5 * alpha_i * svm.get_alpha(j) * kernel.kernel(ii, jj)

    svm.set_objective(objective)
    logger.debug(f"Dual objective over {n} support vectors: {objective:.6g}")
    return objective


def compute_svm_primal_objective(svm: 'SVM') -> float:
    """Primal objective. The stored objective is left untouched."""

    _check_collaborators(svm)

    kernel = svm.get_kernel()
    labels = svm.get_labels()
    n = svm.get_num_support_vectors()
    C1 = svm.get_C1()

    regularizer = 0.0
    loss = 0.0
    for i in range(n):
        ii = svm.get_support_vector(i)
        alpha_i = svm.get_alpha(i)

        for j in range(n):
            jj = svm.get_support_vector(j)
            regularizer -= 0.5 * alpha_i * svm.get_alpha(j) * kernel.kernel(ii, jj)

        loss -= C1 * max(0.0, 1.0 - labels.get_label(ii) * svm.classify_example(ii))

    logger.debug(f"Primal objective over {n} support vectors: "
                 f"regularizer={regularizer:.6g}, loss={loss:.6g}")
    return regularizer + loss
