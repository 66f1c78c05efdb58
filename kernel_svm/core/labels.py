# File: kernel_svm/core/labels.py

"""
Labels collaborator: a dense float64 vector of training labels.
"""

import logging
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class Labels:

    def __init__(self, values: Optional[Sequence[float]] = None):
        self._labels = np.zeros(0, dtype=np.float64)
        if values is not None:
            self.set_labels(values)

    def set_labels(self, values: Sequence[float]) -> None:
        labels = np.array(values, dtype=np.float64)
        if labels.ndim != 1:
            raise ValueError(f"labels must be 1D, got {labels.ndim}D")
        self._labels = labels
        logger.debug(f"Labels set: {len(labels)} entries")

    def get_labels(self) -> np.ndarray:
        return self._labels.copy()

    def get_label(self, i: int) -> float:
        if not 0 <= i < len(self._labels):
            raise IndexError(f"label index {i} out of range [0, {len(self._labels)})")
        return float(self._labels[i])

    def get_num_labels(self) -> int:
        return len(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"Labels(num_labels={len(self._labels)})"
