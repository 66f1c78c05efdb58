# File: kernel_svm/core/mkl_hook.py

"""
MKL callback registration.

An external multiple-kernel-learning optimizer registers itself together with
a callback ``(mkl, weighted_sums, current_sum_alpha) -> bool``. The solver loop
calls it between iterations; the hook only owns the registration and the
shared reference to the MKL object.
"""

import logging
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)

MKLCallback = Callable[[Any, Sequence[float], float], bool]


class RefCounted:
    """
    Explicit shared ownership for objects handed between holders.

    ``release()`` runs once, when the last holder calls ``unref()``.
    """

    def __init__(self):
        self._ref_count = 0

    def ref(self) -> int:
        self._ref_count += 1
        return self._ref_count

    def unref(self) -> int:
        if self._ref_count <= 0:
            raise RuntimeError(f"unref on {self.__class__.__name__} with no references")
        self._ref_count -= 1
        remaining = self._ref_count

        if remaining == 0:
            logger.debug(f"Last reference to {self.__class__.__name__} dropped")
            self.release()
        return remaining

    def ref_count(self) -> int:
        return self._ref_count

    def release(self) -> None:
        """Hook for subclasses, called when the count drops to zero."""


def _ref(obj: Any) -> None:
    if obj is not None and callable(getattr(obj, 'ref', None)):
        obj.ref()


def _unref(obj: Any) -> None:
    if obj is not None and callable(getattr(obj, 'unref', None)):
        obj.unref()


class MKLCallbackHook:

    def __init__(self):
        self.mkl = None
        self.callback: Optional[MKLCallback] = None

    def set_callback_function(self, mkl: Any, callback: Optional[MKLCallback]) -> None:
        """Replace the registered MKL object and callback."""

        # ref before unref so re-registering the same object never hits zero
        _ref(mkl)
        _unref(self.mkl)

        self.mkl = mkl
        self.callback = callback

        logger.debug(f"MKL callback registered: mkl={type(mkl).__name__}, "
                     f"callback={'set' if callback is not None else 'none'}")

    def clear(self) -> None:
        """Drop the held reference and callback."""
        _unref(self.mkl)
        self.mkl = None
        self.callback = None

    def is_registered(self) -> bool:
        return self.callback is not None
