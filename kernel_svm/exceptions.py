# File: kernel_svm/exceptions.py

"""
Error taxonomy for kernel-svm.

Every error derives from SVMError and from the closest builtin, so callers
can catch either ``SVMError`` or e.g. ``IndexError``/``ValueError``.
"""

from typing import Optional


class SVMError(Exception):
    """Base class for all kernel-svm errors."""


class AllocationError(SVMError, MemoryError):
    """Model arrays could not be allocated."""


class IndexOutOfRange(SVMError, IndexError):
    """Positional access outside ``[0, num_support_vectors)``."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range [0, {size})")


class PreconditionError(SVMError, RuntimeError):
    """A required collaborator (labels, kernel) is not attached."""


class ShapeMismatchError(SVMError, ValueError):
    """Supplied vector length does not match the expected length."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class FormatError(SVMError, ValueError):
    """Malformed persisted model, carries the 1-indexed line number."""

    def __init__(self, line_number: int, detail: str = ""):
        self.line_number = line_number
        self.detail = detail
        message = f"error in svm file, line nr:{line_number}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
