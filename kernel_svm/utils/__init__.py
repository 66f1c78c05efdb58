# File: kernel_svm/utils/__init__.py

from .logging_utils import get_logger, setup_logger

__all__ = ['get_logger', 'setup_logger']
