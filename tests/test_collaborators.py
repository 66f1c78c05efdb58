# File: tests/test_collaborators.py

"""
Unit tests for kernels, labels, the kernel machine, configuration and
logging helpers.
"""

import unittest
import json
import logging
import os
import shutil
import sys
import tempfile

import numpy as np

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kernel_svm.config import SVMConfig, load_config
from kernel_svm.core.kernels import CustomKernel, GaussianKernel, LinearKernel, PolyKernel
from kernel_svm.core.labels import Labels
from kernel_svm.core.svm import SVM
from kernel_svm.exceptions import PreconditionError
from kernel_svm.utils.logging_utils import get_logger, setup_logger


class TestKernels(unittest.TestCase):
    """Test kernel collaborators."""

    def setUp(self):
        self.X = np.array([[1.0, 2.0], [3.0, 4.0], [0.0, 0.0]])

    def test_linear(self):
        kernel = LinearKernel(self.X)
        self.assertAlmostEqual(kernel.kernel(0, 1), 11.0)
        self.assertAlmostEqual(kernel.kernel(1, 1), 25.0)
        self.assertEqual(kernel.get_name(), 'Linear')
        self.assertEqual(kernel.get_num_vec(), 3)

    def test_gaussian(self):
        kernel = GaussianKernel(self.X, width=2.0)
        self.assertAlmostEqual(kernel.kernel(0, 1), np.exp(-8.0 / 2.0))
        self.assertAlmostEqual(kernel.kernel(2, 2), 1.0)
        self.assertEqual(kernel.get_name(), 'Gaussian')

        with self.assertRaises(ValueError):
            GaussianKernel(self.X, width=0.0)

    def test_poly(self):
        self.assertAlmostEqual(PolyKernel(self.X, degree=2).kernel(0, 1), 144.0)
        self.assertAlmostEqual(PolyKernel(self.X, degree=2, inhomogene=False).kernel(0, 1), 121.0)
        self.assertEqual(PolyKernel(self.X).get_name(), 'Poly')

    def test_symmetric(self):
        for kernel in [LinearKernel(self.X), GaussianKernel(self.X), PolyKernel(self.X, degree=3)]:
            self.assertAlmostEqual(kernel.kernel(0, 2), kernel.kernel(2, 0))

    def test_kernel_matrix_matches_pairs(self):
        kernel = GaussianKernel(self.X, width=3.0)
        K = kernel.kernel_matrix()
        self.assertEqual(K.shape, (3, 3))
        self.assertAlmostEqual(K[0, 1], kernel.kernel(0, 1))

    def test_custom(self):
        gram = np.array([[2.0, 0.5], [0.5, 1.0]])
        kernel = CustomKernel(gram)
        self.assertEqual(kernel.kernel(0, 1), 0.5)
        self.assertEqual(kernel.get_name(), 'Custom')
        self.assertEqual(kernel.get_num_vec(), 2)

        with self.assertRaises(ValueError):
            CustomKernel(np.ones((2, 3)))

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            LinearKernel(self.X).kernel(0, 3)
        with self.assertRaises(IndexError):
            CustomKernel(np.eye(2)).kernel(-1, 0)


class TestLabels(unittest.TestCase):
    """Test the labels collaborator."""

    def test_access(self):
        labels = Labels([1, -1, 1])
        self.assertEqual(labels.get_num_labels(), 3)
        self.assertEqual(len(labels), 3)
        self.assertEqual(labels.get_label(1), -1.0)
        self.assertIsInstance(labels.get_label(0), float)

    def test_copy_semantics(self):
        values = np.array([1.0, -1.0])
        labels = Labels(values)
        values[0] = 5.0
        self.assertEqual(labels.get_label(0), 1.0)

        out = labels.get_labels()
        out[1] = 5.0
        self.assertEqual(labels.get_label(1), -1.0)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Labels([[1.0, 2.0]])
        with self.assertRaises(IndexError):
            Labels([1.0]).get_label(1)

    def test_empty(self):
        self.assertEqual(Labels().get_num_labels(), 0)


class TestKernelMachine(unittest.TestCase):
    """Test classification through the support-vector expansion."""

    def setUp(self):
        X = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        self.svm = SVM(num_sv=2, kernel=LinearKernel(X), labels=Labels([1.0, -1.0, 1.0]))
        self.svm.set_support_vectors([0, 1])
        self.svm.set_alphas([1.0, -1.0])
        self.svm.set_bias(0.5)

    def test_classify_example(self):
        # <x0, x2> - <x1, x2> + 0.5
        self.assertAlmostEqual(self.svm.classify_example(2), 0.5)
        self.assertAlmostEqual(self.svm.classify_example(0), 1.5)
        self.assertAlmostEqual(self.svm.classify_example(1), -0.5)

    def test_classify_all(self):
        np.testing.assert_allclose(self.svm.classify(), [1.5, -0.5, 0.5])
        np.testing.assert_allclose(self.svm.classify([1]), [-0.5])

    def test_bias_disabled(self):
        self.svm.set_bias_enabled(False)
        self.assertAlmostEqual(self.svm.classify_example(0), 1.0)

    def test_requires_kernel(self):
        svm = SVM(num_sv=1)
        with self.assertRaises(PreconditionError):
            svm.classify_example(0)
        with self.assertRaises(PreconditionError):
            svm.classify()

    def test_get_label(self):
        self.assertEqual(self.svm.get_label(1), -1.0)
        with self.assertRaises(PreconditionError):
            SVM().get_label(0)


class TestConfig(unittest.TestCase):
    """Test SVMConfig loading."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_defaults(self):
        config = SVMConfig()
        self.assertEqual(config.C1, 1.0)
        self.assertEqual(config.epsilon, 1e-5)
        self.assertEqual(config.tube_epsilon, 1e-2)
        self.assertEqual(config.nu, 0.5)
        self.assertEqual(config.qpsize, 41)
        self.assertTrue(config.use_linadd)

    def test_from_dict_ignores_unknown(self):
        with self.assertLogs('kernel_svm.config', level='WARNING') as captured:
            config = SVMConfig.from_dict({'C1': 2.0, 'kernel_cache_size': 100})

        self.assertEqual(config.C1, 2.0)
        self.assertIn('kernel_cache_size', captured.output[0])

    def test_to_dict(self):
        self.assertEqual(SVMConfig.from_dict(SVMConfig(nu=0.1).to_dict()), SVMConfig(nu=0.1))

    def test_load_config(self):
        path = os.path.join(self.temp_dir, 'svm.json')
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({'C1': 0.5, 'C2': 2.0, 'use_shrinking': False}, f)

        config = load_config(path)
        self.assertEqual((config.C1, config.C2), (0.5, 2.0))
        self.assertFalse(config.use_shrinking)

    def test_load_config_requires_object(self):
        path = os.path.join(self.temp_dir, 'svm.json')
        with open(path, 'w', encoding='utf-8') as f:
            json.dump([1, 2], f)

        with self.assertRaises(ValueError):
            load_config(path)


class TestLoggingUtils(unittest.TestCase):
    """Test logger helpers."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        logger = logging.getLogger('KernelSVMTest')
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_setup_logger_idempotent(self):
        logger = setup_logger('KernelSVMTest', self.temp_dir)
        count = len(logger.handlers)
        self.assertIs(setup_logger('KernelSVMTest', self.temp_dir), logger)
        self.assertEqual(len(logger.handlers), count)

    def test_log_file_written(self):
        logger = setup_logger('KernelSVMTest', self.temp_dir)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        with open(os.path.join(self.temp_dir, 'KernelSVMTest.log'), encoding='utf-8') as f:
            self.assertIn("hello", f.read())

    def test_get_logger(self):
        self.assertIs(get_logger('kernel_svm.core.svm'), logging.getLogger('kernel_svm.core.svm'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
