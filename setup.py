# File: setup.py

"""
Setup configuration for kernel-svm: trained kernel SVM models
"""

import os
from setuptools import setup, find_packages

# Read long description from README
def read_long_description():
    """Read the README file for long description."""
    here = os.path.abspath(os.path.dirname(__file__))
    readme_path = os.path.join(here, "README.md")

    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as fh:
            return fh.read()
    else:
        return "kernel-svm: trained kernel SVM models with text persistence and objective evaluation"

# Read requirements
def read_requirements():
    """Read requirements from requirements.txt."""
    here = os.path.abspath(os.path.dirname(__file__))
    requirements_path = os.path.join(here, "requirements.txt")

    requirements = []
    if os.path.exists(requirements_path):
        with open(requirements_path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if line and not line.startswith("#"):
                    requirements.append(line)
    else:
        # Fallback to minimal requirements
        requirements = [
            "numpy>=1.21.0",
            "scikit-learn>=1.0.0",
        ]

    return requirements

# Package metadata
PACKAGE_NAME = "kernel-svm"
VERSION = "1.0.0"
DESCRIPTION = "Trained kernel SVM models: support vectors, %SVM model files and objectives"
LICENSE = "MIT"

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

KEYWORDS = [
    "machine learning", "support vector machines", "svm", "kernel methods",
    "dual objective", "model serialization", "multiple kernel learning",
]

TEST_REQUIREMENTS = [
    "pytest>=6.0.0",
    "pytest-cov>=2.0.0",
]

# Development dependencies
DEV_REQUIREMENTS = TEST_REQUIREMENTS + [
    "black>=22.0.0",
    "flake8>=4.0.0",
    "isort>=5.10.0",
    "mypy>=0.900",
]

setup(
    name=PACKAGE_NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
    classifiers=CLASSIFIERS,
    keywords=" ".join(KEYWORDS),
    license=LICENSE,
    python_requires=">=3.8",

    # Dependencies
    install_requires=read_requirements(),

    # Optional dependencies
    extras_require={
        "dev": DEV_REQUIREMENTS,
        "test": TEST_REQUIREMENTS,
    },

    zip_safe=False,
)
