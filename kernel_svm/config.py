# File: kernel_svm/config.py

"""
Hyperparameter configuration for SVM models.
"""

import json
import logging
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

logger = logging.getLogger(__name__)


@dataclass
class SVMConfig:

    C1: float = 1.0
    C2: float = 1.0
    epsilon: float = 1e-5
    tube_epsilon: float = 1e-2
    nu: float = 0.5
    qpsize: int = 41
    use_bias: bool = True
    use_shrinking: bool = True
    use_batch_computation: bool = True
    use_linadd: bool = True

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'SVMConfig':
        """Build a config from a dict, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning(f"Ignoring unknown SVM config keys: {', '.join(unknown)}")

        return cls(**{k: v for k, v in values.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(filepath: str) -> SVMConfig:
    """Load an SVMConfig from a JSON file"""

    with open(filepath, 'r', encoding='utf-8') as f:
        values = json.load(f)

    if not isinstance(values, dict):
        raise ValueError(f"SVM config in {filepath} must be a JSON object")

    logger.debug(f"SVM config loaded from {filepath}")
    return SVMConfig.from_dict(values)
