from __future__ import annotations

import random
import numpy as np


def set_global_seed(seed: int) -> np.random.Generator:
    """Seed the global generators and return a fresh Generator for instance sampling."""
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)
