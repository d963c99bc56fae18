from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml


def load_yaml(path: Union[str, Path]) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def deep_update(base: dict, patch: dict) -> dict:
    # Recursively merge dict patch into base (in-place).
    for k, v in (patch or {}).items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            deep_update(base[k], v)
        else:
            base[k] = v
    return base


def load_config(base: Union[str, Path], exp: Optional[Union[str, Path]] = None) -> dict:
    cfg = load_yaml(base)
    if exp:
        deep_update(cfg, load_yaml(exp))
    return cfg
