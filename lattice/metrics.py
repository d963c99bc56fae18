from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class SearchStats:
    pops: int = 0
    expansions: int = 0
    dead_hits: int = 0
    pushes: int = 0
    peak_stack: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
