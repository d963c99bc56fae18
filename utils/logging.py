from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


_default_logger: Optional["JsonlLogger"] = None


class JsonlLogger:
    """Append-only JSON-lines event log; the newest instance becomes the default."""

    def __init__(self, path: Path):
        self.path = Path(path)
        ensure_dir(self.path.parent)
        self._file = self.path.open("a", encoding="utf-8")

        global _default_logger
        _default_logger = self

    def __enter__(self) -> "JsonlLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def log(self, obj: Dict[str, Any]) -> None:
        record = {"ts": round(time.time(), 3), **obj}
        self._file.write(json.dumps(record, ensure_ascii=False) + "\n")

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        global _default_logger
        if not self._file.closed:
            self._file.close()
        if _default_logger is self:
            _default_logger = None


def log_event(event_type: str, payload: Dict[str, Any]) -> None:
    if _default_logger is None:
        raise RuntimeError("No default logger configured; instantiate JsonlLogger first")

    _default_logger.log({"type": event_type, **payload})


def flush() -> None:
    if _default_logger is not None:
        _default_logger.flush()
