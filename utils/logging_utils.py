from __future__ import annotations

import logging
from typing import Union


_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


def _resolve_log_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(_resolve_log_level(level))
    if not getattr(root, "_configured_by_university_agent", False):
        if not root.handlers:
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))
            root.addHandler(ch)
        root._configured_by_university_agent = True  # type: ignore[attr-defined]
    return root
