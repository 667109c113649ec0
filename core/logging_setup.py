from __future__ import annotations

import logging
from typing import Optional

from .config import get_log_level

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Apply a root handler once; later calls only adjust the level."""
    level_name = (level or get_log_level()).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_FORMAT)
    root.setLevel(getattr(logging, level_name, logging.WARNING))
