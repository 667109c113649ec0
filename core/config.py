"""
Projection configuration and environment-driven settings.
Engine constants live on ProjectionConfig; the log level comes from the
environment (or a local .env file) so the dashboard can be made chatty
without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .schema import COHORT_ROLES, TierRole

LOG_LEVEL_ENV = "PROJECTIONS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ProjectionConfig:
    horizon_months: int = 12

    # dashboard keeps at most this many scenarios side by side
    max_scenarios: int = 5

    # cohorts in the order positional tier mapping fills them
    cohort_roles: Tuple[TierRole, ...] = COHORT_ROLES

    # tier-mix total further than this from 100 triggers a UI warning
    mix_tolerance_pct: float = 1.0


DEFAULT_CONFIG = ProjectionConfig()


def _load_dotenv(dotenv_path: Path | str = ".env") -> None:
    path = Path(dotenv_path)
    if not path.is_file():
        return
    for line in path.read_text().splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, _, value = stripped.partition("=")
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and value and key not in os.environ:
            os.environ[key] = value


def get_log_level() -> str:
    """
    Return the configured log level name.
    Priority: environment variable → .env file → default
    """
    _load_dotenv()
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
