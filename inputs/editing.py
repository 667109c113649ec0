"""
Immutable edits over the dashboard's collections.

Each helper returns a NEW tuple and leaves its input untouched, so the engine
always sees a consistent snapshot. Bad indices are a no-op: the dashboard
recomputes on every keystroke and must never crash mid-edit.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional, Sequence, Tuple, TypeVar

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import Scenario

from .defaults import FALLBACK_COLOR, NEW_SCENARIO_TEMPLATE, SCENARIO_COLORS

logger = logging.getLogger(__name__)

T = TypeVar("T")


def replace_at(items: Sequence[T], index: int, **changes) -> Tuple[T, ...]:
    """Copy of `items` with the record at `index` rebuilt via dataclasses.replace."""
    if not 0 <= index < len(items):
        logger.debug("replace_at: index %d out of range (%d items)", index, len(items))
        return tuple(items)
    return tuple(
        replace(item, **changes) if i == index else item
        for i, item in enumerate(items)
    )


def remove_at(items: Sequence[T], index: int) -> Tuple[T, ...]:
    return tuple(item for i, item in enumerate(items) if i != index)


def add_scenario(
    scenarios: Sequence[Scenario],
    *,
    config: Optional[ProjectionConfig] = None,
) -> Tuple[Scenario, ...]:
    """
    Append "Scenario {n+1}" built from the template, coloured from the palette.
    Each new scenario gets a fresh uid. Unchanged once the collection holds
    `config.max_scenarios` entries.
    """
    cfg = config or DEFAULT_CONFIG
    n = len(scenarios)
    if n >= cfg.max_scenarios:
        return tuple(scenarios)
    color = SCENARIO_COLORS[n] if n < len(SCENARIO_COLORS) else FALLBACK_COLOR
    new = Scenario(
        name=f"Scenario {n + 1}", color=color, uid=uuid.uuid4().hex[:12], **NEW_SCENARIO_TEMPLATE,
    )
    return tuple(scenarios) + (new,)
