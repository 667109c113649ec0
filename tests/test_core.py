import logging

import numpy as np
import pytest

from core.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, ProjectionConfig, get_log_level
from core.logging_setup import configure_logging
from core.utils import round_half_up, safe_div


@pytest.mark.parametrize("value, decimals, expected", [
    (2.5, 0, 3.0),
    (-2.5, 0, -2.0),
    (0.5, 0, 1.0),
    (133.3333, 2, 133.33),
    (1.666666, 2, 1.67),
    (471.9265, 0, 472.0),
])
def test_round_half_up(value, decimals, expected):
    assert round_half_up(value, decimals) == expected


def test_round_half_up_vectorised():
    out = round_half_up(np.array([0.5, 1.25, 2.0]), 1)
    assert out.tolist() == [0.5, 1.3, 2.0]


def test_safe_div():
    assert safe_div(5, 0) == 0.0
    assert safe_div(6, 3) == 2


def test_projection_config_defaults():
    cfg = ProjectionConfig()
    assert cfg.horizon_months == 12
    assert cfg.max_scenarios == 5
    assert [r.value for r in cfg.cohort_roles] == ["small", "medium", "large"]


def test_log_level_default(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert get_log_level() == DEFAULT_LOG_LEVEL


def test_log_level_from_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    (tmp_path / ".env").write_text(f"{LOG_LEVEL_ENV}=debug\n")
    assert get_log_level() == "DEBUG"


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("INFO")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
