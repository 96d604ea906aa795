import sys
from datetime import date
from pathlib import Path

# Add src to path so imports work without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from todotxt.clock import FixedClock


@pytest.fixture
def clock():
    """A clock frozen on 2013-12-08."""
    return FixedClock(date(2013, 12, 8))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TODOTXT_TODAY", raising=False)
    monkeypatch.delenv("TODOTXT_LOG_LEVEL", raising=False)
