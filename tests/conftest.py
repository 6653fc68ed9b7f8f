import sys
from pathlib import Path

import pytest


# Ensure local src/ package imports work without editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from adaptive_srs.core.config import reset_config  # noqa: E402
from adaptive_srs.scheduling import DAY_MS, ReviewItem, SRSEngine  # noqa: E402


# Fixed clock: 2023-11-14 22:13:20 UTC
NOW = 1_700_000_000_000


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow-running (use pytest -m 'not slow' to skip)"
    )


@pytest.fixture(autouse=True)
def clean_config():
    """Reset global config singleton between tests."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# Engine / Item Fixtures
# =============================================================================

@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def day_ms() -> int:
    return DAY_MS


@pytest.fixture
def engine() -> SRSEngine:
    return SRSEngine()


@pytest.fixture
def fresh_item() -> ReviewItem:
    """A letter that has never been reviewed and is due now."""
    return ReviewItem(
        item_id="test-letter",
        item_type="letter",
        ease_factor=2.5,
        interval=0,
        due_date=NOW,
        review_count=0,
        lapse_count=0,
        last_review_date=0,
        recent_grades=(),
    )
