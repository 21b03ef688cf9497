import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).parent.parent / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from daypacer.models import PacingConfig, Task  # noqa: E402


@pytest.fixture
def make_task():
    counter = iter(range(1, 10_000))

    def _make(title="Task", duration=30, priority=3, energy="medium", note=None, **kwargs):
        created_at = kwargs.pop("created_at", next(counter))
        return Task(
            id=kwargs.pop("id", title.lower().replace(" ", "-")),
            title=title,
            duration_minutes=duration,
            priority=priority,
            energy=energy,
            note=note,
            created_at=created_at,
            **kwargs,
        )

    return _make


@pytest.fixture
def bare_config():
    """Pacing with every ritual and break switched off."""
    return PacingConfig(
        start_minute=8 * 60,
        end_minute=None,
        break_frequency=0,
        break_length=0,
        warmup_minutes=0,
        wrap_minutes=0,
        auto_lunch=False,
    )
