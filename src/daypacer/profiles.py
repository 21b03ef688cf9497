from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownProfileError
from .models import MINUTES_PER_DAY, EnergyLevel

DEFAULT_PROFILE_KEY = "balanced"


class FocusProfile(BaseModel):
    """Named pacing preset."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(min_length=1)
    label: str
    description: str
    start_minute: int = Field(ge=0, le=MINUTES_PER_DAY)
    break_frequency: int = Field(ge=0)
    break_length: int = Field(ge=0)
    warmup_minutes: int = Field(ge=0)
    wrap_minutes: int = Field(ge=0)


class TaskTemplate(BaseModel):
    """Task fields without identity, used for one-tap captures."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    duration_minutes: int
    priority: int
    energy: EnergyLevel
    note: str | None = None


FOCUS_PROFILES: tuple[FocusProfile, ...] = (
    FocusProfile(
        key="sunrise",
        label="Sunrise Starter",
        description="Lean into an early, intentional flow.",
        start_minute=6 * 60 + 30,
        break_frequency=80,
        break_length=12,
        warmup_minutes=12,
        wrap_minutes=10,
    ),
    FocusProfile(
        key="balanced",
        label="Balanced Day",
        description="Classic 8am launch with even pacing.",
        start_minute=8 * 60,
        break_frequency=90,
        break_length=10,
        warmup_minutes=10,
        wrap_minutes=12,
    ),
    FocusProfile(
        key="late",
        label="Night Owl",
        description="Protect your creative afternoons.",
        start_minute=10 * 60,
        break_frequency=75,
        break_length=15,
        warmup_minutes=8,
        wrap_minutes=15,
    ),
)

QUICK_CAPTURES: tuple[TaskTemplate, ...] = (
    TaskTemplate(
        title="Deep Work Sprint",
        duration_minutes=90,
        priority=5,
        energy="high",
        note="Turn off notifications and dive in.",
    ),
    TaskTemplate(
        title="Inbox Zero Sweep",
        duration_minutes=25,
        priority=2,
        energy="low",
        note="Batch-process communications.",
    ),
    TaskTemplate(
        title="Strategy Diffusion",
        duration_minutes=45,
        priority=4,
        energy="medium",
        note="Think, outline, and capture next actions.",
    ),
)


def find_profile(key: str) -> FocusProfile | None:
    for profile in FOCUS_PROFILES:
        if profile.key == key:
            return profile
    return None


def get_profile(key: str) -> FocusProfile:
    profile = find_profile(key)
    if profile is None:
        raise UnknownProfileError(key)
    return profile
