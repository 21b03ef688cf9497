from __future__ import annotations

import math
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MINUTES_PER_DAY = 24 * 60

EnergyLevel = Literal["low", "medium", "high"]
BlockKind = Literal["warmup", "task", "break", "lunch", "wrap", "buffer"]

ENERGY_RANK: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


def energy_rank(level: str) -> int:
    return ENERGY_RANK.get(level, 1)


def new_id() -> str:
    return uuid4().hex


def clamp_number(value: Any, low: int, high: int | None = None) -> int:
    """Coerce ``value`` to an int in ``[low, high]``.

    Non-numeric values and NaN collapse to ``low``; overflowing and infinite
    values saturate to ``high`` (or ``low`` when unbounded) by sign.
    """
    try:
        number = float(value)
    except OverflowError:
        number = math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return low
    if math.isnan(number):
        return low
    if math.isinf(number):
        return high if number > 0 and high is not None else low
    bounded = max(low, round(number))
    if high is not None:
        bounded = min(bounded, high)
    return int(bounded)


class Task(BaseModel):
    """Unit of work entered by the user."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=new_id, min_length=1)
    title: str
    duration_minutes: int = 0
    priority: int = 3
    energy: EnergyLevel = "medium"
    note: str | None = None
    created_at: int = 0

    @field_validator("duration_minutes", "created_at", mode="before")
    @classmethod
    def clamp_non_negative(cls, value: Any) -> int:
        return clamp_number(value, 0)

    @field_validator("priority", mode="before")
    @classmethod
    def clamp_priority(cls, value: Any) -> int:
        return clamp_number(value, 1, 5)


class PacingConfig(BaseModel):
    """Caller-supplied pacing preferences for a single day."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_minute: int = 8 * 60
    end_minute: int | None = None
    break_frequency: int = 90
    break_length: int = 10
    warmup_minutes: int = 10
    wrap_minutes: int = 10
    auto_lunch: bool = False

    @field_validator("start_minute", mode="before")
    @classmethod
    def clamp_start(cls, value: Any) -> int:
        return clamp_number(value, 0, MINUTES_PER_DAY)

    @field_validator("end_minute", mode="before")
    @classmethod
    def clamp_end(cls, value: Any) -> int | None:
        if value is None:
            return None
        return clamp_number(value, 0, MINUTES_PER_DAY)

    @field_validator(
        "break_frequency", "break_length", "warmup_minutes", "wrap_minutes",
        mode="before",
    )
    @classmethod
    def clamp_length(cls, value: Any) -> int:
        return clamp_number(value, 0)

    @property
    def day_end(self) -> int:
        """Hard stop for the day: the configured end, or midnight."""
        if self.end_minute is None:
            return MINUTES_PER_DAY
        return self.end_minute


class ScheduleBlock(BaseModel):
    """Positioned interval in minutes from 00:00 of the planned day."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    kind: BlockKind
    label: str
    start_minute: int = Field(ge=0, le=MINUTES_PER_DAY)
    end_minute: int = Field(ge=0, le=MINUTES_PER_DAY)
    supporting_text: str | None = None
    task: Task | None = None
    muted: bool = False

    @model_validator(mode="after")
    def validate_range(self) -> ScheduleBlock:
        if self.end_minute < self.start_minute:
            msg = "end_minute must not be before start_minute"
            raise ValueError(msg)
        return self

    @property
    def duration(self) -> int:
        return self.end_minute - self.start_minute


class ScheduleResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    blocks: list[ScheduleBlock] = Field(default_factory=list)
    finish_minute: int

    def task_blocks(self) -> list[ScheduleBlock]:
        return [block for block in self.blocks if block.kind == "task"]

    @property
    def focus_minutes(self) -> int:
        return sum(block.duration for block in self.task_blocks())

    @property
    def energy_spread(self) -> dict[str, int]:
        """Scheduled task minutes grouped by energy tag."""
        spread = {"high": 0, "medium": 0, "low": 0}
        for block in self.task_blocks():
            if block.task is not None:
                spread[block.task.energy] += block.duration
        return spread
