from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .engine import build_schedule
from .errors import EmptyTitleError, StateFileError
from .models import EnergyLevel, PacingConfig, ScheduleResult, Task, new_id
from .profiles import DEFAULT_PROFILE_KEY, TaskTemplate, find_profile, get_profile
from .timefmt import minutes_to_time_string, parse_time_input

logger = logging.getLogger(__name__)

MIN_TASK_MINUTES = 5
MAX_TASK_MINUTES = 240
FALLBACK_RITUAL_MINUTES = 10

DEFAULT_TASKS: tuple[TaskTemplate, ...] = (
    TaskTemplate(
        title="Clarity checkpoint",
        duration_minutes=15,
        priority=3,
        energy="low",
        note="Review inbox, surface blockers.",
    ),
    TaskTemplate(
        title="Signature project push",
        duration_minutes=90,
        priority=5,
        energy="high",
        note="Ship the work that moves the week forward.",
    ),
    TaskTemplate(
        title="Team sync / touchpoints",
        duration_minutes=45,
        priority=4,
        energy="medium",
        note="Align, unblock, and document actions.",
    ),
)


def new_task(
    title: str,
    duration: int = 45,
    priority: int = 3,
    energy: EnergyLevel = "medium",
    note: str | None = None,
    created_at: int = 0,
) -> Task:
    """Create a task from form input, sanitizing duration and priority."""
    title = title.strip()
    if not title:
        raise EmptyTitleError("Task title must not be blank")
    return Task(
        id=new_id(),
        title=title,
        duration_minutes=max(MIN_TASK_MINUTES, min(MAX_TASK_MINUTES, duration)),
        priority=max(1, min(5, priority)),
        energy=energy,
        note=(note or "").strip() or None,
        created_at=created_at,
    )


class TaskBoard:
    """Flat, insertion-ordered collection of tasks."""

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def _next_created_at(self) -> int:
        now = time.time_ns() // 1_000_000
        latest = max((task.created_at for task in self._tasks), default=-1)
        return max(now, latest + 1)

    def get(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(
        self,
        title: str,
        duration: int = 45,
        priority: int = 3,
        energy: EnergyLevel = "medium",
        note: str | None = None,
    ) -> Task:
        task = new_task(
            title,
            duration=duration,
            priority=priority,
            energy=energy,
            note=note,
            created_at=self._next_created_at(),
        )
        self._tasks.append(task)
        return task

    def add_from_template(self, template: TaskTemplate) -> Task:
        task = Task(
            id=new_id(),
            created_at=self._next_created_at(),
            **template.model_dump(),
        )
        self._tasks.append(task)
        return task

    def duplicate(self, task_id: str) -> Task | None:
        original = self.get(task_id)
        if original is None:
            return None
        clone = original.model_copy(
            update={"id": new_id(), "created_at": self._next_created_at()}
        )
        self._tasks.append(clone)
        return clone

    def remove(self, task_id: str) -> bool:
        remaining = [task for task in self._tasks if task.id != task_id]
        removed = len(remaining) != len(self._tasks)
        self._tasks = remaining
        return removed

    @classmethod
    def seeded(cls) -> TaskBoard:
        board = cls()
        for template in DEFAULT_TASKS:
            board.add_from_template(template)
        return board


class PlannerState(BaseModel):
    """JSON-serializable snapshot of everything the planner form holds."""

    model_config = ConfigDict(extra="forbid")

    name: str = "You"
    tasks: list[Task] = Field(default_factory=list)
    start_time: str = "08:00"
    end_time: str = "17:30"
    profile: str = DEFAULT_PROFILE_KEY
    break_frequency: int = 90
    break_length: int = 10
    auto_lunch: bool = True
    include_warmup: bool = True
    include_wrap: bool = True

    def apply_profile(self, key: str) -> None:
        profile = get_profile(key)
        self.profile = profile.key
        self.start_time = minutes_to_time_string(profile.start_minute)
        self.break_frequency = profile.break_frequency
        self.break_length = profile.break_length
        self.include_warmup = profile.warmup_minutes > 0
        self.include_wrap = profile.wrap_minutes > 0

    def to_pacing(self) -> PacingConfig:
        profile = find_profile(self.profile)
        warmup = wrap = 0
        if self.include_warmup:
            warmup = profile.warmup_minutes if profile else FALLBACK_RITUAL_MINUTES
        if self.include_wrap:
            wrap = profile.wrap_minutes if profile else FALLBACK_RITUAL_MINUTES
        return PacingConfig(
            start_minute=parse_time_input(self.start_time),
            end_minute=parse_time_input(self.end_time) if self.end_time else None,
            break_frequency=self.break_frequency,
            break_length=self.break_length,
            warmup_minutes=warmup,
            wrap_minutes=wrap,
            auto_lunch=self.auto_lunch,
        )

    def build(self) -> ScheduleResult:
        return build_schedule(self.tasks, self.to_pacing())

    @classmethod
    def seeded(cls, profile: str = DEFAULT_PROFILE_KEY) -> PlannerState:
        state = cls(tasks=TaskBoard.seeded().tasks)
        state.apply_profile(profile)
        return state


def load_state(path: str | Path) -> PlannerState:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StateFileError(f"Cannot read planner state: {exc}", str(path)) from exc
    try:
        state = PlannerState.model_validate_json(raw)
    except ValidationError as exc:
        raise StateFileError(f"Invalid planner state: {exc}", str(path)) from exc
    logger.debug("Loaded %d tasks from %s", len(state.tasks), path)
    return state


def save_state(state: PlannerState, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
    logger.debug("Saved %d tasks to %s", len(state.tasks), path)
    return path
