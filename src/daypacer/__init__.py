from .engine import ScheduleBuilder, build_schedule, priority_order
from .errors import DayPacerError, EmptyTitleError, StateFileError, UnknownProfileError
from .models import (
    MINUTES_PER_DAY,
    PacingConfig,
    ScheduleBlock,
    ScheduleResult,
    Task,
)
from .planner import PlannerState, TaskBoard, load_state, new_task, save_state
from .profiles import FOCUS_PROFILES, QUICK_CAPTURES, FocusProfile, get_profile

__all__ = [
    "FOCUS_PROFILES",
    "MINUTES_PER_DAY",
    "QUICK_CAPTURES",
    "DayPacerError",
    "EmptyTitleError",
    "FocusProfile",
    "PacingConfig",
    "PlannerState",
    "ScheduleBlock",
    "ScheduleBuilder",
    "ScheduleResult",
    "StateFileError",
    "Task",
    "TaskBoard",
    "UnknownProfileError",
    "build_schedule",
    "get_profile",
    "load_state",
    "new_task",
    "priority_order",
    "save_state",
]


def main() -> None:
    from .cli import main as cli_main

    raise SystemExit(cli_main())
