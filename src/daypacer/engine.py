from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import (
    PacingConfig,
    ScheduleBlock,
    ScheduleResult,
    Task,
    energy_rank,
    new_id,
)

logger = logging.getLogger(__name__)

LUNCH_START_MINUTE = 12 * 60 + 30
LUNCH_LENGTH_MINUTES = 35

WARMUP_LABEL = "Prime the day"
WARMUP_TEXT = "Skim your agenda, set intention, and calibrate energy."
BREAK_LABEL = "Reset break"
BREAK_TEXT = "Hydrate, stretch, breathe."
LUNCH_LABEL = "Lunch reset"
LUNCH_TEXT = "Step away, refuel, protect the pause."
WRAP_LABEL = "Wind-down"
WRAP_TEXT = "Capture wins, park tomorrow's top 3, close loops."


def priority_order(tasks: Iterable[Task]) -> list[Task]:
    """Sort tasks by priority, then energy, then insertion order."""
    return sorted(
        tasks,
        key=lambda task: (
            -task.priority,
            -energy_rank(task.energy),
            task.created_at,
        ),
    )


class ScheduleBuilder:
    """Greedy single-cursor walk over a static priority ordering."""

    def build(self, tasks: Iterable[Task], config: PacingConfig) -> ScheduleResult:
        day_end = config.day_end
        blocks: list[ScheduleBlock] = []
        cursor = config.start_minute
        since_break = 0

        if config.warmup_minutes > 0 and cursor < day_end:
            end = min(cursor + config.warmup_minutes, day_end)
            blocks.append(
                self._structural_block("warmup", WARMUP_LABEL, WARMUP_TEXT, cursor, end)
            )
            cursor = end
            since_break = 0

        for task in priority_order(tasks):
            if config.end_minute is not None and cursor >= config.end_minute:
                break

            if task.duration_minutes <= 0:
                logger.debug("Skipping task %s with no duration", task.id)
                continue

            if (
                config.break_frequency > 0
                and config.break_length > 0
                and since_break >= config.break_frequency
            ):
                break_end = cursor + config.break_length
                if break_end <= day_end:
                    blocks.append(
                        self._structural_block(
                            "break", BREAK_LABEL, BREAK_TEXT, cursor, break_end
                        )
                    )
                    cursor = break_end
                    since_break = 0
                else:
                    logger.debug("Dropping break at %d: past day end %d", cursor, day_end)

            if (
                config.auto_lunch
                and cursor < LUNCH_START_MINUTE
                and cursor + task.duration_minutes > LUNCH_START_MINUTE
            ):
                lunch_end = LUNCH_START_MINUTE + LUNCH_LENGTH_MINUTES
                if lunch_end <= day_end:
                    blocks.append(
                        self._structural_block(
                            "lunch", LUNCH_LABEL, LUNCH_TEXT, LUNCH_START_MINUTE, lunch_end
                        )
                    )
                else:
                    logger.debug("Dropping lunch: past day end %d", day_end)
                # The lunch window is consumed even when it was not emitted.
                cursor = lunch_end
                since_break = 0

            end = cursor + task.duration_minutes
            muted = False
            if end > day_end:
                end = day_end
                muted = True
            if end <= cursor:
                logger.debug("Skipping task %s: no room left at %d", task.id, cursor)
                continue
            if muted:
                logger.debug("Truncating task %s to end at %d", task.id, end)

            blocks.append(
                ScheduleBlock(
                    id=task.id,
                    kind="task",
                    label=task.title,
                    start_minute=cursor,
                    end_minute=end,
                    supporting_text=task.note,
                    task=task,
                    muted=muted,
                )
            )
            cursor = end
            since_break += task.duration_minutes

        if config.wrap_minutes > 0 and cursor + config.wrap_minutes <= day_end:
            end = cursor + config.wrap_minutes
            blocks.append(self._structural_block("wrap", WRAP_LABEL, WRAP_TEXT, cursor, end))
            cursor = end

        return ScheduleResult(blocks=blocks, finish_minute=cursor)

    def _structural_block(
        self, kind: str, label: str, text: str, start: int, end: int
    ) -> ScheduleBlock:
        return ScheduleBlock(
            id=new_id(),
            kind=kind,
            label=label,
            start_minute=start,
            end_minute=end,
            supporting_text=text,
        )


def build_schedule(tasks: Iterable[Task], config: PacingConfig) -> ScheduleResult:
    return ScheduleBuilder().build(tasks, config)
