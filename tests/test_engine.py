"""Example-based tests for the schedule builder."""

from daypacer.engine import (
    BREAK_LABEL,
    LUNCH_LABEL,
    WARMUP_LABEL,
    WRAP_LABEL,
    ScheduleBuilder,
    build_schedule,
    priority_order,
)
from daypacer.models import PacingConfig


def spans(result):
    return [(block.kind, block.start_minute, block.end_minute) for block in result.blocks]


def scenario_config(**overrides):
    values = dict(
        start_minute=8 * 60,
        end_minute=None,
        warmup_minutes=10,
        wrap_minutes=10,
        break_frequency=90,
        break_length=10,
        auto_lunch=False,
    )
    values.update(overrides)
    return PacingConfig(**values)


class TestScenarios:
    def test_open_ended_day_with_break_between_tasks(self, make_task):
        tasks = [
            make_task("first task", duration=90, priority=5, energy="high"),
            make_task("second", duration=25, priority=2, energy="low"),
        ]

        result = build_schedule(tasks, scenario_config())

        assert spans(result) == [
            ("warmup", 480, 490),
            ("task", 490, 580),
            ("break", 580, 590),
            ("task", 590, 615),
            ("wrap", 615, 625),
        ]
        assert [block.label for block in result.blocks] == [
            WARMUP_LABEL,
            "first task",
            BREAK_LABEL,
            "second",
            WRAP_LABEL,
        ]
        assert result.finish_minute == 625
        assert not any(block.muted for block in result.blocks)

    def test_hard_end_truncates_and_mutes(self, make_task):
        tasks = [
            make_task("first task", duration=90, priority=5, energy="high"),
            make_task("second", duration=25, priority=2, energy="low"),
        ]

        result = build_schedule(tasks, scenario_config(end_minute=9 * 60 + 30))

        assert spans(result) == [("warmup", 480, 490), ("task", 490, 570)]
        assert result.blocks[-1].muted is True
        assert result.finish_minute == 570

    def test_lunch_jumps_cursor_past_anchor(self, make_task):
        task = make_task("Deep work", duration=60, priority=5)
        config = scenario_config(
            start_minute=12 * 60, warmup_minutes=0, wrap_minutes=0, auto_lunch=True
        )

        result = build_schedule([task], config)

        assert spans(result) == [("lunch", 750, 785), ("task", 785, 845)]
        assert result.blocks[0].label == LUNCH_LABEL
        assert result.finish_minute == 845


class TestOrdering:
    def test_priority_then_energy_then_insertion(self, make_task):
        low_energy = make_task("a", priority=3, energy="low")
        top = make_task("b", priority=5, energy="low")
        high_energy = make_task("c", priority=3, energy="high")
        same_as_c = make_task("d", priority=3, energy="high")

        ordered = priority_order([low_energy, top, high_energy, same_as_c])

        assert [task.id for task in ordered] == ["b", "c", "d", "a"]

    def test_input_collection_is_untouched(self, make_task, bare_config):
        tasks = [make_task("a", priority=1), make_task("b", priority=5)]
        snapshot = list(tasks)

        build_schedule(tasks, bare_config)

        assert tasks == snapshot

    def test_task_blocks_reuse_task_identity(self, make_task, bare_config):
        task = make_task("Write report", note="Draft section two")

        block = build_schedule([task], bare_config).blocks[0]

        assert block.id == task.id
        assert block.task == task
        assert block.supporting_text == "Draft section two"


class TestBreaks:
    def test_break_never_splits_a_task(self, make_task, bare_config):
        config = bare_config.model_copy(update={"break_frequency": 30, "break_length": 5})
        tasks = [make_task("long", duration=120, priority=5), make_task("next", priority=1)]

        result = build_schedule(tasks, config)

        assert spans(result) == [("task", 480, 600), ("break", 600, 605), ("task", 605, 635)]

    def test_break_that_overflows_end_is_dropped(self, make_task, bare_config):
        config = bare_config.model_copy(
            update={"break_frequency": 60, "break_length": 15, "end_minute": 550}
        )
        tasks = [make_task("a", duration=60, priority=5), make_task("b", duration=30, priority=1)]

        result = build_schedule(tasks, config)

        assert spans(result) == [("task", 480, 540), ("task", 540, 550)]
        assert result.blocks[-1].muted is True

    def test_work_accumulates_across_short_tasks(self, make_task, bare_config):
        config = bare_config.model_copy(update={"break_frequency": 90, "break_length": 10})
        tasks = [make_task(f"t{i}", duration=40) for i in range(4)]

        result = build_schedule(tasks, config)

        assert spans(result) == [
            ("task", 480, 520),
            ("task", 520, 560),
            ("task", 560, 600),
            ("break", 600, 610),
            ("task", 610, 650),
        ]

    def test_zero_frequency_disables_breaks(self, make_task, bare_config):
        config = bare_config.model_copy(update={"break_length": 10})
        tasks = [make_task(f"t{i}", duration=120) for i in range(3)]

        result = build_schedule(tasks, config)

        assert all(block.kind == "task" for block in result.blocks)


class TestLunch:
    def test_lunch_resets_work_counter(self, make_task, bare_config):
        config = bare_config.model_copy(
            update={
                "start_minute": 11 * 60,
                "break_frequency": 90,
                "break_length": 10,
                "auto_lunch": True,
            }
        )
        tasks = [
            make_task("a", duration=60, priority=5),
            make_task("b", duration=45, priority=4),
            make_task("c", duration=30, priority=3),
        ]

        result = build_schedule(tasks, config)

        assert spans(result) == [
            ("task", 660, 720),
            ("lunch", 750, 785),
            ("task", 785, 830),
            ("task", 830, 860),
        ]

    def test_unemitted_lunch_still_consumes_window(self, make_task, bare_config):
        config = bare_config.model_copy(
            update={"start_minute": 12 * 60, "end_minute": 760, "auto_lunch": True}
        )

        result = build_schedule([make_task("a", duration=60)], config)

        assert result.blocks == []
        assert result.finish_minute == 785

    def test_no_lunch_when_task_ends_before_anchor(self, make_task, bare_config):
        config = bare_config.model_copy(update={"start_minute": 11 * 60, "auto_lunch": True})

        result = build_schedule([make_task("a", duration=90)], config)

        assert spans(result) == [("task", 660, 750)]

    def test_no_lunch_when_disabled(self, make_task, bare_config):
        config = bare_config.model_copy(update={"start_minute": 12 * 60})

        result = build_schedule([make_task("a", duration=60)], config)

        assert spans(result) == [("task", 720, 780)]


class TestBounds:
    def test_walk_stops_once_end_is_reached(self, make_task, bare_config):
        config = bare_config.model_copy(update={"end_minute": 540, "wrap_minutes": 5})
        tasks = [make_task("a", duration=60, priority=5), make_task("b", priority=1)]

        result = build_schedule(tasks, config)

        assert spans(result) == [("task", 480, 540)]
        assert result.blocks[0].muted is False
        assert result.finish_minute == 540

    def test_start_after_end_produces_nothing(self, make_task):
        config = PacingConfig(start_minute=600, end_minute=540, warmup_minutes=10, wrap_minutes=10)

        result = build_schedule([make_task("a")], config)

        assert result.blocks == []
        assert result.finish_minute == 600

    def test_open_day_is_capped_at_midnight(self, make_task, bare_config):
        config = bare_config.model_copy(update={"start_minute": 1400, "wrap_minutes": 10})
        tasks = [make_task("late", duration=120, priority=5), make_task("later", priority=1)]

        result = build_schedule(tasks, config)

        assert spans(result) == [("task", 1400, 1440)]
        assert result.blocks[0].muted is True
        assert result.finish_minute == 1440

    def test_non_positive_duration_tasks_are_skipped(self, make_task, bare_config):
        config = bare_config.model_copy(update={"start_minute": 12 * 60, "auto_lunch": True})
        tasks = [
            make_task("empty", duration=0, priority=5),
            make_task("negative", duration=-20, priority=4),
            make_task("real", duration=20, priority=1),
        ]

        result = build_schedule(tasks, config)

        assert spans(result) == [("task", 720, 740)]


class TestRituals:
    def test_empty_task_list_keeps_rituals(self):
        result = ScheduleBuilder().build([], PacingConfig(start_minute=480))

        assert spans(result) == [("warmup", 480, 490), ("wrap", 490, 500)]
        assert result.finish_minute == 500

    def test_warmup_is_clipped_to_end(self, make_task):
        config = PacingConfig(start_minute=480, end_minute=485, warmup_minutes=10, wrap_minutes=10)

        result = build_schedule([make_task("a")], config)

        assert spans(result) == [("warmup", 480, 485)]
        assert result.finish_minute == 485

    def test_wrap_skipped_when_it_cannot_fit(self, make_task):
        config = PacingConfig(start_minute=480, end_minute=530, warmup_minutes=10, wrap_minutes=15)

        result = build_schedule([make_task("a", duration=30)], config)

        assert [block.kind for block in result.blocks] == ["warmup", "task"]
        assert result.finish_minute == 520

    def test_structural_blocks_get_fresh_ids(self):
        config = PacingConfig(start_minute=480)

        first = build_schedule([], config)
        second = build_schedule([], config)

        assert first.blocks[0].id != second.blocks[0].id
        assert spans(first) == spans(second)


def test_summary_totals(make_task, bare_config):
    tasks = [
        make_task("a", duration=50, energy="high"),
        make_task("b", duration=20, energy="low"),
        make_task("c", duration=15, energy="low"),
    ]

    result = build_schedule(tasks, bare_config)

    assert result.focus_minutes == 85
    assert result.energy_spread == {"high": 50, "medium": 0, "low": 35}
