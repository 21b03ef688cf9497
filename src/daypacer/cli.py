from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .errors import DayPacerError
from .models import ScheduleResult
from .planner import PlannerState, load_state, save_state
from .profiles import DEFAULT_PROFILE_KEY, FOCUS_PROFILES
from .timefmt import format_time_label

logger = logging.getLogger("daypacer")

STATE_ENV_VAR = "DAYPACER_STATE"
DEFAULT_STATE_FILE = "daypacer.json"


def default_state_path() -> Path:
    return Path(os.environ.get(STATE_ENV_VAR, DEFAULT_STATE_FILE))


def render_schedule(result: ScheduleResult) -> list[str]:
    lines = []
    for block in result.blocks:
        span = f"{format_time_label(block.start_minute):>8} - {format_time_label(block.end_minute):>8}"
        marker = " (cut short)" if block.muted else ""
        lines.append(f"{span}  [{block.kind}] {block.label}{marker}")
    lines.append(f"Finish: {format_time_label(result.finish_minute)}")
    lines.append(f"Focus minutes: {result.focus_minutes}")
    return lines


def cmd_show(args: argparse.Namespace) -> int:
    path = Path(args.state)
    if path.exists():
        state = load_state(path)
    else:
        logger.info("No state file at %s, using seeded defaults", path)
        state = PlannerState.seeded()
    result = state.build()
    logger.info("Built %d blocks finishing at minute %d", len(result.blocks), result.finish_minute)
    print(f"Day plan for {state.name}")
    for line in render_schedule(result):
        print(line)
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    path = Path(args.state)
    if path.exists() and not args.force:
        print(f"{path} already exists (use --force to overwrite)", file=sys.stderr)
        return 1
    state = PlannerState.seeded(profile=args.profile)
    save_state(state, path)
    print(f"Wrote {path}")
    return 0


def cmd_profiles(args: argparse.Namespace) -> int:
    for profile in FOCUS_PROFILES:
        print(
            f"{profile.key:<10} {profile.label:<18} starts {format_time_label(profile.start_minute)}, "
            f"break {profile.break_length}m every {profile.break_frequency}m"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="daypacer", description="Lay out a paced day plan")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--state",
        default=str(default_state_path()),
        help=f"Planner state file (default: ${STATE_ENV_VAR} or {DEFAULT_STATE_FILE})",
    )
    sub = parser.add_subparsers(dest="command")

    show = sub.add_parser("show", help="Print the schedule for the saved state")
    show.set_defaults(func=cmd_show)

    init = sub.add_parser("init", help="Write a seeded state file")
    init.add_argument(
        "--profile",
        default=DEFAULT_PROFILE_KEY,
        choices=[profile.key for profile in FOCUS_PROFILES],
    )
    init.add_argument("--force", action="store_true")
    init.set_defaults(func=cmd_init)

    profiles = sub.add_parser("profiles", help="List focus profiles")
    profiles.set_defaults(func=cmd_profiles)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not getattr(args, "func", None):
        args.func = cmd_show
    try:
        return args.func(args)
    except DayPacerError as exc:
        logger.error("%s", exc)
        return 1
