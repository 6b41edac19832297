"""Command-line runner for the benchmark scenarios.

Usage:
    ecsbench list
    ecsbench run entity locked --rounds 50
    ecsbench group entity_iter --iter-entities 10000 -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from ecsbench.bench.harness import BenchmarkHarness, TimingReport
from ecsbench.bench.scenarios import SCENARIOS, Scenario, get_scenario, scenarios_in_group
from ecsbench.config import BenchSettings, HarnessSettings
from ecsbench.core.errors import BenchmarkError

logger = logging.getLogger(__name__)


def _add_run_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rounds", type=int, help="timed passes per scenario")
    parser.add_argument("--warmup", type=int, dest="warmup_rounds", help="discarded passes")
    parser.add_argument("--entities", type=int, dest="entities_count", help="referrers (N)")
    parser.add_argument("--points", type=int, dest="points_count", help="handles per referrer (K)")
    parser.add_argument(
        "--iter-entities", type=int, dest="iter_entities_count", help="iteration collection size"
    )
    parser.add_argument("--workers", type=int, dest="max_workers", help="scheduler worker threads")
    parser.add_argument(
        "--no-debug-assertions",
        action="store_false",
        dest="debug_assertions",
        default=None,
        help="skip exclusivity checks on unchecked shared records",
    )
    parser.add_argument("--disable-gc", action="store_true", default=None, help="no GC while timing")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecsbench",
        description="Measure the cost of indirect mutable access strategies.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="list scenarios")

    run = commands.add_parser("run", help="run named scenarios")
    run.add_argument("names", nargs="+", metavar="NAME")
    _add_run_options(run)

    group = commands.add_parser("group", help="run every scenario of a group")
    group.add_argument("group")
    _add_run_options(group)
    return parser


def _overrides(args: argparse.Namespace, fields: Sequence[str]) -> dict[str, Any]:
    return {f: getattr(args, f) for f in fields if getattr(args, f, None) is not None}


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _print_scenarios() -> None:
    for scenario in SCENARIOS.values():
        label = f" [{scenario.aliasing.value}]" if scenario.aliasing else ""
        print(f"{scenario.group:<12} {scenario.name:<16} {scenario.description}{label}")


def run_scenarios(
    scenarios: Sequence[Scenario],
    bench_settings: BenchSettings,
    harness: BenchmarkHarness,
) -> list[TimingReport]:
    """Run each scenario with its own freshly built fixture."""
    reports = []
    for scenario in scenarios:
        report = harness.run(scenario, bench_settings)
        print(report.summary(), flush=True)
        reports.append(report)
    return reports


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "list":
        _print_scenarios()
        return 0

    try:
        if args.command == "run":
            scenarios = [get_scenario(name) for name in args.names]
        else:
            scenarios = scenarios_in_group(args.group)
    except KeyError as e:
        parser.error(str(e.args[0]))

    try:
        bench_settings = BenchSettings(
            **_overrides(
                args,
                (
                    "entities_count",
                    "points_count",
                    "iter_entities_count",
                    "max_workers",
                    "debug_assertions",
                ),
            )
        )
        harness_settings = HarnessSettings(
            **_overrides(args, ("rounds", "warmup_rounds", "disable_gc"))
        )
    except ValidationError as e:
        parser.error(str(e))
    harness = BenchmarkHarness(harness_settings)

    if any(s.aliasing is not None for s in scenarios):
        print(
            "note: 'owned' mutates K independent targets per referrer; "
            "the other entity_get scenarios resolve one aliased target K times and bump it once"
        )
    try:
        run_scenarios(scenarios, bench_settings, harness)
    except BenchmarkError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
