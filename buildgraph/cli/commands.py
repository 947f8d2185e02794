from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from buildgraph.config import ConfigError, build_registry, load_project
from buildgraph.graph import GraphRunner, plan_order
from buildgraph.logging_setup import setup_logging
from buildgraph.registry import TaskRegistry
from buildgraph.report import Outcome, format_duration
from buildgraph.result import BuildError, UnknownTaskError

from .args import build_parser

LOGGER = logging.getLogger(__name__)


class ConsoleReporter:
    def on_start(self, name: str) -> None:
        print(f"START {name}")

    def on_finish(self, name: str, outcome: Outcome, duration_ms: float) -> None:
        status = "OK" if outcome is Outcome.SUCCESS else "FAIL"
        print(f"{status} {name}, {format_duration(duration_ms)}")

    def on_failure_detail(self, error: Exception) -> None:
        if isinstance(error, BuildError):
            print(f"failed: {error.message}", file=sys.stderr)
        else:
            LOGGER.error("%s", error, exc_info=error)


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        setup_logging(_log_level(args))

        match args.command:
            case "run":
                return cmd_run(args)
            case "list":
                return cmd_list(args)
            case "graph":
                return cmd_graph(args)
            case _:
                return 2

    except (ConfigError, BuildError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_run(args: argparse.Namespace) -> int:
    registry = _load_registry(args)
    targets: list[str] = args.targets

    if args.dry_run:
        for name in plan_order(registry, targets):
            print(name)
        return 0

    runner = GraphRunner(registry, ConsoleReporter())
    result = asyncio.run(runner.run(*targets))

    if result.is_success():
        return 0
    if isinstance(result.error, UnknownTaskError) and result.error.parent is None:
        return 2
    return 1


def cmd_list(args: argparse.Namespace) -> int:
    registry = _load_registry(args)
    for name in registry.list_names():
        print(name)
    return 0


def cmd_graph(args: argparse.Namespace) -> int:
    registry = _load_registry(args)
    for task in registry:
        deps = " ".join(task.deps)
        print(f"{task.name}: {deps}".rstrip())
    return 0


def _load_registry(args: argparse.Namespace) -> TaskRegistry:
    return build_registry(load_project(args.config))


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO
