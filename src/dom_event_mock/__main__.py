"""CLI entrypoint: dispatch one event through a traced parent chain."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from importlib import metadata
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import load_config
from .event import Event
from .exceptions import InvalidArgumentError
from .logging_utils import configure_logging
from .trace import PropagationTrace, build_chain, instrument

LOGGER = logging.getLogger(__name__)

STOP_ACTIONS = {
    "none": None,
    "propagation": Event.stop_propagation,
    "immediate": Event.stop_immediate_propagation,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dom-event-mock",
        description="Trace capture/target/bubble propagation through a chain of EventTargets",
    )
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.toml")
    parser.add_argument("--depth", type=int, default=3, help="Number of nodes in the chain")
    parser.add_argument("--type", dest="event_type", default="boom", help="Event type")
    parser.add_argument("--no-bubbles", action="store_true", help="Dispatch a non-bubbling event")
    parser.add_argument("--cancelable", action="store_true", help="Dispatch a cancelable event")
    parser.add_argument(
        "--prevent-default",
        action="store_true",
        help="Call prevent_default() from the target handler",
    )
    parser.add_argument("--stop", choices=sorted(STOP_ACTIONS), default="none")
    parser.add_argument(
        "--stop-at",
        default="node1-capture-1",
        help="Listener label that performs --stop (e.g. node1-capture-1)",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="Iterate live listener lists instead of snapshots",
    )
    return parser


def _node_names(depth: int) -> list[str]:
    return [f"node{index}" for index in range(depth)]


def _render(console: Console, trace: PropagationTrace, result: bool) -> None:
    table = Table(title="Listener invocation order")
    table.add_column("#", justify="right")
    table.add_column("Node")
    table.add_column("Phase")
    table.add_column("Listener")
    for index, entry in enumerate(trace.entries, start=1):
        table.add_row(str(index), entry.node, entry.phase.name, entry.label)
    console.print(table)
    console.print(f"dispatch_event returned [bold]{result}[/bold]")


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Build the canonical ordering scenario, dispatch once and print the trace."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    console = console or Console()

    if args.version:
        try:
            version = metadata.version("dom-event-mock")
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        console.print(f"dom-event-mock {version}")
        return 0

    if args.depth < 1:
        parser.error("--depth must be at least 1")

    config = load_config(args.config)
    configure_logging(config["logging"])
    iteration = "live" if args.live else config["dispatch"]["listener_iteration"]

    names = _node_names(args.depth)
    actions = {}
    stop = STOP_ACTIONS[args.stop]
    if stop is not None:
        actions[args.stop_at] = stop
    if args.prevent_default:
        actions[f"{names[-1]}-handler"] = Event.prevent_default

    try:
        trace = PropagationTrace()
        chain = build_chain(names, [args.event_type], listener_iteration=iteration)
        instrument(trace, chain, args.event_type, actions=actions)
        event = Event(
            args.event_type, bubbles=not args.no_bubbles, cancelable=args.cancelable
        )
        result = chain[names[-1]].dispatch_event(event)
    except InvalidArgumentError as exc:
        console.print(f"[red]error:[/red] {exc}")
        return 2

    LOGGER.info("cli.dispatch.done", extra={"listeners_run": len(trace.entries)})
    _render(console, trace, bool(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
