"""Command-line interface for flowstep."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from flowstep.algorithms import available_algorithms, get_algorithm
from flowstep.analysis import summarize
from flowstep.config import PLAYBACK_CONFIG
from flowstep.engine import AlgorithmSession
from flowstep.generate import random_network
from flowstep.graphs import available_networks, load_network
from flowstep.io import load_network_file
from flowstep.logging import get_logger, set_global_log_level
from flowstep.model.network import FlowNetwork
from flowstep.render import format_listing, to_elements

logger = get_logger(__name__)

DEFAULT_MAX_STEPS = 100_000


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 4,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _resolve_network(graph: str, seed: Optional[int]) -> FlowNetwork:
    """Turn the ``--graph`` argument into a network.

    Accepts ``random``, a preset name, or a path to a YAML/JSON file.
    """
    if graph.lower() == "random":
        return random_network(seed=seed)
    path = Path(graph)
    if path.suffix.lower() in (".yaml", ".yml", ".json"):
        return load_network_file(path)
    return load_network(graph)


def _list(detail: bool) -> None:
    print("Algorithms:")
    for name in available_algorithms():
        print(f"  {name}")
        if detail:
            print(format_listing(get_algorithm(name).codes()))
            print()
    print("Networks:")
    for name in available_networks():
        network = load_network(name)
        print(
            f"  {name} ({len(network.vertices)} vertices, {len(network.edges)} edges)"
        )
    print("  random (use --seed for a reproducible network)")


def _run(
    algorithm_name: str,
    graph: str,
    seed: Optional[int],
    max_steps: int,
    play: bool,
    speed: int,
    show_trace: bool,
    results_path: Optional[Path],
) -> None:
    """Run an algorithm to completion and report the result."""
    try:
        algorithm = get_algorithm(algorithm_name)
        network = _resolve_network(graph, seed)
    except (ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    session = AlgorithmSession(algorithm, network)
    logger.info("Running %s on %s", algorithm.name, graph)

    delay = PLAYBACK_CONFIG.delay_for_speed(speed) if play else 0.0
    trace: List[Dict[str, Any]] = []
    try:
        for pc, _result in session.iter_steps(max_steps):
            entry = {
                "step": session.steps,
                "pc": pc,
                "code": algorithm[pc].code.strip(),
                "flow": session.flow_value(),
            }
            trace.append(entry)
            if play:
                print(f"[{entry['step']:>4}] {entry['code']}  (flow {entry['flow']})")
                time.sleep(delay)
    except RuntimeError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if show_trace and not play:
        rows = [
            [str(e["step"]), str(e["pc"]), e["code"], str(e["flow"])] for e in trace
        ]
        print(_format_table(["Step", "Line", "Instruction", "Flow"], rows))
        print()

    summary = summarize(session.graph)
    print(f"Algorithm:  {algorithm.name}")
    print(f"Steps:      {session.steps}")
    print(f"Max flow:   {summary.total_flow}")
    print(f"Min cut:    {', '.join(summary.min_cut) or '-'} (capacity {summary.cut_capacity})")

    if results_path is not None:
        payload = {
            "algorithm": algorithm.name,
            "network": graph,
            "steps": session.steps,
            "flow_value": summary.total_flow,
            "min_cut": summary.min_cut,
            "cut_capacity": summary.cut_capacity,
            "graph": to_elements(session.graph),
            "residual": to_elements(session.residual),
            "trace": trace,
        }
        results_path.parent.mkdir(parents=True, exist_ok=True)
        results_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("Results written to %s", results_path)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flowstep`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flowstep",
        description="Step through maximum-flow algorithms on sample networks.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{list,run}",
        help="Available commands",
    )

    list_parser = subparsers.add_parser(
        "list", help="List algorithms and preset networks"
    )
    list_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show the pseudocode of every algorithm",
    )

    run_parser = subparsers.add_parser("run", help="Run an algorithm on a network")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        default="Ford-Fulkerson",
        help=f"Algorithm name ({', '.join(available_algorithms())})",
    )
    run_parser.add_argument(
        "--graph",
        "-g",
        default="Example",
        help="Preset name, path to a YAML/JSON network, or 'random'",
    )
    run_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for --graph random"
    )
    run_parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help="Abort if the algorithm has not finished after this many steps",
    )
    run_parser.add_argument(
        "--play",
        action="store_true",
        help="Print each step as it runs, pausing between steps",
    )
    run_parser.add_argument(
        "--speed",
        type=int,
        default=0,
        help=(
            f"Playback speed from {PLAYBACK_CONFIG.min_speed} to "
            f"{PLAYBACK_CONFIG.max_speed} (used with --play)"
        ),
    )
    run_parser.add_argument(
        "--no-trace",
        action="store_true",
        help="Only print the summary, not the step table",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export final graphs, min cut and trace to a JSON file",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "list":
        _list(detail=args.detail)
    elif args.command == "run":
        _run(
            algorithm_name=args.algorithm,
            graph=args.graph,
            seed=args.seed,
            max_steps=args.max_steps,
            play=args.play,
            speed=args.speed,
            show_trace=not args.no_trace,
            results_path=args.results,
        )


if __name__ == "__main__":
    main()
