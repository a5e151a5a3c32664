"""Command line entry point.

``navgraph bench`` builds a grid graph, runs seeded random queries against it
with the configured search engine and prints a JSON summary.
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from navgraph.app.build import build
from navgraph.config.models import NavModel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="navgraph")
    sub = parser.add_subparsers(dest="command", required=True)

    bench = sub.add_parser("bench", help="Run random queries on a grid graph")
    bench.add_argument("--config", type=Path, help="JSON file matching NavModel")
    bench.add_argument("--engine", choices=["astar", "frontier"])
    bench.add_argument("--max-expansions", type=int, help="Budget for the frontier engine")
    bench.add_argument("--size", type=int, help="Grid width and height")
    bench.add_argument("--queries", type=int)
    bench.add_argument("--seed", type=int)
    bench.add_argument("--quiet", action="store_true", help="Disable search logging")
    return parser


def _model_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> NavModel:
    raw: dict = json.loads(args.config.read_text()) if args.config else {}
    if args.engine:
        search = raw.setdefault("search", {})
        if search.get("kind") != args.engine:
            # options of another engine would fail validation
            search.clear()
        search["kind"] = args.engine
    if args.max_expansions is not None:
        search = raw.setdefault("search", {"kind": "frontier"})
        if search.get("kind", "astar") != "frontier":
            parser.error("--max-expansions only applies to the frontier engine")
        search["max_expansions"] = args.max_expansions
    if args.size is not None:
        raw.setdefault("grid", {}).update(width=args.size, height=args.size)
    if args.queries is not None:
        raw.setdefault("bench", {})["queries"] = args.queries
    if args.seed is not None:
        raw.setdefault("bench", {})["seed"] = args.seed
    return NavModel.model_validate(raw)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "bench":
        app = build(_model_from_args(parser, args), use_logging=not args.quiet)
        print(json.dumps(app.bench()))
    return 0


__all__ = ["build_parser", "main"]
