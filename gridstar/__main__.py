"""Module entry point for `python -m gridstar`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from gridstar.app import load_document, resolve_engine_config, solve_document
from gridstar.core.contracts import SearchResponse
from gridstar.core.errors import GridError
from gridstar.infra.logger import LEVEL_NAMES, configure_logging
from gridstar.render.grid_editor import DEFAULT_SIZE, run_grid_editor
from gridstar.render.grid_view import render_outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find shortest paths on a grid.")
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="ASCII map to solve (# obstacle, S start, E end, . free).",
    )
    parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="JSON search request to solve.",
    )
    parser.add_argument(
        "--edit",
        action="store_true",
        help="Open the interactive grid editor.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_SIZE,
        help="Editor grid width.",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_SIZE,
        help="Editor grid height.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON engine config (diagonal, max_steps).",
    )
    parser.add_argument(
        "--diagonal",
        action="store_true",
        default=None,
        help="Allow diagonal moves.",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Abort the search after this many expansions.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the search response as JSON.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVEL_NAMES,
        default="WARNING",
        help="Logging level.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Append log records to this file.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Write log records as JSON lines.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        args.log_level,
        json=args.log_json,
        logfile=args.log_file,
        console=not args.edit,
    )

    try:
        config = resolve_engine_config(
            args.config, diagonal=args.diagonal, max_steps=args.max_steps
        )
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    if args.edit:
        run_grid_editor(width=args.width, height=args.height, config=config)
        return 0

    if args.map is None and args.request is None:
        parser.error("one of --map, --request or --edit is required")

    console = Console()
    try:
        document = load_document(
            map_path=args.map, request_path=args.request, config=config
        )
        outcome = solve_document(document, config)
    except (GridError, ValidationError) as exc:
        console.print(Text(f"Invalid request: {exc}", style="bold red"))
        return 2
    except FileNotFoundError as exc:
        console.print(Text(str(exc), style="bold red"))
        return 2

    if args.json:
        print(SearchResponse.from_outcome(outcome).model_dump_json())
    else:
        console.print(
            render_outcome(document.grid, document.start, document.end, outcome)
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
