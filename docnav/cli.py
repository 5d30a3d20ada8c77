"""CLI entrypoints for docnav commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import AREAS, configure_logging
from .manifest import ManifestError
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory containing .docnav.yml (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docnav",
        description="Generate metadata lists and sample navigation trees for a documentation site.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--debug-area",
        action="append",
        choices=AREAS,
        default=[],
        metavar="AREA",
        help=f"Log one area at DEBUG level; repeatable ({', '.join(AREAS)}).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    lists_parser = subparsers.add_parser(
        "lists",
        help="Write the per-type metadata lists and tag indexes.",
    )
    _add_verbose_option(lists_parser, suppress_default=True)
    _add_path_argument(lists_parser)
    lists_parser.add_argument(
        "--pages",
        default=None,
        help="Page manifest to index (overrides `pages` in .docnav.yml).",
    )

    samples_parser = subparsers.add_parser(
        "samples",
        help="Mirror configured sample projects and write the navigation tree.",
    )
    _add_verbose_option(samples_parser, suppress_default=True)
    _add_path_argument(samples_parser)
    samples_parser.add_argument(
        "--offline",
        action="store_true",
        help="Write only the index page of each sample project.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docnav commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), debug_areas=args.debug_area)

    orchestrator = Orchestrator()

    try:
        if args.command == "lists":
            target = orchestrator.run_lists(args.path, pages=args.pages)
            print(f"Metadata lists written to {_relativize(target)}")
        elif args.command == "samples":
            target = orchestrator.run_samples(args.path, offline=bool(args.offline))
            if target is None:
                print("No navigation tree written")
            else:
                print(f"Sample navigation tree written to {_relativize(target)}")
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (ConfigError, ManifestError, FileNotFoundError) as exc:
        parser.exit(1, f"docnav {args.command} failed: {exc}\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
