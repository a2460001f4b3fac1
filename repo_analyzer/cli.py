"""CLI entrypoint for repository size analysis."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-analyzer",
        description="Clone a repository and report the size of its files and folders as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .repo-analyzer.yml file or its directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    parser.add_argument("url", help="Clone URL of the repository to analyze.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: print the report and exit non-zero if analysis failed."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config or Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"repo-analyzer: {exc}\n")

    orchestrator = Orchestrator(config=config)
    analysis = orchestrator.analyze(args.url)

    print(analysis.to_json(indent=config.output.indent))
    if analysis.error is not None:
        parser.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
