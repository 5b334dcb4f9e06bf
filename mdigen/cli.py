"""CLI entrypoint for mdigen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, MdiGenConfig, load_config
from .generators import GenerationError
from .logging import configure_logging
from .models import GenerationSummary
from .orchestrator import Orchestrator
from .postproc.formatter import FormattingError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdigen",
        description="Generate Vue icon components from the Material Design Icons asset tree.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records, with timestamps, to this file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=".",
        help="Path to .mdigen.yml or the directory containing it (defaults to current directory).",
    )
    parser.add_argument("--source", help="Override the icon source directory.")
    parser.add_argument("--out", help="Override the output root for generated components.")
    parser.add_argument("--demo", help="Override the output root for the demo playground.")
    parser.add_argument(
        "--concurrency",
        type=_positive_int,
        help="Maximum number of icons processed concurrently.",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Write generated sources without running prettier.",
    )
    return parser


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return parsed


def _apply_overrides(config: MdiGenConfig, args: argparse.Namespace) -> MdiGenConfig:
    cwd = Path.cwd()
    if args.source:
        config.source_root = (cwd / args.source).resolve()
    if args.out:
        config.out_root = (cwd / args.out).resolve()
    if args.demo:
        config.demo_root = (cwd / args.demo).resolve()
    if args.concurrency:
        config.concurrency = args.concurrency
    if args.no_format:
        config.format.enabled = False
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdigen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file).resolve() if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    try:
        config = _apply_overrides(load_config(Path(args.config)), args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    try:
        summary = Orchestrator(config).run_sync()
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (GenerationError, FormattingError) as exc:
        parser.exit(1, f"mdigen failed: {exc}\nRun with --verbose for more details.\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"mdigen failed: {exc}\nRun with --verbose for more details.\n")

    _print_summary(summary)


def _print_summary(summary: GenerationSummary) -> None:
    print(
        f"Generated {summary.generated} icon components "
        f"({summary.skipped} skipped, {len(summary.written_files)} files written)"
    )
    for category, counts in summary.categories.items():
        print(f"  {category}: {counts.generated}/{counts.scanned}")
    if summary.duplicates:
        print("Renamed duplicate component names:")
        for original, records in summary.duplicates.items():
            print(f"  {original}: {', '.join(str(record) for record in records)}")


if __name__ == "__main__":
    main(sys.argv[1:])
