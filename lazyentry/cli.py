"""Command-line front door for lazyentry.

Resolves each PATH once through an entry handle and reports existence, kind,
and resolution outcome. Exits non-zero when any path is missing for the
requested kind.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import config
from .entry_model import PathEntryHandle, TargetKind, create
from .highlight import highlight_json

logger = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    """argparse type for logging level names."""
    name = config.normalize_log_level(value)
    if name is None:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {value!r} (choose from {', '.join(config.LOG_LEVEL_NAMES)})"
        )
    return name


def describe_handle(handle: PathEntryHandle) -> dict[str, object]:
    """Return a JSON-ready report for one handle, resolving it if needed."""
    snapshot = handle.snapshot()
    return {
        "path": handle.raw_path,
        "target": handle.target.value,
        "exists": handle.exists(),
        "kind": snapshot.kind.value,
        "outcome": snapshot.outcome.value,
        "size": snapshot.size,
        "mtime_ns": snapshot.mtime_ns,
        "is_dangling_link": snapshot.is_dangling_link,
        "error": snapshot.error,
    }


def format_text_report(reports: list[dict[str, object]]) -> str:
    lines = []
    for report in reports:
        status = "yes" if report["exists"] else "no"
        lines.append(f"{status}\t{report['kind']}\t{report['outcome']}\t{report['path']}")
    return "\n".join(lines) + "\n" if lines else ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyentry",
        description="Report whether paths exist as directories or files.",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="Paths to resolve, used exactly as given.")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in TargetKind],
        default=TargetKind.DIRECTORY.value,
        help="Declared target kind (default: directory).",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON array instead of tab-separated lines.")
    parser.add_argument("--style", default=None, help="Pygments style name for --json output on a TTY.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help="Logging level (default: config value or WARNING).",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Persist the given --log-level and --style, and the --no-color setting, as defaults.",
    )
    return parser


def save_preferences(args: argparse.Namespace) -> None:
    """Write CLI display preferences to the config file."""
    if args.log_level is not None:
        config.save_log_level(args.log_level)
    if args.style is not None:
        config.save_style(args.style)
    config.save_no_color(args.no_color)
    logger.info("saved preferences to %s", config.CONFIG_PATH)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, probe every path, print a report, return the exit status."""
    args = build_parser().parse_args(argv)

    level_name = args.log_level or config.load_log_level()
    logging.basicConfig(level=config.log_level_number(level_name), format="%(levelname)s %(name)s: %(message)s")
    if args.save:
        save_preferences(args)

    target = TargetKind(args.kind)
    handles = [create(path, target) for path in args.paths]
    reports = [describe_handle(handle) for handle in handles]
    logger.info("resolved %d path(s) as %s", len(reports), target.value)

    if args.json:
        text = json.dumps(reports, indent=2) + "\n"
        no_color = args.no_color or config.load_no_color()
        if not no_color and sys.stdout.isatty():
            text = highlight_json(text, args.style or config.load_style())
    else:
        text = format_text_report(reports)
    sys.stdout.write(text)

    return 0 if all(report["exists"] for report in reports) else 1


if __name__ == "__main__":
    raise SystemExit(main())
