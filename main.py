"""CLI entry point for remapping github-painter templates onto the current year."""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from painter_remap.errors import ConfigError
from painter_remap.models import DEFAULT_COLUMNS, Alignment, RemapConfig
from painter_remap.remapper import remap_template

logger = logging.getLogger(__name__)

# Environment variables overriding the CLI defaults
ALIGN_ENV = "PAINTER_REMAP_ALIGN"
WEEKS_ENV = "PAINTER_REMAP_WEEKS"
LOG_LEVEL_ENV = "PAINTER_REMAP_LOG_LEVEL"


def _configure_logging(level: str):
    # stdout carries the script, so log records go to stderr only
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=(
            "Rewrite the 2019 dates of a github-painter template so the drawing "
            "lands on the current contribution graph."
        )
    )
    ap.add_argument("template", help="Path to the template.sh to remap")
    ap.add_argument(
        "--align",
        choices=[a.value for a in Alignment],
        default=os.getenv(ALIGN_ENV, Alignment.CENTER.value),
        help="Placement of the drawing in the window (default: env PAINTER_REMAP_ALIGN or 'center')",
    )
    ap.add_argument(
        "--weeks",
        type=int,
        default=os.getenv(WEEKS_ENV, str(DEFAULT_COLUMNS)),
        help=f"Visible week columns (default: env PAINTER_REMAP_WEEKS or {DEFAULT_COLUMNS})",
    )
    ap.add_argument(
        "--today",
        default=None,
        help="Reference day YYYY-MM-DD for the last column (default: today in UTC)",
    )
    ap.add_argument(
        "--allow-future",
        action="store_true",
        help="Do not move the drawing left when it would paint days after today",
    )
    ap.add_argument("--output", default=None, help="Write the script here instead of stdout")
    return ap


def main(argv: list[str] | None = None) -> None:
    """Main CLI function."""
    ap = _build_parser()

    log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        ap.error(f"{LOG_LEVEL_ENV} must be a logging level name, got {log_level!r}")
    _configure_logging(log_level)

    # string defaults from the environment go through type=int as well
    args = ap.parse_args(argv)

    if args.today:
        try:
            today = datetime.strptime(args.today, "%Y-%m-%d").date()
        except ValueError:
            ap.error(f"--today must be YYYY-MM-DD, got {args.today!r}")
    else:
        today = datetime.now(timezone.utc).date()

    try:
        config = RemapConfig(
            today=today,
            alignment=args.align,
            columns=args.weeks,
            future_guard=not args.allow_future,
        )
    except ConfigError as e:
        ap.error(str(e))

    template_path = Path(args.template)
    if not template_path.exists():
        error_msg = f"File not found: {template_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    with open(template_path, encoding="utf-8", newline="") as f:
        text = f.read()

    result = remap_template(text, config)

    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(result)
        logger.info("Wrote remapped template to %s", args.output)
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
