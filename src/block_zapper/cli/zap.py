"""
Command-line interface for zapping block trees.

Reads a JSON forest (a list of Gutenberg-style block dicts), cleans it and writes
the rebuilt forest as JSON.

Usage:
    # Selective zap: remove styles and custom classes
    python -m block_zapper.cli.zap blocks.json --remove blockStyles --remove customClasses

    # Mega zap, media attributes removed too
    python -m block_zapper.cli.zap blocks.json --mode mega --no-keep-media -o clean.json

    # Container status only
    python -m block_zapper.cli.zap blocks.json --stats
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from block_zapper.cleaning import clean_forest, forest_stats, format_report
from block_zapper.config import settings
from block_zapper.logging_config import get_logger, setup_logging
from block_zapper.models import AttributeCategory, ZapMode, ZapOptions, parse_forest
from block_zapper.models.options import PROTECTED_CATEGORIES


logger = get_logger(__name__)

REMOVABLE_CATEGORIES = [c.value for c in AttributeCategory if c not in PROTECTED_CATEGORIES]


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def load_forest(input_path: Path) -> List[Any]:
    """
    Load a block forest from a JSON file.

    Args:
        input_path: Path to a JSON file holding a list of blocks

    Returns:
        Parsed forest (malformed entries kept for per-node reporting)

    Raises:
        ValueError: If the file is not valid JSON or not a list
    """
    with open(input_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {input_path}: {e}") from e

    return parse_forest(data)


def build_options(remove: Optional[List[str]], keep_media: bool) -> ZapOptions:
    """Build ZapOptions from repeated --remove flags."""
    flags = {category: True for category in (remove or [])}
    return ZapOptions(keep_media=keep_media, **flags)


def write_json(payload: Any, output_path: Optional[Path]) -> None:
    """
    Write a JSON payload to a file, or to stdout when no path is given.
    """
    text = json.dumps(payload, ensure_ascii=False, indent=settings.output_indent)

    if not output_path:
        print(text)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text + "\n")

    logger.info("output_written", path=str(output_path))


def run_zap(
    input_path: Path,
    mode: ZapMode,
    options: ZapOptions,
    output_path: Optional[Path] = None,
    report_path: Optional[Path] = None,
) -> str:
    """
    Zap a forest file and write the results.

    Returns:
        Human-readable summary of the pass
    """
    forest = load_forest(input_path)
    cleaned, report = clean_forest(forest, mode, options)

    write_json([node.to_dict() for node in cleaned], output_path)
    if report_path:
        write_json(report.model_dump(mode="json"), report_path)

    return format_report(report)


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Block Zapper CLI - Strip presentation attributes from block trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Remove block styles only
  %(prog)s blocks.json --remove blockStyles

  # Keep content (and media) only
  %(prog)s blocks.json --mode mega

  # Save cleaned blocks and the report
  %(prog)s blocks.json --mode mega -o clean.json --report report.json

Removable categories:
  {", ".join(REMOVABLE_CATEGORIES)}
        """
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to a JSON file containing a list of blocks"
    )

    parser.add_argument(
        "--mode",
        "-m",
        type=str,
        choices=[m.value for m in ZapMode],
        default=settings.default_zap_mode,
        help=f"Zap mode (default: {settings.default_zap_mode})"
    )

    parser.add_argument(
        "--remove",
        "-r",
        action="append",
        choices=REMOVABLE_CATEGORIES,
        default=None,
        help="Category to remove in selective mode (repeatable)"
    )

    parser.add_argument(
        "--keep-media",
        action=argparse.BooleanOptionalAction,
        default=settings.default_keep_media,
        help="Protect image/video/icon attributes"
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file for the cleaned blocks (default: stdout)"
    )

    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Write the JSON report to this file"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Only print block and attribute counts"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (debug log line per zapped block)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(log_level="DEBUG" if args.verbose else None)

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        if args.stats:
            stats = forest_stats(load_forest(input_path))
            write_json(stats.model_dump(), None)
            return 0

        mode = ZapMode(args.mode)
        options = build_options(args.remove, args.keep_media)

        if mode == ZapMode.SELECTIVE and not options.has_selection() and args.verbose:
            print("Note: no categories selected, nothing will be removed", file=sys.stderr)

        summary = run_zap(
            input_path=input_path,
            mode=mode,
            options=options,
            output_path=Path(args.output) if args.output else None,
            report_path=Path(args.report) if args.report else None,
        )
        print(summary, file=sys.stderr)

    except (OSError, ValueError) as e:
        logger.error("cli_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
