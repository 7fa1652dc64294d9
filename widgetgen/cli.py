"""Command-line entry point for widgetgen.

Usage::

    widgetgen ./stock-ticker "Stock Ticker"
    widgetgen ./stock-ticker "Stock Ticker" --no-events --no-news
    python -m widgetgen ./stock-ticker --answers answers.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

from widgetgen.config import GeneratorConfig
from widgetgen.scaffolder import ValidationError, WidgetGenerator
from widgetgen.scaffolder.manifest import EntryKind, rule_names
from widgetgen.utils import load_json, print_error, print_success, print_summary_table

# Answer key -> CLI dest of its --no-* switch.
_TOP_LEVEL_SWITCHES: dict[str, str] = {
    "enablePreferencesSupport": "no_preferences",
    "enableEventsSupport": "no_events",
    "enableDataSourceSupport": "no_data_source",
}

_DATA_SOURCE_SWITCHES: dict[str, str] = {
    "enableQuotesSupport": "no_quotes",
    "enableTimeSeriesSupport": "no_time_series",
    "enableNewsSupport": "no_news",
}

EXIT_IO_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ``widgetgen``."""
    parser = argparse.ArgumentParser(
        prog="widgetgen",
        description="widgetgen -- generate a web-widget project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  widgetgen ./stock-ticker \"Stock Ticker\"\n"
            "  widgetgen ./stock-ticker \"Stock Ticker\" --no-events --no-news\n"
            "  widgetgen ./stock-ticker --answers answers.json\n"
            "\n"
            "Exit codes: 1 for file errors (including an unreadable answers file\n"
            "or a broken template), 2 for invalid answers.\n"
        ),
    )
    parser.add_argument("path", nargs="?", default=".", help="Destination directory (default: .)")
    parser.add_argument("name", nargs="?", default="", help="Widget name")
    parser.add_argument("--description", default=None, help="Widget description")
    parser.add_argument(
        "--answers",
        default=None,
        help="JSON file holding a prompt answer object; switches fill in what it omits",
    )
    for flag, help_text in (
        ("--no-preferences", "Skip the preferences usage example"),
        ("--no-events", "Skip the events usage example"),
        ("--no-data-source", "Skip the data sources usage example"),
        ("--no-quotes", "Skip the quotes data source example"),
        ("--no-time-series", "Skip the time series data source example"),
        ("--no-news", "Skip the news data source example"),
    ):
        parser.add_argument(flag, action="store_false", default=None, help=help_text)
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Alternative template tree (default: the bundled templates)",
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress per-file output")
    return parser


def collect_answers(args: argparse.Namespace, base: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Build the answer object from an optional answers file plus CLI switches.

    Values present in *base* win.  Missing toggles default to enabled, and
    the description defaults to ``"<name> description"``, as the interactive
    prompts would.  Data-source sub-answers are only filled in when
    data-source support is enabled.
    """
    answers = dict(base or {})
    name = str(answers.get("widgetName") or args.name or "")
    if args.name and "widgetName" not in answers:
        answers["widgetName"] = args.name
    if "widgetDescription" not in answers:
        answers["widgetDescription"] = (
            args.description if args.description is not None else f"{name} description"
        )

    for key, dest in _TOP_LEVEL_SWITCHES.items():
        if key not in answers:
            answers[key] = getattr(args, dest) is not False

    if answers["enableDataSourceSupport"]:
        for key, dest in _DATA_SOURCE_SWITCHES.items():
            if key not in answers:
                answers[key] = getattr(args, dest) is not False
    return answers


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``widgetgen`` / ``python -m widgetgen``."""
    args = build_parser().parse_args(argv)

    config = GeneratorConfig.from_env()
    if args.template_dir:
        config = config.model_copy(update={"template_dir": Path(args.template_dir)})
    if args.quiet:
        config = config.model_copy(update={"quiet": True})

    base: Optional[dict[str, Any]] = None
    if args.answers:
        try:
            base = load_json(args.answers)
        except OSError as exc:
            print_error(f"Error: cannot read answers file {args.answers}: {exc}")
            sys.exit(EXIT_IO_ERROR)
        except json.JSONDecodeError as exc:
            print_error(f"Error: answers file {args.answers} is not valid JSON: {exc}")
            sys.exit(EXIT_VALIDATION_ERROR)
        if not isinstance(base, dict):
            print_error(
                f"Error: answers file {args.answers} must hold a JSON object, "
                f"got {type(base).__name__}"
            )
            sys.exit(EXIT_VALIDATION_ERROR)

    answers = collect_answers(args, base)
    generator = WidgetGenerator(config)

    try:
        result = asyncio.run(generator.run(args.path, args.name, answers))
    except ValidationError as exc:
        print_error(f"Error: invalid answers: {exc}")
        sys.exit(EXIT_VALIDATION_ERROR)
    except OSError as exc:
        print_error(f"Error: {exc}")
        sys.exit(EXIT_IO_ERROR)

    rendered = sum(1 for e in result.manifest if e.kind is EntryKind.RENDER)
    print_summary_table(
        {
            "Widget": result.flags.widget_name,
            "Widget id": result.flags.widget_id,
            "Destination": str(result.root),
            "Features": ", ".join(rule_names(result.flags)),
            "Entries": f"{len(result.manifest)} ({rendered} rendered)",
        },
        title="widgetgen",
    )
    print_success(f"Widget '{result.flags.widget_name}' generated in {result.root}")


if __name__ == "__main__":
    main()
