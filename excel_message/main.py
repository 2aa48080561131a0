#!/usr/bin/env python
"""
Excel message sync – CLI entry point.

Usage:
    # Write untranslated (or all) messages to <excel_dir>/<language>.xlsx
    python -m excel_message.main export <config.yaml> <excel_dir> [new|all] [--line-height 50]

    # Read translations back from <excel_dir>/*.xlsx into the catalogs
    python -m excel_message.main import <config.yaml> <excel_dir> [xlsx] [all|new]

Both commands take the YAML config that was used to extract the catalogs.
"""

import argparse
import logging
import sys

from excel_message.errors import ConfigurationError
from excel_message.exporter import MODE_ALL, MODE_NEW, MODES, export_messages
from excel_message.importer import import_messages
from excel_message.reporting import SyncReport
from excel_message.selector import LanguageDefault, Selector
from excel_message.workbook import WORKBOOK_EXTENSION

logger = logging.getLogger(__name__)


def setup_logging(level_str: str = "INFO"):
    """Configure logging."""
    level = getattr(logging, level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def _add_selection_options(p):
    p.add_argument(
        "--languages", default=None,
        help="Comma separated list of languages to process "
             "(default: all configured languages)",
    )
    p.add_argument(
        "--categories", default=None,
        help="Comma separated list of categories to process "
             "(default: all categories)",
    )
    p.add_argument(
        "--ignore-languages", default=None,
        help="Comma separated list of languages to ignore. "
             "Ignored if --languages is set",
    )
    p.add_argument(
        "--ignore-categories", default=None,
        help="Comma separated list of categories to ignore. "
             "Ignored if --categories is set",
    )
    p.add_argument(
        "--language-default", default=LanguageDefault.INCLUDE.value,
        choices=[d.value for d in LanguageDefault],
        help="Whether languages are processed when neither --languages "
             "nor --ignore-languages is given (default: include)",
    )
    p.add_argument(
        "--log-level", default="INFO",
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Export translations from message catalogs to Excel "
                    "files and import them back"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # ---- export ----
    p_exp = sub.add_parser(
        "export",
        help="Create Excel files with translations from the catalogs",
    )
    p_exp.add_argument("config_file", help="Path to the message config (.yaml)")
    p_exp.add_argument("excel_dir", help="Output directory for the Excel files")
    p_exp.add_argument(
        "type", nargs="?", default=MODE_NEW, choices=MODES,
        help="Messages to export: 'new' (default) or 'all'",
    )
    p_exp.add_argument(
        "--line-height", type=float, default=None,
        help="Fixed row height for the Excel files (default: auto). "
             "Try values like 50 if LibreOffice shows cramped rows",
    )
    _add_selection_options(p_exp)

    # ---- import ----
    p_imp = sub.add_parser(
        "import",
        help="Update the catalogs with translations from Excel files",
    )
    p_imp.add_argument("config_file", help="Path to the message config (.yaml)")
    p_imp.add_argument("excel_dir", help="Input directory with the Excel files")
    p_imp.add_argument(
        "extension", nargs="?", default=WORKBOOK_EXTENSION,
        help="Excel file extension (default: xlsx)",
    )
    p_imp.add_argument(
        "type", nargs="?", default=MODE_ALL, choices=MODES,
        help="'all' (default) to update everything or 'new' to only fill "
             "in missing translations",
    )
    _add_selection_options(p_imp)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    selector = Selector.from_options(
        languages=args.languages,
        categories=args.categories,
        ignore_languages=args.ignore_languages,
        ignore_categories=args.ignore_categories,
        language_default=args.language_default,
    )
    report = SyncReport()

    try:
        if args.command == "export":
            export_messages(
                args.config_file, args.excel_dir,
                mode=args.type,
                selector=selector,
                line_height=args.line_height,
                report=report,
            )
        elif args.command == "import":
            import_messages(
                args.config_file, args.excel_dir,
                extension=args.extension,
                mode=args.type,
                selector=selector,
                report=report,
            )
    except ConfigurationError as exc:
        logger.error(str(exc))
        return 1

    summary = report.summary()
    logger.info("Done. " + ", ".join(f"{k}: {v}" for k, v in summary.items()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
