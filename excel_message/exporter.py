"""
Export catalogs to Excel workbooks.

Reads the catalog files of every selected language / category, keeps the
messages requested by *mode* and writes one workbook per language.
"""

import logging

from .catalog import catalog_path, discover_categories, load_catalog
from .config import check_args
from .reporting import SyncReport
from .selector import Selector
from .workbook import sheet_title_problem, write_workbooks

logger = logging.getLogger(__name__)

MODE_NEW = "new"
MODE_ALL = "all"
MODES = (MODE_NEW, MODE_ALL)


def check_mode(mode):
    if mode not in MODES:
        raise ValueError(
            f"Unknown mode {mode!r}, expected one of {', '.join(MODES)}")
    return mode


def filter_messages(messages, mode):
    """Return the messages of *messages* that *mode* exports."""
    if mode == MODE_NEW:
        return {k: v for k, v in messages.items() if v == ""}
    return dict(messages)


def build_export_set(config, selector=None, mode=MODE_NEW, report=None):
    """Collect the messages to export.

    Every selected category file yields an entry, even if *mode* filters
    out all of its messages; the workbook then gets an empty sheet.
    Categories that are not valid sheet names and empty source texts are
    reported and left out.

    Args:
        config: The :class:`~excel_message.config.RunConfig` of the run.
        selector: Language / category :class:`Selector`.  ``None`` selects
            everything.
        mode: ``"new"`` for untranslated messages only, ``"all"`` for every
            message.
        report: Optional :class:`SyncReport`.

    Returns:
        ``{language: {category: {source: translation}}}``
    """
    check_mode(mode)
    selector = selector or Selector()
    report = report if report is not None else SyncReport()

    export_set = {}
    for language in config.languages:
        if not selector.language_included(language):
            report.skip_language(language)
            continue
        for category in discover_categories(config.message_path, language):
            if not selector.category_included(category):
                report.skip_category(category)
                continue
            problem = sheet_title_problem(category)
            if problem is not None:
                report.invalid_category(language, category, problem)
                continue
            path = catalog_path(config.message_path, language, category)
            report.read_file(path)
            messages = filter_messages(load_catalog(path), mode)
            if "" in messages:
                del messages[""]
                report.skip_empty_source(language, category)
            export_set.setdefault(language, {}).setdefault(
                category, {}).update(messages)
    return export_set


def export_messages(config_path, excel_dir, mode=MODE_NEW, selector=None,
                    line_height=None, report=None):
    """Export catalogs to ``<excel_dir>/<language>.xlsx`` files.

    Returns:
        ``{language: path}`` of the written workbooks; empty when there was
        nothing to export.
    """
    check_mode(mode)
    config = check_args(config_path, excel_dir)
    report = report if report is not None else SyncReport()

    export_set = build_export_set(config, selector, mode, report)
    if not export_set:
        report.nothing_to_export()
        return {}
    count = sum(len(m) for cats in export_set.values() for m in cats.values())
    logger.info(f"Exporting {count} messages for "
                f"{len(export_set)} language(s)")
    return write_workbooks(export_set, excel_dir, line_height, report)
