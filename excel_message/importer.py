"""
Import translations from Excel workbooks.

The workbooks must have the layout written by the exporter: one file per
language named after the language code, one sheet per category, source
text in column A, translation in column B and a header in row 1.
"""

import glob
import logging
import os
from zipfile import BadZipFile

from openpyxl.utils.exceptions import InvalidFileException

from .config import check_args
from .exporter import MODE_ALL, MODE_NEW, check_mode
from .merger import update_catalogs
from .reporting import SyncReport
from .selector import Selector
from .workbook import WORKBOOK_EXTENSION, read_workbook

logger = logging.getLogger(__name__)


def find_workbooks(excel_dir, extension=WORKBOOK_EXTENSION):
    """Return the sorted ``*.<extension>`` files in *excel_dir*."""
    pattern = os.path.join(glob.escape(excel_dir), f"*.{extension}")
    return sorted(p for p in glob.glob(pattern) if os.path.isfile(p))


def collect_translations(rows):
    """Return ``{source: translation}`` for rows with a translation.

    Translations that are blank after stripping are left out entirely;
    all others are kept exactly as they appear in the cell.
    """
    translations = {}
    for source, translation in rows:
        translation = "" if translation is None else str(translation)
        if translation.strip() != "":
            translations[str(source)] = translation
    return translations


def build_import_set(excel_dir, extension=WORKBOOK_EXTENSION, selector=None,
                     report=None):
    """Read the translations of all selected workbooks.

    Returns:
        ``{language: {category: {source: translation}}}``.  Languages and
        categories without any translation are not included.  Files that
        cannot be opened as workbooks (e.g. Excel's ``~$`` lock files) are
        reported and skipped.
    """
    selector = selector or Selector()
    report = report if report is not None else SyncReport()

    import_set = {}
    for path in find_workbooks(excel_dir, extension):
        language = os.path.splitext(os.path.basename(path))[0]
        if not selector.language_included(language):
            report.skip_language(language)
            continue
        report.read_file(path)
        try:
            sheets = read_workbook(path)
        except (BadZipFile, InvalidFileException, OSError) as exc:
            report.invalid_workbook(path, str(exc) or type(exc).__name__)
            continue
        for category, rows in sheets:
            if not selector.category_included(category):
                report.skip_category(category)
                continue
            translations = collect_translations(rows)
            logger.debug(f"{language}/{category}: "
                         f"{len(translations)} translation(s)")
            if translations:
                import_set.setdefault(language, {}).setdefault(
                    category, {}).update(translations)
    return import_set


def import_messages(config_path, excel_dir, extension=WORKBOOK_EXTENSION,
                    mode=MODE_ALL, selector=None, report=None):
    """Update catalog files from the workbooks in *excel_dir*.

    With ``mode="new"`` only untranslated catalog entries are filled in;
    ``"all"`` (default) also overwrites existing translations.

    Returns:
        The :class:`SyncReport` of the run.
    """
    check_mode(mode)
    config = check_args(config_path, excel_dir)
    report = report if report is not None else SyncReport()

    import_set = build_import_set(excel_dir, extension, selector, report)
    if not import_set:
        logger.info(f"No translations found in {excel_dir}")
    update_catalogs(import_set, config, skip_existing=mode == MODE_NEW,
                    report=report)
    return report
