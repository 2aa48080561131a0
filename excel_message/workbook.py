"""
Workbook reading and writing.

One workbook per language, one sheet per category.  Row 1 holds the
``Source`` / ``Translation`` header, every further row one message with
the source text in column A and the translation in column B.

Sheet names are limited by Excel: at most 31 characters and none of
``[ ] : * ? / \\``.  Categories that break these rules cannot be exported
(see :func:`sheet_title_problem`).  Empty source texts are not written
either, because an empty cell ends the sheet when it is read back.
"""

import logging
import os

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Font
from openpyxl.workbook.child import INVALID_TITLE_REGEX

logger = logging.getLogger(__name__)

WORKBOOK_EXTENSION = "xlsx"
HEADER = ("Source", "Translation")
COLUMN_WIDTH = 60
MAX_SHEET_TITLE = 31

_HEADER_FONT = Font(bold=True)
_WRAP = Alignment(wrap_text=True)


def sheet_title_problem(title):
    """Return why *title* cannot be a sheet name, or ``None`` if it can."""
    if not title:
        return "sheet names cannot be empty"
    if INVALID_TITLE_REGEX.search(title):
        return "sheet names cannot contain any of [ ] : * ? / \\"
    if len(title) > MAX_SHEET_TITLE:
        return f"sheet names are limited to {MAX_SHEET_TITLE} characters"
    return None


def _write_text(ws, row, column, value):
    """Write *value* as a text cell, so ``=...`` never becomes a formula."""
    cell = ws.cell(row=row, column=column, value=value)
    cell.data_type = "s"
    return cell


def _write_sheet(ws, messages, line_height=None):
    ws.column_dimensions["A"].width = COLUMN_WIDTH
    ws.column_dimensions["B"].width = COLUMN_WIDTH

    for ci, title in enumerate(HEADER, 1):
        _write_text(ws, 1, ci, title).font = _HEADER_FONT

    row = 2
    for source, translation in messages.items():
        if source == "":
            continue
        _write_text(ws, row, 1, source).alignment = _WRAP
        if translation != "":
            _write_text(ws, row, 2, translation).alignment = _WRAP
        # Fixed heights work around LibreOffice ignoring automatic ones.
        if line_height is not None:
            ws.row_dimensions[row].height = line_height
        row += 1


def write_workbook(categories, path, line_height=None):
    """Write one workbook with a sheet per category.

    Args:
        categories: ``{category: {source: translation}}`` in sheet order.
        path: Output ``.xlsx`` path.
        line_height: Fixed row height, or ``None`` for automatic heights.

    Returns:
        The path of the written workbook.
    """
    wb = Workbook()
    # Sheet names compare case-insensitively, so the default "Sheet" must
    # go before a category of that name is added.
    wb.remove(wb.active)

    for category, messages in categories.items():
        ws = wb.create_sheet(title=category)
        _write_sheet(ws, messages, line_height)

    if not wb.sheetnames:
        wb.create_sheet()
    wb.active = 0

    wb.save(path)
    wb.close()
    return path


def write_workbooks(export_set, excel_dir, line_height=None, report=None):
    """Write ``<language>.xlsx`` into *excel_dir* for every language.

    Returns:
        ``{language: path}`` of the written files.
    """
    written = {}
    for language, categories in export_set.items():
        path = os.path.join(excel_dir, f"{language}.{WORKBOOK_EXTENSION}")
        logger.debug(f"Writing Excel file for {language} to {path}")
        write_workbook(categories, path, line_height)
        written[language] = path
        if report is not None:
            report.wrote_workbook(language, path)
    return written


def iter_sheet_rows(ws):
    """Yield ``(source, translation)`` cell values from row 2 onwards.

    The scan stops at the first row whose column A cell is empty
    (``None``); an empty string in column A does not stop it.
    """
    for source, translation in ws.iter_rows(min_row=2, max_col=2,
                                            values_only=True):
        if source is None:
            break
        yield source, translation


def read_workbook(path):
    """Read all sheets of the workbook at *path*.

    Returns:
        ``[(sheet_name, [(source, translation), ...]), ...]`` in sheet order.
    """
    wb = load_workbook(path)
    try:
        return [
            (sheet_name, list(iter_sheet_rows(wb[sheet_name])))
            for sheet_name in wb.sheetnames
        ]
    finally:
        wb.close()
