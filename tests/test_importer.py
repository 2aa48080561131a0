"""Tests for reading workbooks into import sets and updating catalogs."""

import os
import sys

import pytest
from openpyxl import Workbook

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))

from create_sample_catalogs import create_sample_tree
from excel_message.catalog import catalog_path, load_catalog
from excel_message.errors import ConfigurationError
from excel_message.exporter import MODE_NEW
from excel_message.importer import (
    build_import_set,
    collect_translations,
    find_workbooks,
    import_messages,
)
from excel_message.reporting import SyncReport
from excel_message.selector import Selector


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write_xlsx(path, sheets):
    """Write ``{sheet: [(source, translation), ...]}`` with a header row."""
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(name)
        ws.append(["Source", "Translation"])
        for row in rows:
            ws.append(list(row))
    wb.save(path)
    wb.close()
    return path


@pytest.fixture
def tree(tmp_path):
    return create_sample_tree(str(tmp_path))


# ---------------------------------------------------------------------------
# collect_translations
# ---------------------------------------------------------------------------

def test_blank_translations_not_recorded():
    rows = [("a", None), ("b", ""), ("c", "   "), ("d", "\n\t"), ("e", "E")]
    assert collect_translations(rows) == {"e": "E"}


def test_internal_whitespace_preserved():
    rows = [("a", "two\nlines"), ("b", " padded ")]
    assert collect_translations(rows) == {"a": "two\nlines", "b": " padded "}


def test_values_coerced_to_text():
    assert collect_translations([(2024, 42)]) == {"2024": "42"}


# ---------------------------------------------------------------------------
# build_import_set
# ---------------------------------------------------------------------------

def test_find_workbooks_by_extension(tmp_path):
    _write_xlsx(str(tmp_path / "de.xlsx"), {"app": []})
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    assert find_workbooks(str(tmp_path)) == [str(tmp_path / "de.xlsx")]


def test_import_set_structure(tmp_path):
    _write_xlsx(str(tmp_path / "de.xlsx"), {
        "app": [("Hello", "Hallo"), ("Bye", None)],
        "errors": [("Not found", "   ")],
    })
    _write_xlsx(str(tmp_path / "fr.xlsx"), {"app": [("Hello", "Bonjour")]})
    import_set = build_import_set(str(tmp_path))
    assert import_set == {
        "de": {"app": {"Hello": "Hallo"}},
        "fr": {"app": {"Hello": "Bonjour"}},
    }


def test_scan_stops_at_missing_source(tmp_path):
    _write_xlsx(str(tmp_path / "de.xlsx"), {
        "app": [("Hello", "Hallo"), (None, "lost"), ("Bye", "Tschüss")],
    })
    assert build_import_set(str(tmp_path)) == {
        "de": {"app": {"Hello": "Hallo"}}}


def test_selector_applied(tmp_path):
    _write_xlsx(str(tmp_path / "de.xlsx"), {
        "app": [("Hello", "Hallo")], "errors": [("Oops", "Hoppla")]})
    _write_xlsx(str(tmp_path / "fr.xlsx"), {"app": [("Hello", "Bonjour")]})
    report = SyncReport()
    import_set = build_import_set(
        str(tmp_path),
        selector=Selector(ignore_languages="fr", categories="errors"),
        report=report)
    assert import_set == {"de": {"errors": {"Oops": "Hoppla"}}}
    assert report.skipped_languages == ["fr"]
    assert report.skipped_categories == ["app"]


def test_custom_extension(tmp_path):
    _write_xlsx(str(tmp_path / "fr.xlsx"), {"app": [("Hello", "Bonjour")]})
    assert build_import_set(str(tmp_path), extension="xlsm") == {}
    assert list(build_import_set(str(tmp_path), extension="xlsx")) == ["fr"]


# ---------------------------------------------------------------------------
# import_messages
# ---------------------------------------------------------------------------

def test_import_updates_catalogs(tree):
    config_path, excel_dir, message_path = tree
    _write_xlsx(os.path.join(excel_dir, "de.xlsx"), {
        "app": [("Hello", "Hallo"), ("Bye", "Ciao"), ("Removed", "X")],
    })
    report = import_messages(config_path, excel_dir)
    catalog = load_catalog(catalog_path(message_path, "de", "app"))
    assert catalog == {"Welcome back": "", "Bye": "Ciao", "Hello": "Hallo"}
    assert "Removed" not in catalog
    assert report.removed == [("de", "app", "Removed")]


def test_import_new_mode_keeps_existing(tree):
    config_path, excel_dir, message_path = tree
    _write_xlsx(os.path.join(excel_dir, "de.xlsx"), {
        "app": [("Hello", "Hallo"), ("Bye", "Ciao")],
    })
    report = import_messages(config_path, excel_dir, mode=MODE_NEW)
    catalog = load_catalog(catalog_path(message_path, "de", "app"))
    assert catalog["Bye"] == "Tschüss"
    assert catalog["Hello"] == "Hallo"
    assert report.existing == [("de", "app", "Bye")]


def test_import_excluded_language_untouched(tree):
    config_path, excel_dir, message_path = tree
    _write_xlsx(os.path.join(excel_dir, "fr.xlsx"), {
        "app": [("Bye", "Au revoir")]})
    path = catalog_path(message_path, "fr", "app")
    with open(path, encoding="utf-8") as f:
        before = f.read()
    import_messages(config_path, excel_dir, selector=Selector(languages="de"))
    with open(path, encoding="utf-8") as f:
        assert f.read() == before


def test_import_unknown_category_reported(tree):
    config_path, excel_dir, _ = tree
    _write_xlsx(os.path.join(excel_dir, "de.xlsx"), {
        "missing": [("Hello", "Hallo")]})
    report = import_messages(config_path, excel_dir)
    assert [m[:2] for m in report.missing_categories] == [("de", "missing")]


def test_import_missing_directory(tree):
    config_path, _, _ = tree
    with pytest.raises(ConfigurationError):
        import_messages(config_path, "/nonexistent/excel/dir")


def test_unreadable_workbook_skipped(tree):
    config_path, excel_dir, message_path = tree
    with open(os.path.join(excel_dir, "~$de.xlsx"), "wb") as f:
        f.write(b"\x00owner lock\x00")
    _write_xlsx(os.path.join(excel_dir, "fr.xlsx"), {
        "app": [("Bye", "Au revoir")]})
    report = import_messages(config_path, excel_dir)
    assert [p for p, _ in report.invalid_workbooks] == [
        os.path.join(excel_dir, "~$de.xlsx")]
    catalog = load_catalog(catalog_path(message_path, "fr", "app"))
    assert catalog["Bye"] == "Au revoir"
