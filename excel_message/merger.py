"""
Merge imported translations into catalog files.

Rules for every imported ``source -> translation`` pair:

  * **removed** – the source is not in the catalog any more.  It is
    dropped, never re-added.
  * **exists** – the catalog already has a translation and
    ``skip_existing`` is set.  The catalog value is kept.
  * otherwise the imported translation replaces the catalog value.

Catalog entries that were not imported are left alone.
"""

import logging
import os

from .catalog import catalog_path, load_catalog, save_catalog, sort_messages
from .errors import CatalogError
from .reporting import SyncReport

logger = logging.getLogger(__name__)


def merge_messages(existing, translations, skip_existing=False, report=None,
                   language=None, category=None):
    """Return *existing* updated with *translations*.

    *existing* is not modified.  The result is ordered as it is persisted
    (see :func:`~excel_message.catalog.sort_messages`).
    """
    merged = dict(existing)
    for source, translation in translations.items():
        if source not in merged:
            if report is not None:
                report.skip_removed(language, category, source)
        elif merged[source] != "" and skip_existing:
            if report is not None:
                report.skip_existing(language, category, source)
        else:
            merged[source] = translation
    return sort_messages(merged)


def update_catalogs(import_set, config, skip_existing=False, report=None):
    """Merge *import_set* into the catalog files of *config*.

    Each category is handled on its own: a missing or unreadable catalog
    is reported and skipped, the remaining categories are still updated.

    Returns:
        The list of catalog paths that were written.
    """
    report = report if report is not None else SyncReport()
    written = []
    for language, categories in import_set.items():
        logger.info(f"Updating translations for {language}")
        for category, translations in categories.items():
            path = catalog_path(config.message_path, language, category)
            if not os.path.isfile(path):
                report.missing_category(language, category, path)
                continue
            try:
                existing = load_catalog(path)
            except CatalogError as exc:
                report.invalid_catalog(language, category, path, str(exc))
                continue
            logger.debug(f"Updating {path}")
            merged = merge_messages(existing, translations, skip_existing,
                                    report, language, category)
            save_catalog(path, merged)
            report.updated_catalog(path)
            written.append(path)
    return written
