"""
Run report.

:class:`SyncReport` is handed to the exporter, importer and merger and
collects everything worth telling the user: skipped languages and
categories, missing catalog files, removed keys and kept translations.
Every event is also written to the module logger so the CLI output needs
no extra plumbing.
"""

import logging

logger = logging.getLogger(__name__)


class SyncReport:
    """Collector for per-item events of an export or import run."""

    def __init__(self):
        self.skipped_languages = []
        self.skipped_categories = []
        self.files_read = []
        self.workbooks = []
        self.invalid_categories = []   # (language, category, reason)
        self.empty_sources = []        # (language, category)
        self.invalid_workbooks = []    # (path, reason)
        self.missing_categories = []   # (language, category, path)
        self.invalid_catalogs = []     # (language, category, path, reason)
        self.removed = []              # (language, category, key)
        self.existing = []             # (language, category, key)
        self.updated_catalogs = []

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def skip_language(self, language):
        self.skipped_languages.append(language)
        logger.warning(f"Skipping language {language}.")

    def skip_category(self, category):
        self.skipped_categories.append(category)
        logger.warning(f"Skipping category {category}.")

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def invalid_category(self, language, category, reason):
        self.invalid_categories.append((language, category, reason))
        logger.error(f"Cannot export category '{category}' for language "
                     f"'{language}': {reason} - Skipping")

    def skip_empty_source(self, language, category):
        self.empty_sources.append((language, category))
        logger.warning(f"Skipping empty source text in {language}/{category}")

    def invalid_workbook(self, path, reason):
        self.invalid_workbooks.append((path, reason))
        logger.error(f"Cannot read {path}: {reason} - Skipping")

    def read_file(self, path):
        self.files_read.append(path)
        logger.info(f"Reading {path}")

    def wrote_workbook(self, language, path):
        self.workbooks.append((language, path))
        logger.info(f"Wrote Excel file for {language} to {path}")

    def nothing_to_export(self):
        logger.info("No new translations found")

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def missing_category(self, language, category, path):
        self.missing_categories.append((language, category, path))
        logger.error(f"Category '{category}' not found for language "
                     f"'{language}' ({path}) - Skipping")

    def invalid_catalog(self, language, category, path, reason):
        self.invalid_catalogs.append((language, category, path, reason))
        logger.error(f"Cannot read {path}: {reason} - Skipping")

    def skip_removed(self, language, category, key):
        self.removed.append((language, category, key))
        logger.warning(f"Skipping (removed): {key}")

    def skip_existing(self, language, category, key):
        self.existing.append((language, category, key))
        logger.warning(f"Skipping (exists): {key}")

    def updated_catalog(self, path):
        self.updated_catalogs.append(path)
        logger.info(f"Updated {path}")

    def summary(self):
        """Return event counts, used for the closing log line."""
        return {
            "workbooks": len(self.workbooks),
            "updated": len(self.updated_catalogs),
            "missing": len(self.missing_categories),
            "invalid": (len(self.invalid_catalogs)
                        + len(self.invalid_categories)
                        + len(self.invalid_workbooks)),
            "removed": len(self.removed),
            "existing": len(self.existing),
        }
