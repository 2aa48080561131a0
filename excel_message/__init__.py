"""Excel message sync.

Moves human translations between YAML message catalogs and Excel
workbooks that translators can edit:

  * **export** – one workbook per language, one sheet per category,
    source text in column A and translation in column B.
  * **import** – reads the edited workbooks back and merges the
    translations into the catalogs.  Messages removed from a catalog
    since the export are never re-added, and with ``mode="new"``
    existing translations are kept.
"""

from .config import RunConfig, check_args, load_config
from .errors import CatalogError, ConfigurationError, ExcelMessageError
from .exporter import MODE_ALL, MODE_NEW, build_export_set, export_messages
from .importer import build_import_set, import_messages
from .merger import merge_messages, update_catalogs
from .reporting import SyncReport
from .selector import LanguageDefault, Selector

__all__ = [
    "RunConfig",
    "check_args",
    "load_config",
    "CatalogError",
    "ConfigurationError",
    "ExcelMessageError",
    "MODE_ALL",
    "MODE_NEW",
    "build_export_set",
    "export_messages",
    "build_import_set",
    "import_messages",
    "merge_messages",
    "update_catalogs",
    "SyncReport",
    "LanguageDefault",
    "Selector",
]
