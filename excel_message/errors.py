"""Exceptions raised by the export / import commands."""


class ExcelMessageError(Exception):
    """Base class for all errors raised by :mod:`excel_message`."""


class ConfigurationError(ExcelMessageError):
    """The message config or the command arguments are unusable.

    Always fatal: raised before any catalog or workbook is touched.
    """


class CatalogError(ExcelMessageError):
    """A catalog file does not contain a mapping of messages."""
