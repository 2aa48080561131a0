"""
Catalog files.

A catalog holds the translations of one category for one language::

    <messagePath>/<language>/<category>.yaml

The file is a YAML mapping ``source text -> translation`` preceded by a
comment header.  An empty translation means "not translated yet".
"""

import glob
import os

import yaml

from .errors import CatalogError

CATALOG_EXTENSION = "yaml"

CATALOG_HEADER = """\
# Message translations.
#
# This file is automatically generated by the message extraction command.
# It contains the localizable messages extracted from source code.
# You may modify this file by translating the extracted messages.
#
# Each mapping entry represents the translation (value) of a message (key).
# If the value is empty, the message is considered as not translated.
# Messages that no longer need translation will have their translations
# enclosed between a pair of '@@' marks.
#
# NOTE: this file must be saved in UTF-8 encoding.
"""


def catalog_path(message_path, language, category):
    return os.path.join(message_path, language,
                        f"{category}.{CATALOG_EXTENSION}")


def discover_categories(message_path, language):
    """Return the sorted category names found for *language*."""
    pattern = os.path.join(glob.escape(os.path.join(message_path, language)),
                           f"*.{CATALOG_EXTENSION}")
    return sorted(
        os.path.splitext(os.path.basename(path))[0]
        for path in glob.glob(pattern)
        if os.path.isfile(path)
    )


def load_catalog(path):
    """Load a catalog file into a ``dict`` of ``str -> str``.

    ``null`` translations load as ``""``.

    Raises:
        CatalogError: if the file is not valid YAML or not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise CatalogError(f"{path} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogError(f"{path} does not contain a mapping of messages")

    messages = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise CatalogError(
                f"{path}: translation of {key!r} must be a string")
        messages[str(key)] = "" if value is None else str(value)
    return messages


def sort_messages(messages):
    """Return *messages* ordered for persistence.

    Untranslated (empty) entries come first, then translated ones; both
    groups are sorted by key.
    """
    ordered = sorted(messages.items())
    empty = [(k, v) for k, v in ordered if v == ""]
    translated = [(k, v) for k, v in ordered if v != ""]
    return dict(empty + translated)


def dump_catalog(messages):
    """Render *messages* as catalog file content (header included)."""
    ordered = sort_messages(messages)
    if ordered:
        body = yaml.safe_dump(
            ordered,
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
            width=1000,
        )
    else:
        body = "{}\n"
    return CATALOG_HEADER + body


def save_catalog(path, messages):
    """Write *messages* to *path*.

    The full content is rendered before the file is opened, so a failure
    while rendering never leaves a truncated catalog behind.
    """
    content = dump_catalog(messages)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path
