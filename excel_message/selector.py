"""
Language / category selection.

A :class:`Selector` decides which languages and categories take part in a
run.  The same selector is used for export and import so both directions
always see the same subset.
"""

from enum import Enum


class LanguageDefault(Enum):
    """What to do with a language when neither list is configured."""
    INCLUDE = "include"
    EXCLUDE = "exclude"


def parse_list(value):
    """Split a comma separated option into a list of names.

    ``None`` stays ``None`` (option not given).  Lists and tuples are
    accepted as-is so the selector can also be built from Python code.
    """
    if value is None:
        return None
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)
    return [str(item).strip() for item in items if str(item).strip()]


class Selector:
    """Include / exclude lists for languages and categories.

    An include-list wins over the matching exclude-list.  Without either
    list every category is included, and languages follow
    *language_default*.
    """

    def __init__(self, languages=None, categories=None,
                 ignore_languages=None, ignore_categories=None,
                 language_default=LanguageDefault.INCLUDE):
        self.languages = parse_list(languages)
        self.categories = parse_list(categories)
        self.ignore_languages = parse_list(ignore_languages)
        self.ignore_categories = parse_list(ignore_categories)
        self.language_default = LanguageDefault(language_default)

    @classmethod
    def from_options(cls, languages=None, categories=None,
                     ignore_languages=None, ignore_categories=None,
                     language_default="include"):
        """Build a selector from CLI style (comma separated) options."""
        return cls(
            languages=languages,
            categories=categories,
            ignore_languages=ignore_languages,
            ignore_categories=ignore_categories,
            language_default=LanguageDefault(language_default),
        )

    def language_included(self, language):
        """Return whether *language* should be processed."""
        if self.languages is not None:
            return language in self.languages
        if self.ignore_languages is not None:
            return language not in self.ignore_languages
        return self.language_default is LanguageDefault.INCLUDE

    def category_included(self, category):
        """Return whether *category* should be processed."""
        if self.categories is not None:
            return category in self.categories
        if self.ignore_categories is not None:
            return category not in self.ignore_categories
        return True

    def __repr__(self):
        return (f"Selector(languages={self.languages}, "
                f"categories={self.categories}, "
                f"ignore_languages={self.ignore_languages}, "
                f"ignore_categories={self.ignore_categories}, "
                f"language_default={self.language_default.value})")
