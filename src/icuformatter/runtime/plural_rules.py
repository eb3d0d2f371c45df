"""CLDR plural categories for the plural and selectordinal handlers.

Python 3.11+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal
from enum import StrEnum

from icuformatter.locale_utils import resolve_babel_locale

__all__ = ["PluralKind", "select_category"]


class PluralKind(StrEnum):
    """Which CLDR rule set to apply.

    StrEnum members are their handler names: str(PluralKind.ORDINAL) == "selectordinal"
    """

    CARDINAL = "plural"
    """Quantities: 1 file, 2 files"""

    ORDINAL = "selectordinal"
    """Positions: 1st, 2nd, 3rd"""


def select_category(n: int | Decimal, locale: str, kind: PluralKind) -> str:
    """Return the CLDR category (zero, one, two, few, many, other) of ``n``.

    Unknown locales use the en_US rules (see resolve_babel_locale()).

    Examples:
        >>> select_category(5, "ru_RU", PluralKind.CARDINAL)
        'many'
        >>> select_category(22, "en", PluralKind.ORDINAL)
        'two'
    """
    babel_locale = resolve_babel_locale(locale)
    rule = babel_locale.ordinal_form if kind is PluralKind.ORDINAL else babel_locale.plural_form
    return rule(n)
