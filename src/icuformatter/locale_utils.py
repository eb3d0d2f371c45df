"""Locale lookup for the CLDR-backed handlers.

MessageFormatter itself never inspects its locale; it hands the string to
type handlers unchanged. The built-in handlers resolve it here into a Babel
Locale, falling back to en_US (with a warning, once per code) when Babel
does not know it.

Python 3.11+. Depends on Babel for CLDR data.
"""

import functools
import locale as locale_module
import logging
import os

from babel import Locale
from babel.core import UnknownLocaleError

from icuformatter.constants import MAX_LOCALE_CACHE_SIZE

__all__ = [
    "FALLBACK_LOCALE",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "resolve_babel_locale",
]

logger = logging.getLogger(__name__)

FALLBACK_LOCALE: str = "en_US"

# Values of LANG and friends that name no real language
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Turn a BCP-47 or POSIX environment code into Babel's form.

    Hyphens become underscores; an encoding (``.UTF-8``) or modifier
    (``@euro``) suffix is dropped.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.partition(".")[0].partition("@")[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse ``locale_code`` into a Babel Locale, cached per code.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the code is malformed
    """
    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def resolve_babel_locale(locale_code: str) -> Locale:
    """Like get_babel_locale(), but never fails.

    Unknown or malformed codes resolve to FALLBACK_LOCALE. The warning is
    logged once per code because the result is cached.
    """
    try:
        return get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
        return get_babel_locale(FALLBACK_LOCALE)


def _system_locale_candidates() -> list[str]:
    """Locale codes the host advertises, most specific first."""
    candidates: list[str] = []
    try:
        code = locale_module.getlocale()[0]
    except ValueError:
        code = None
    if code:
        candidates.append(code)
    candidates.extend(os.environ.get(var, "") for var in ("LC_ALL", "LC_MESSAGES", "LANG"))
    return candidates


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the host locale.

    Checks ``locale.getlocale()``, then the LC_ALL, LC_MESSAGES and LANG
    environment variables, skipping the ``C``/``POSIX`` pseudo-locales.

    Args:
        raise_on_failure: Raise instead of returning FALLBACK_LOCALE when
            nothing usable is found

    Returns:
        Normalized locale code, e.g. ``"lv_LV"``

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set
    """
    for candidate in _system_locale_candidates():
        code = normalize_locale(candidate)
        if code not in _PSEUDO_LOCALES:
            return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)
    return FALLBACK_LOCALE
