"""Built-in type handlers with CLDR-backed locale data.

These are ordinary TypeHandler implementations. MessageFormatter never
registers them on its own; opt in with create_default_handlers() or pick
individual handlers:

    formatter = MessageFormatter("en", create_default_handlers())
    formatter.format("{n, plural, one{# file} other{# files}}", {"n": 3})
    # -> '3 files'

Handlers:
    plural          ``{n, plural, [offset:k] =0{...} one{...} other{...}}``
    selectordinal   ``{n, selectordinal, one{#st} two{#nd} few{#rd} other{#th}}``
    select          ``{g, select, female{...} male{...} other{...}}``
    number          ``{n, number}``, ``{n, number, integer}``,
                    ``{n, number, percent}``, ``{n, number, currency/EUR}``,
                    or ``{n, number, <Babel pattern>}``
    date / time     ``{d, date, short|medium|long|full|<Babel pattern>}``

In plural and selectordinal case bodies, every '#' outside nested braces is
replaced by the locale-formatted number (minus the offset).

Python 3.11+. Uses Babel for i18n.
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

from babel.dates import format_date, format_time
from babel.numbers import format_currency, format_decimal, format_percent

from icuformatter.constants import CLOSE_BRACE, OPEN_BRACE, OTHER_CASE
from icuformatter.diagnostics import ErrorTemplate, MessageFormatError, MissingCaseError
from icuformatter.locale_utils import resolve_babel_locale
from icuformatter.syntax import CaseSet, parse_cases

from .handlers import HandlerRegistry, Recurse
from .plural_rules import PluralKind, select_category
from .result import Result

__all__ = [
    "create_default_handlers",
    "date_type_handler",
    "number_type_handler",
    "plural_type_handler",
    "select_type_handler",
    "selectordinal_type_handler",
    "time_type_handler",
]

logger = logging.getLogger(__name__)

_NUMBER_SIGN = "#"

# pylint: disable=redefined-builtin
# Reason: the handler contract names its second parameter 'format'


def plural_type_handler(
    value: object,
    format: str,
    locale: str,
    values: Mapping[str, object],
    recurse: Recurse,
) -> Result:
    """Choose a case by CLDR plural category.

    Candidates are tried in order: ``=N`` (exact match on the value before
    the offset), the CLDR category of ``value - offset``, then ``other``.

    Raises:
        MissingCaseError: If no candidate case exists
        MessageFormatError: If the offset argument is not a number
    """
    return _numbered_case(PluralKind.CARDINAL, value, format, locale, recurse)


def selectordinal_type_handler(
    value: object,
    format: str,
    locale: str,
    values: Mapping[str, object],
    recurse: Recurse,
) -> Result:
    """Choose a case by CLDR ordinal category (``one`` for 1st, ``two`` for 2nd ...)."""
    return _numbered_case(PluralKind.ORDINAL, value, format, locale, recurse)


def select_type_handler(
    value: object,
    format: str,
    locale: str,
    values: Mapping[str, object],
    recurse: Recurse,
) -> Result:
    """Choose the case whose label equals the value, else ``other``.

    Labels are compared with ``str(value)``, except that booleans use the
    lowercase ``true``/``false`` labels.

    Raises:
        MissingCaseError: If neither the value's case nor ``other`` exists
    """
    case_set = parse_cases(format)
    candidates = (_select_label(value), OTHER_CASE)
    label, body = _select_case("select", case_set, candidates)
    logger.debug("select chose case '%s' for %r", label, value)
    return recurse(body)


def number_type_handler(
    value: object,
    format: str,
    locale: str,
    values: Mapping[str, object],
    recurse: Recurse,
) -> str:
    """Format a number with locale-specific separators.

    Styles: "" (decimal), "integer", "percent", "currency/<ISO code>", or
    any Babel number pattern such as ``"#,##0.00"``. A missing value
    formats as the empty string.

    Raises:
        MessageFormatError: If the value is not numeric
    """
    if value == "":
        return ""
    number = _to_number(value)
    if number is None:
        raise MessageFormatError(
            ErrorTemplate.invalid_argument("number", str(value), "not a number")
        )

    babel_locale = resolve_babel_locale(locale)
    style = format.strip()
    if not style:
        return format_decimal(number, locale=babel_locale)
    if style == "integer":
        return format_decimal(number, format="#,##0", locale=babel_locale)
    if style == "percent":
        return format_percent(number, locale=babel_locale)
    if style.startswith("currency"):
        currency = style.partition("/")[2].strip()
        if not currency:
            raise MessageFormatError(
                ErrorTemplate.invalid_argument("number", style, "expected currency/<code>")
            )
        return format_currency(number, currency.upper(), locale=babel_locale)
    return format_decimal(number, format=style, locale=babel_locale)


def date_type_handler(
    value: object,
    format: str,
    locale: str,
    values: Mapping[str, object],
    recurse: Recurse,
) -> str:
    """Format a date or datetime (default style: medium).

    Raises:
        MessageFormatError: If the value is not a date or datetime
    """
    if value == "":
        return ""
    if not isinstance(value, date):
        raise MessageFormatError(
            ErrorTemplate.invalid_argument("date", str(value), "expected date or datetime")
        )
    return format_date(
        value, format=format.strip() or "medium", locale=resolve_babel_locale(locale)
    )


def time_type_handler(
    value: object,
    format: str,
    locale: str,
    values: Mapping[str, object],
    recurse: Recurse,
) -> str:
    """Format a time or datetime (default style: medium).

    Raises:
        MessageFormatError: If the value is not a time or datetime
    """
    if value == "":
        return ""
    if not isinstance(value, (time, datetime)):
        raise MessageFormatError(
            ErrorTemplate.invalid_argument("time", str(value), "expected time or datetime")
        )
    return format_time(
        value, format=format.strip() or "medium", locale=resolve_babel_locale(locale)
    )


# pylint: enable=redefined-builtin


def create_default_handlers() -> HandlerRegistry:
    """Create a registry with every built-in handler.

    Each call returns a fresh registry, so callers can add or replace
    handlers without affecting other formatters.

    Example:
        >>> create_default_handlers().list_handlers()
        ['plural', 'selectordinal', 'select', 'number', 'date', 'time']
    """
    registry = HandlerRegistry()
    for handler in (
        plural_type_handler,
        selectordinal_type_handler,
        select_type_handler,
        number_type_handler,
        date_type_handler,
        time_type_handler,
    ):
        registry.register(handler)
    return registry


def _numbered_case(
    kind: PluralKind,
    value: object,
    format: str,  # pylint: disable=redefined-builtin
    locale: str,
    recurse: Recurse,
) -> Result:
    """Shared implementation of plural and selectordinal."""
    name = str(kind)
    case_set = parse_cases(format)
    offset = _offset(name, case_set)
    number = _to_number(value)

    if number is None:
        # Missing or non-numeric values only ever match 'other'
        logger.debug("%s value %r is not numeric, using '%s'", name, value, OTHER_CASE)
        label, body = _select_case(name, case_set, (OTHER_CASE,))
        return recurse(body)

    adjusted = number - offset
    candidates = (f"={_exact_label(number)}", select_category(adjusted, locale, kind), OTHER_CASE)
    label, body = _select_case(name, case_set, candidates)
    logger.debug("%s chose case '%s' for %s", name, label, number)
    return recurse(_replace_number_sign(body, _format_number(adjusted, locale)))


def _select_case(name: str, case_set: CaseSet, candidates: tuple[str, ...]) -> tuple[str, str]:
    selected = case_set.select(*candidates)
    if selected is None:
        raise MissingCaseError(ErrorTemplate.case_not_found(name, candidates), handler=name)
    return selected


def _select_label(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _offset(name: str, case_set: CaseSet) -> int | Decimal:
    raw = case_set.argument("offset")
    if raw is None:
        return 0
    offset = _to_number(raw)
    if offset is None:
        raise MessageFormatError(
            ErrorTemplate.invalid_argument(name, f"offset:{raw}", "offset must be a number")
        )
    return offset


def _to_number(value: object) -> int | Decimal | None:
    """Coerce a value to int or Decimal; None when it is not numeric.

    Floats go through ``str()`` so 1.1 becomes Decimal("1.1"), not its
    binary expansion.
    """
    match value:
        case bool():
            return None
        case int():
            return value
        case Decimal():
            return value if value.is_finite() else None
        case float():
            value = str(value)
        case str():
            value = value.strip()
        case _:
            return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return int(number) if number == number.to_integral_value() and "." not in value else number


def _exact_label(number: int | Decimal) -> str:
    """Render a number the way ``=N`` labels spell it (``=1``, ``=1.5``)."""
    if number == int(number):
        return str(int(number))
    return str(Decimal(number).normalize())


def _format_number(number: int | Decimal, locale: str) -> str:
    return format_decimal(number, locale=resolve_babel_locale(locale))


def _replace_number_sign(body: str, replacement: str) -> str:
    """Replace '#' characters that sit outside nested braces."""
    if _NUMBER_SIGN not in body:
        return body
    parts: list[str] = []
    depth = 0
    for char in body:
        if char == OPEN_BRACE:
            depth += 1
        elif char == CLOSE_BRACE:
            # A stray '}' is literal text and must not hide later signs
            depth = max(depth - 1, 0)
        elif char == _NUMBER_SIGN and depth == 0:
            parts.append(replacement)
            continue
        parts.append(char)
    return "".join(parts)

