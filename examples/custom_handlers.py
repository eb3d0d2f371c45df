"""Custom type handler examples for icuformatter.

Type handlers receive the value, the raw format field, the locale, the full
value mapping and a ``recurse`` callback that interprets nested message
syntax with the same formatter.
"""

from collections.abc import Mapping

from icuformatter import MessageFormatter, create_default_handlers, parse_cases
from icuformatter.runtime import Recurse

# Example 1: A handler that ignores its format field
print("=" * 50)
print("Example 1: Simple Handler")
print("=" * 50)


def upper_type_handler(
    value: object, fmt: str, locale: str, values: Mapping[str, object], recurse: Recurse
) -> str:
    return str(value).upper()


formatter = MessageFormatter("en", {"upper": upper_type_handler})
print(formatter.format("Hello, {name, upper}!", {"name": "alice"}))
# Output: Hello, ALICE!

# Example 2: A branch handler built on parse_cases()
print("\n" + "=" * 50)
print("Example 2: Branch Handler")
print("=" * 50)


def bool_type_handler(
    value: object, fmt: str, locale: str, values: Mapping[str, object], recurse: Recurse
) -> object:
    """Choose the 'true' or 'false' case and interpret it."""
    cases = parse_cases(fmt).cases
    return recurse(cases["true" if value else "false"])


registry = create_default_handlers()
registry.register(bool_type_handler)

formatter = MessageFormatter("en", registry)
message = "{online, bool, true{{user} is online} false{{user} was last seen {n, number} days ago}}"
print(formatter.format(message, {"online": True, "user": "Kim"}))
# Output: Kim is online
print(formatter.format(message, {"online": False, "user": "Kim", "n": 3}))
# Output: Kim was last seen 3 days ago

# Example 3: Returning structured values
print("\n" + "=" * 50)
print("Example 3: Structured Handler Output")
print("=" * 50)


def link_type_handler(
    value: object, fmt: str, locale: str, values: Mapping[str, object], recurse: Recurse
) -> object:
    """Wrap the interpreted format in markers a UI renderer could turn into a link."""
    return ["<a>", recurse(fmt), "</a>"]


formatter = MessageFormatter("en", {"link": link_type_handler})
print(formatter.format("Read the {url, link, {title}}.", {"url": "/docs", "title": "docs"}))
# Output: Read the <a>docs</a>.
