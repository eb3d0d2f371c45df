"""Quickstart example for icuformatter.

This example demonstrates plain substitution, the built-in CLDR handlers
and structured results.
"""

from datetime import date

from icuformatter import MessageFormatter, create_default_handlers

# Example 1: Simple substitution
print("=" * 50)
print("Example 1: Simple Substitution")
print("=" * 50)

formatter = MessageFormatter("en_US")

print(formatter.format("Hello, {name}!", {"name": "Alice"}))
# Output: Hello, Alice!

print(formatter.format("Missing values are empty: [{nothing}]"))
# Output: Missing values are empty: []

# Example 2: Plurals (English)
print("\n" + "=" * 50)
print("Example 2: Plural Forms (English)")
print("=" * 50)

formatter = MessageFormatter("en_US", create_default_handlers())
emails = "You have {count, plural, =0{no emails} one{one email} other{# emails}}."

for count in (0, 1, 1500):
    print(formatter.format(emails, {"count": count}))
# Output: You have no emails.
# Output: You have one email.
# Output: You have 1,500 emails.

# Example 3: Plurals (Latvian, with offset)
print("\n" + "=" * 50)
print("Example 3: Plural Forms (Latvian)")
print("=" * 50)

latvian = MessageFormatter("lv_LV", create_default_handlers())
files = "{n, plural, zero{# failu} one{# fails} other{# faili}}"

for n in (0, 1, 21, 5):
    print(latvian.format(files, {"n": n}))
# Output: 0 failu
# Output: 1 fails
# Output: 21 fails
# Output: 5 faili

guests = (
    "{host} {guests, plural, offset:1 =0{is alone} =1{is with {guest}} "
    "one{is with {guest} and # other} other{is with {guest} and # others}}"
)
print(formatter.format(guests, {"host": "Ada", "guests": 3, "guest": "Bob"}))
# Output: Ada is with Bob and 2 others

# Example 4: Select, numbers and dates
print("\n" + "=" * 50)
print("Example 4: Select, Numbers and Dates")
print("=" * 50)

print(formatter.format(
    "{gender, select, female{She} male{He} other{They}} paid {amount, number, currency/EUR} "
    "on {when, date, long}.",
    {"gender": "female", "amount": 1234.5, "when": date(2024, 3, 5)},
))
# Output: She paid €1,234.50 on March 5, 2024.

# Example 5: Structured results
print("\n" + "=" * 50)
print("Example 5: Structured Results")
print("=" * 50)

result = formatter.process("Hi {name}!", {"name": "Sam"})
print(result)
# Output: Hi Sam!
print(result.items)
# Output: (Leaf(text='Hi '), Leaf(text='Sam'), Sequence(items=(Leaf(text='!'),)))
