"""
Slug generation for shareable greeting URLs.

A slug is lowercase ASCII letters, digits and single hyphens with no hyphen at
either end. Accented Latin letters are folded to their base letter through
NFKD decomposition; anything else that is not a letter, digit, space or hyphen
is dropped without acting as a separator.
"""

import unicodedata

SEPARATORS = frozenset({" ", "-"})

# Used in URLs when a valid name produces no slug characters at all (e.g. "!!!")
FALLBACK_SLUG = "friend"


def slugify(name: str) -> str:
    """Return the slug for ``name``. ``slugify(slugify(x)) == slugify(x)``."""
    result: list[str] = []
    previous_was_hyphen = False

    for char in unicodedata.normalize("NFKD", name):
        if char.isascii() and char.isalnum():
            result.append(char.lower())
            previous_was_hyphen = False
        elif char in SEPARATORS:
            if not previous_was_hyphen:
                result.append("-")
                previous_was_hyphen = True
        # Everything else is dropped and leaves the separator run untouched

    return "".join(result).strip("-")


def slug_or_fallback(name: str) -> str:
    return slugify(name) or FALLBACK_SLUG
