"""
Name validation: rejects greeting names before anything is rendered.

Two checks run in order:
1. Length: 1 to MAX_NAME_LENGTH code points once surrounding whitespace is removed
2. Charset: every code point must belong to an allowed Unicode category

The validator never rewrites its input. Trimming, hyphen substitution and
escaping belong to core.names.
"""

import unicodedata

MAX_NAME_LENGTH = 36

# Letters, numbers, punctuation, space separators, marks, and math/other/modifier symbols.
# Currency symbols (Sc), control and format characters (C*) and line/paragraph
# separators (Zl, Zp) are rejected.
ALLOWED_CATEGORY_PREFIXES = ("L", "N", "P", "M")
ALLOWED_CATEGORIES = frozenset({"Zs", "Sm", "So", "Sk"})


class NameValidationError(ValueError):
    """Raised when a supplied name cannot be used for a greeting."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
        self.message = message


class NameLengthError(NameValidationError):
    """Raised when a name is empty or longer than MAX_NAME_LENGTH."""

    def __init__(self, name: str):
        super().__init__(
            name, f"name length must be between 1 and {MAX_NAME_LENGTH} characters"
        )


class NameCharsetError(NameValidationError):
    """Raised when a name contains a character outside the allowed categories."""

    def __init__(self, name: str, char: str):
        super().__init__(name, "name contains invalid characters")
        self.char = char


class MissingNameError(Exception):
    """Raised when a request carries no name at all."""

    def __init__(self, message: str = "Name is required"):
        super().__init__(message)
        self.message = message


def is_allowed_char(char: str) -> bool:
    category = unicodedata.category(char)
    return category.startswith(ALLOWED_CATEGORY_PREFIXES) or category in ALLOWED_CATEGORIES


def validate_name(name: str) -> str:
    """Validate a raw name. Returns the name unchanged if usable, raises if not."""
    if not 0 < len(name.strip()) <= MAX_NAME_LENGTH:
        raise NameLengthError(name)

    for char in name:
        if not is_allowed_char(char):
            raise NameCharsetError(name, char)

    return name
