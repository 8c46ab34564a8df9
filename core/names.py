"""Display-name helpers: trimming, hyphen substitution and HTML escaping."""

import html


def escape_text(text: str) -> str:
    """HTML-escape ``& < > " '`` for safe embedding in markup."""
    return html.escape(text, quote=True)


def clean_name(name: str) -> str:
    """Trim surrounding whitespace and turn hyphens into spaces ("Jane-Doe" -> "Jane Doe")."""
    return name.strip().replace("-", " ")


def display_name(name: str) -> str:
    return escape_text(clean_name(name))
