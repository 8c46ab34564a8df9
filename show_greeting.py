import argparse
import sys

from core.greeting import render_greeting
from core.slug import slug_or_fallback
from core.validation import NameValidationError, validate_name


def greeting(name, color=True, base_url=""):
    """Print the greeting card for ``name``; returns the process exit code."""
    try:
        validate_name(name)
    except NameValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(render_greeting(name, color=color))
    if base_url:
        print(f"\n Web View URL: {base_url.rstrip('/')}/wish/web?name={slug_or_fallback(name)}")
    print()
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print a Friendship Day greeting")
    parser.add_argument("name")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument("--base-url", default="", help="Also print the share URL for this host")
    args = parser.parse_args()
    sys.exit(greeting(args.name, color=not args.no_color, base_url=args.base_url))
