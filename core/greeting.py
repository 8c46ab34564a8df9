"""
Greeting renderer: ASCII-art Friendship Day card for a single name.

The quote is chosen by the length of the raw, un-normalized name so the same
input always yields the same card.
"""

from core.names import display_name

BANNER = """
   _
 |  _|
 | |_
 |  _|
 |_|ANTASTIC FRIEND ★★★
"""

QUOTES = [
    " Friendship is the compass\n that guides us\n through life's storm",
    " A friend is someone who\n knows all about you\n and still loves you",
    " Friends are the family\n we choose for ourselves",
    " Walking with a friend\n in the dark is better\n than walking alone in the light",
    " True friends are never apart,\n maybe in distance\n but never in heart",
]

PROMPT = " wishes@{name}:~💚$"

# ANSI escapes for terminal output
ANSI_GREEN = "\033[32m"
ANSI_MAGENTA = "\033[35m"
ANSI_BOLD = "\033[1m"
ANSI_RESET = "\033[0m"


def select_quote(raw_name: str) -> str:
    return QUOTES[len(raw_name) % len(QUOTES)]


def render_greeting(raw_name: str, color: bool = False) -> str:
    """Compose the greeting text for ``raw_name``.

    The name is trimmed, de-hyphenated and HTML-escaped once before it is
    placed on the prompt line, so the result is safe inside ``<pre>``.
    With ``color`` the prompt, banner and quote are wrapped in ANSI escapes
    for terminal clients.
    """
    prompt = PROMPT.format(name=display_name(raw_name))
    quote = select_quote(raw_name)
    if not color:
        return f"\n{prompt}{BANNER}{quote}"
    return (
        f"\n{ANSI_BOLD}{ANSI_GREEN}{prompt}{ANSI_RESET}"
        f"{ANSI_MAGENTA}{BANNER}{ANSI_RESET}"
        f"{ANSI_GREEN}{quote}{ANSI_RESET}"
    )
