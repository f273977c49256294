"""
Text normalization and keyword matching.

Applies the lowercase/whitespace normalization to raw messages and
checks them against keyword sets before a rule is chosen.
"""
import re
from typing import Iterable, Optional

_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """
    Normalize a raw message for keyword matching.

    Lowercases, collapses runs of whitespace into a single space and
    trims both ends. Missing input is treated as an empty string.

    Args:
        text: Raw message text, or None

    Returns:
        Normalized text

    Examples:
        >>> normalize("  My  WiFi\\n is DOWN ")
        'my wifi is down'
        >>> normalize(None)
        ''
    """
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def has_any(text: str, keywords: Iterable[str]) -> bool:
    """
    Check whether any keyword occurs in the text.

    Plain substring containment, so "wifi" also matches inside "mywifi".

    Examples:
        >>> has_any("mywifi is down", ["wifi"])
        True
        >>> has_any("printer jam", ["vpn", "tunnel"])
        False
    """
    return any(k in text for k in keywords)


def first_match(text: str, keywords: Iterable[str]) -> Optional[str]:
    """Return the first keyword (alphabetically) found in the text, if any."""
    for k in sorted(keywords):
        if k in text:
            return k
    return None


def has_any_word(text: str, keywords: Iterable[str]) -> bool:
    """
    Check whether any keyword occurs in the text as a whole word.

    Examples:
        >>> has_any_word("hi there", ["hi"])
        True
        >>> has_any_word("everything is slow", ["hi"])
        False
    """
    return any(re.search(rf"(?<!\w){re.escape(k)}(?!\w)", text) for k in keywords)
