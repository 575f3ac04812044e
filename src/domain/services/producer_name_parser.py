"""Producer string parser.

Splits the raw producers field of a movie into individual producer names.
Supported separators:
- "John Smith, Jane Doe and Bob Wilson" (comma followed by "and")
- "John Smith and Jane Doe" ("and" between names)
- "John Smith, Jane Doe" (comma, optional whitespace)
"""

import re


# ", and " must come first so the comma and the word go together
_SEPARATOR_PATTERN = re.compile(r",\s*and\s+|\s+and\s+|,\s*")


def parse_producer_names(raw_producers: str) -> list[str]:
    """Split a producers string into individual names.

    Names are trimmed and empty pieces are dropped. Duplicates are kept,
    so a producer credited twice in the same movie is counted twice.

    Args:
        raw_producers: Raw producers string of one movie

    Returns:
        Producer names in the order they appear; empty when nobody is
        credited
    """
    text = raw_producers.strip()
    if not text:
        return []

    return [name.strip() for name in _SEPARATOR_PATTERN.split(text) if name.strip()]
