"""Word counting over note bodies."""

import re

from beecount.notes.frontmatter import split_frontmatter
from beecount.notes.markdown_stripper import strip_markdown

WHITESPACE_PATTERN = re.compile(r"\s+")


def count_words(raw: str) -> int:
    """Count words in a note's body, excluding frontmatter and Markdown syntax.

    Header text, link text and code are counted as prose. Notes without a
    well-formed frontmatter block are counted in full, delimiters included.

    Args:
        raw: Complete file content

    Returns:
        Number of whitespace-separated tokens, 0 for empty or blank input
    """
    body = split_frontmatter(raw).body
    stripped = strip_markdown(body)
    return sum(1 for word in WHITESPACE_PATTERN.split(stripped) if word)
