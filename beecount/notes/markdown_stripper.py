"""Markdown syntax stripping for word counting.

The stripper is a fixed sequence of regex substitutions, not a Markdown
parser. Each rule runs once over the output of the previous one, so the
order below determines the result for malformed or nested markup.
``strip_markdown`` is not idempotent: stripping already-stripped text can
remove more, e.g. ``[[t](u)](v)`` becomes ``[t](v)`` and only then ``t``.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class StripRule:
    """One text rewrite step.

    Attributes:
        name: Short identifier used in tests and debugging
        pattern: Compiled pattern to match
        replacement: Substitution template
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        """Rewrite every non-overlapping match in a single pass."""
        return self.pattern.sub(self.replacement, text)


# Order matters: bold before italic so "**x**" isn't split by the single-marker
# rule, and inline code before fenced blocks (which consumes the outer ticks).
STRIP_RULES: tuple[StripRule, ...] = (
    StripRule("header", re.compile(r"^#{1,6}\s+", re.MULTILINE)),
    StripRule("bold_asterisk", re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    StripRule("bold_underscore", re.compile(r"__(.*?)__"), r"\1"),
    StripRule("italic_asterisk", re.compile(r"\*(.*?)\*"), r"\1"),
    StripRule("italic_underscore", re.compile(r"_(.*?)_"), r"\1"),
    StripRule("link", re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),
    StripRule("inline_code", re.compile(r"`([^`]*)`"), r"\1"),
    StripRule("code_block", re.compile(r"```[\s\S]*?```")),
    StripRule("horizontal_rule", re.compile(r"^[-*_]{3,}$", re.MULTILINE)),
    StripRule("bullet_marker", re.compile(r"^\s*[-*+]\s+", re.MULTILINE)),
    StripRule("ordered_marker", re.compile(r"^\s*\d+\.\s+", re.MULTILINE)),
    StripRule("blockquote", re.compile(r"^\s*>\s*", re.MULTILINE)),
)


def strip_markdown(body: str, rules: tuple[StripRule, ...] = STRIP_RULES) -> str:
    """Remove common Markdown syntax, leaving prose.

    Handles headers, bold/italic, links, inline and fenced code, horizontal
    rules, list markers and blockquotes. Word characters and punctuation
    inside words are left alone.

    Args:
        body: Markdown text (frontmatter already removed)
        rules: Rewrite steps to apply, in order

    Returns:
        Plain text
    """
    text = body
    for rule in rules:
        text = rule.apply(text)
    return text

