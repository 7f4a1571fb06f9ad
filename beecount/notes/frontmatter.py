"""Frontmatter splitting and tolerant field parsing for Markdown notes.

Only the subset of YAML that notes use for tagging is understood: flat
``key: value`` scalars and one-level ``- item`` sequences under a bare
``key:`` line. Anything else is skipped or kept as a plain string. Neither
function raises; malformed input degrades to "no frontmatter" or an empty
mapping so one bad note cannot abort a batch scan.
"""

import re

from beecount.notes.models import HeaderMapping, SplitDocument

# Opening delimiter at offset 0, first "\n---\n" after it closes the block
FRONTMATTER_PATTERN = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)

LIST_ITEM_MARKER = "- "


def split_frontmatter(raw: str) -> SplitDocument:
    """Split note text into frontmatter and body.

    Args:
        raw: Complete file content

    Returns:
        SplitDocument with the header text between the delimiter lines, or
        ``header=None`` and the unchanged text as body when there is no
        well-formed block
    """
    match = FRONTMATTER_PATTERN.match(raw)
    if match is None:
        return SplitDocument(header=None, body=raw)
    return SplitDocument(header=match.group(1), body=match.group(2))


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


class FrontmatterParser:
    """Single-pass, line-oriented parser state for one frontmatter block.

    Holds the key currently being filled and the list items collected for
    it. A parser instance is owned by one ``parse_frontmatter`` call.
    """

    def __init__(self) -> None:
        self.fields: HeaderMapping = {}
        self.current_key: str | None = None
        self.in_list = False
        self.pending_items: list[str] = []

    def feed(self, line: str) -> None:
        """Consume one line of the header block."""
        trimmed = line.strip()
        if not trimmed:
            return

        if trimmed.startswith(LIST_ITEM_MARKER):
            # Orphan items with no owning key are dropped
            if self.in_list:
                self.pending_items.append(trimmed[len(LIST_ITEM_MARKER) :].strip())
            return

        if ":" in trimmed:
            self._commit_list()

            key, _, rest = trimmed.partition(":")
            self.current_key = key.strip()
            value = rest.strip()

            if value:
                self.fields[self.current_key] = strip_quotes(value)
                self.in_list = False
            else:
                self.in_list = True
                self.pending_items = []

    def close(self) -> HeaderMapping:
        """Finish parsing and return the collected fields."""
        self._commit_list()
        return self.fields

    def _commit_list(self) -> None:
        if self.in_list and self.current_key is not None:
            self.fields[self.current_key] = self.pending_items
            self.pending_items = []
            self.in_list = False


def parse_frontmatter(header_text: str) -> HeaderMapping:
    """Parse a frontmatter block into a flat mapping.

    Scalars stay strings (no bool/number coercion). A key with nothing after
    the colon becomes a list, empty if no ``- item`` lines follow it. Later
    keys overwrite earlier ones.

    Args:
        header_text: Text between the ``---`` delimiter lines

    Returns:
        Mapping of field name to string or list of strings, empty if nothing
        usable was found
    """
    parser = FrontmatterParser()
    for line in header_text.split("\n"):
        parser.feed(line)
    return parser.close()
