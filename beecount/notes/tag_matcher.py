"""Frontmatter tag matching."""

from beecount.notes.frontmatter import parse_frontmatter, split_frontmatter

TAGS_FIELD = "tags"


def has_tag(raw: str, tag: str) -> bool:
    """Check whether a note lists ``tag`` in its ``tags`` frontmatter list.

    Matching is exact and case-sensitive; ``work`` does not match
    ``beeminder-work``. A scalar ``tags: foo`` value never matches.

    Args:
        raw: Complete file content
        tag: Tag to look for

    Returns:
        True if the tags list contains the tag
    """
    header = split_frontmatter(raw).header
    if header is None:
        return False

    tags = parse_frontmatter(header).get(TAGS_FIELD)
    if not isinstance(tags, list):
        return False
    return tag in tags
