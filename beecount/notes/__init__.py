"""Note parsing: frontmatter, Markdown stripping, tag checks and word counts."""

from beecount.notes.frontmatter import parse_frontmatter, split_frontmatter
from beecount.notes.markdown_stripper import strip_markdown
from beecount.notes.models import HeaderMapping, NoteStats, SplitDocument, WordCountReport
from beecount.notes.note_loader import NoteLoader
from beecount.notes.scanner import find_markdown_files
from beecount.notes.tag_matcher import has_tag
from beecount.notes.word_counter import count_words

__all__ = [
    "HeaderMapping",
    "NoteLoader",
    "NoteStats",
    "SplitDocument",
    "WordCountReport",
    "count_words",
    "find_markdown_files",
    "has_tag",
    "parse_frontmatter",
    "split_frontmatter",
    "strip_markdown",
]
