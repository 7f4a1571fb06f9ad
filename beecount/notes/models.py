"""Data models for note parsing and word-count aggregation."""

from dataclasses import dataclass, field
from pathlib import Path

# Frontmatter field name -> scalar string or flat list of strings
HeaderMapping = dict[str, str | list[str]]


@dataclass(frozen=True)
class SplitDocument:
    """A note split into its frontmatter block and body.

    Attributes:
        header: Raw text between the ``---`` delimiters, None when the note has
            no well-formed frontmatter block
        body: Text after the closing delimiter, or the whole note when
            ``header`` is None
    """

    header: str | None
    body: str


@dataclass
class NoteStats:
    """Per-file result of a tag check and word count.

    Attributes:
        path: Location of the note
        tagged: Whether the note carries the goal tag
        word_count: Words in the stripped body (0 for untagged notes)
    """

    path: Path
    tagged: bool
    word_count: int

    def __post_init__(self) -> None:
        """Validate note data after initialization.

        Raises:
            ValueError: If word count is negative
        """
        if self.word_count < 0:
            raise ValueError("Word count cannot be negative")


@dataclass
class WordCountReport:
    """Aggregate of one scan for a single tag.

    Attributes:
        tag: Tag notes were selected by
        files_scanned: Number of candidate files handed to the loader
        files_failed: Files that could not be read
        notes: Stats for every file that was read
    """

    tag: str
    files_scanned: int = 0
    files_failed: int = 0
    notes: list[NoteStats] = field(default_factory=list)

    @property
    def tagged_notes(self) -> list[NoteStats]:
        """Notes carrying the tag, in path order."""
        return sorted((note for note in self.notes if note.tagged), key=lambda n: n.path)

    @property
    def files_tagged(self) -> int:
        """Number of notes carrying the tag."""
        return sum(1 for note in self.notes if note.tagged)

    @property
    def total_words(self) -> int:
        """Sum of word counts across tagged notes."""
        return sum(note.word_count for note in self.notes if note.tagged)
