"""Note loader that selects tagged notes and counts their words.

Reads candidate files concurrently, applies the tag check to each and counts
words only in tagged notes, then aggregates the results into a
WordCountReport.
"""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import structlog

from beecount.notes.models import NoteStats, WordCountReport
from beecount.notes.tag_matcher import has_tag
from beecount.notes.word_counter import count_words

logger = structlog.get_logger(__name__)


class NoteLoader:
    """Load Markdown notes and tally words for one tag.

    Example:
        >>> loader = NoteLoader("beeminder-writing")
        >>> report = loader.tally(find_markdown_files("notes"))
        >>> print(f"{report.files_tagged} notes, {report.total_words} words")
    """

    DEFAULT_MAX_WORKERS = 8

    def __init__(self, tag: str, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        """Initialize loader.

        Args:
            tag: Frontmatter tag a note must list to be counted
            max_workers: Thread pool size for reading files
        """
        if not tag or not tag.strip():
            raise ValueError("Tag cannot be empty")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self.tag = tag
        self.max_workers = max_workers
        self.logger = logger.bind(component="note_loader", tag=tag)
        self.files_loaded = 0
        self.files_failed = 0

    def load_file(self, file_path: Path) -> NoteStats | None:
        """Read a single note and compute its stats.

        Args:
            file_path: Path to Markdown file

        Returns:
            NoteStats if the file could be read, None otherwise
        """
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(
                "file_load_error",
                file_path=str(file_path),
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if not has_tag(content, self.tag):
            return NoteStats(path=file_path, tagged=False, word_count=0)

        word_count = count_words(content)
        self.logger.debug("note_counted", file_path=str(file_path), word_count=word_count)
        return NoteStats(path=file_path, tagged=True, word_count=word_count)

    def tally(self, file_paths: Iterable[Path]) -> WordCountReport:
        """Load every file and aggregate word counts for tagged notes.

        Args:
            file_paths: Candidate Markdown files

        Returns:
            WordCountReport covering all files
        """
        paths = list(file_paths)
        report = WordCountReport(tag=self.tag, files_scanned=len(paths))

        self.files_loaded = 0
        self.files_failed = 0

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for stats in executor.map(self.load_file, paths):
                if stats is None:
                    self.files_failed += 1
                    continue
                self.files_loaded += 1
                report.notes.append(stats)

        report.files_failed = self.files_failed

        self.logger.info(
            "tally_complete",
            files_scanned=report.files_scanned,
            files_tagged=report.files_tagged,
            files_failed=report.files_failed,
            total_words=report.total_words,
        )
        return report

    def get_statistics(self) -> dict[str, int]:
        """Get loader statistics.

        Returns:
            Dictionary with files_loaded, files_failed counts
        """
        return {
            "files_loaded": self.files_loaded,
            "files_failed": self.files_failed,
        }
