"""Recursive discovery of Markdown notes."""

import os
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(root: str | Path) -> list[Path]:
    """Find all ``.md`` files below a directory.

    Directories that cannot be listed (missing, permission denied) are logged
    and skipped; the scan itself never fails.

    Args:
        root: Directory to search recursively

    Returns:
        Sorted list of Markdown file paths
    """
    root_path = Path(root)
    markdown_files: list[Path] = []

    def _on_error(error: OSError) -> None:
        logger.error(
            "directory_scan_failed",
            directory=str(error.filename),
            error=str(error),
            error_type=type(error).__name__,
        )

    for dir_path, _dir_names, file_names in os.walk(root_path, onerror=_on_error):
        for file_name in file_names:
            if os.path.splitext(file_name)[1] == MARKDOWN_SUFFIX:
                markdown_files.append(Path(dir_path) / file_name)

    logger.info("markdown_scan_complete", root=str(root_path), files_found=len(markdown_files))
    return sorted(markdown_files)
