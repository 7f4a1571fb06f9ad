"""CLI command that counts words in tagged notes and submits them to Beeminder."""

from pathlib import Path

import click
import structlog

from beecount.notes.note_loader import NoteLoader
from beecount.notes.scanner import find_markdown_files
from beecount.tracking.beeminder_client import BeeminderClient
from beecount.utils.config import Config
from beecount.utils.exceptions import BeecountError, ConfigurationError
from beecount.utils.logger import configure_logging

logger = structlog.get_logger(__name__)

DEFAULT_TAG_PREFIX = "beeminder-"


@click.command()
@click.argument("goal_slug")
@click.argument(
    "folder_path", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--tag-prefix",
    default=DEFAULT_TAG_PREFIX,
    show_default=True,
    help="Prefix joined with the goal slug to form the tag notes must list",
)
def submit_word_count(goal_slug: str, folder_path: Path, tag_prefix: str) -> None:
    """Count words in notes tagged for GOAL_SLUG under FOLDER_PATH and submit the total.

    Notes are selected by the tag <prefix><goal-slug> in their frontmatter
    tags list. The total is posted to the Beeminder goal once per value and
    day; repeating an unchanged submission is a no-op.
    """
    try:
        config = Config()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        click.echo(
            "Please check your .env file and ensure all required variables are set.",
            err=True,
        )
        raise click.Abort() from e

    configure_logging(config.log_level)
    tag = f"{tag_prefix}{goal_slug}"

    click.echo(f'Looking for files with tag "{tag}" in {folder_path}')

    try:
        markdown_files = find_markdown_files(folder_path)
        click.echo(f"Found {len(markdown_files)} markdown files")

        loader = NoteLoader(tag, max_workers=config.max_workers)
        report = loader.tally(markdown_files)

        click.echo(f'Found {report.files_tagged} files with tag "{tag}"')
        for note in report.tagged_notes:
            click.echo(f"{note.path}: {note.word_count} words")
        if report.files_failed:
            click.echo(f"Skipped {report.files_failed} unreadable files", err=True)

        click.echo(f"Total word count: {report.total_words}")

        client = BeeminderClient(
            config.beeminder_api_key,
            base_url=config.beeminder_api_url,
            timeout=config.request_timeout,
        )
        datapoint = client.submit_datapoint(goal_slug, report.total_words)

        if datapoint is None:
            click.echo("Datapoint already exists with this word count for today")
        else:
            click.echo(f"Datapoint submitted successfully (id: {datapoint.id})")

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        raise click.Abort() from None
    except BeecountError as e:
        click.echo(f"Error: {e}", err=True)
        logger.error("submit_word_count_failed", error=str(e), goal_slug=goal_slug)
        raise click.Abort() from e


if __name__ == "__main__":
    submit_word_count()
