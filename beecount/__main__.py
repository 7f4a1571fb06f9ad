"""Main entry point: ``python -m beecount GOAL_SLUG FOLDER_PATH``."""

from beecount.cli.submit import submit_word_count


def main() -> None:
    """Run the submit command with process arguments."""
    submit_word_count(prog_name="beecount")


if __name__ == "__main__":
    main()
