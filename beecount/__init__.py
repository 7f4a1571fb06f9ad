"""Count words in tagged Markdown notes and report them to Beeminder."""

__version__ = "0.1.0"
