"""End-to-end tests for the submit workflow.

These tests run the CLI against a real note tree on disk with only the
Beeminder HTTP session mocked.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from beecount.cli.submit import submit_word_count


def ok_response(json_body: dict) -> MagicMock:
    """Build a successful mock response."""
    response = MagicMock()
    response.ok = True
    response.status_code = 200
    response.json.return_value = json_body
    return response


@pytest.fixture
def note_tree(write_note, notes_dir: Path) -> Path:
    """Create a vault with tagged, untagged and non-note files."""
    write_note(
        "journal/day1.md",
        "# Day One\n\nThis is **five** words here.\n",
        title="Day One",
        tags=["beeminder-writing"],
    )
    write_note(
        "drafts/deep/chapter.md",
        "- first point\n- second point\n\n> A quote from [someone](https://example.com)\n",
        tags=["fiction", "beeminder-writing"],
    )
    write_note("other.md", "These words belong to another goal entirely", tags=["journal"])
    write_note("plain.md", "No frontmatter so never counted")
    (notes_dir / "readme.txt").write_text("---\ntags:\n  - beeminder-writing\n---\nignored\n")
    return notes_dir


@pytest.mark.e2e
class TestSubmitWorkflowE2E:
    """End-to-end tests for scanning, counting and submitting."""

    def test_counts_tagged_notes_and_submits_total(
        self, note_tree: Path, beeminder_session: MagicMock
    ) -> None:
        """Test the full pipeline from note tree to datapoint request."""
        beeminder_session.post.return_value = ok_response({"id": "dp-1", "value": 15})

        result = CliRunner().invoke(submit_word_count, ["writing", str(note_tree)])

        assert result.exit_code == 0, result.output
        assert "Found 4 markdown files" in result.output
        assert 'Found 2 files with tag "beeminder-writing"' in result.output
        assert f"{note_tree / 'journal' / 'day1.md'}: 7 words" in result.output
        assert f"{note_tree / 'drafts' / 'deep' / 'chapter.md'}: 8 words" in result.output
        assert "Total word count: 15" in result.output
        assert "Datapoint submitted successfully (id: dp-1)" in result.output

        args, kwargs = beeminder_session.post.call_args
        assert args[0].endswith("/users/me/goals/writing/datapoints.json")
        assert kwargs["params"] == {"auth_token": "e2e-api-key"}
        assert kwargs["json"]["value"] == 15
        assert kwargs["json"]["requestid"].startswith("wordcount-15-")

    def test_resubmission_same_day_is_noop(
        self, note_tree: Path, beeminder_session: MagicMock
    ) -> None:
        """Test that a duplicate response on a re-run still exits cleanly."""
        duplicate = MagicMock()
        duplicate.ok = False
        duplicate.status_code = 422
        duplicate.text = '{"errors":"Duplicate request"}'
        beeminder_session.post.return_value = duplicate

        result = CliRunner().invoke(submit_word_count, ["writing", str(note_tree)])

        assert result.exit_code == 0, result.output
        assert "Datapoint already exists with this word count for today" in result.output

    def test_single_note_scenario(
        self, notes_dir: Path, beeminder_session: MagicMock
    ) -> None:
        """Test a hand-written note whose header line counts as a word."""
        (notes_dir / "note.md").write_text(
            "---\ntags:\n  - beeminder-x\n---\n\n# T\n\nThis is **five** words here.\n"
        )
        beeminder_session.post.return_value = ok_response({"id": "dp-2"})

        result = CliRunner().invoke(submit_word_count, ["x", str(notes_dir)])

        assert result.exit_code == 0, result.output
        assert "Total word count: 6" in result.output
        assert beeminder_session.post.call_args.kwargs["json"]["value"] == 6

    def test_empty_folder_submits_zero(
        self, notes_dir: Path, beeminder_session: MagicMock
    ) -> None:
        """Test that a folder without notes still submits a zero total."""
        beeminder_session.post.return_value = ok_response({})

        result = CliRunner().invoke(submit_word_count, ["writing", str(notes_dir)])

        assert result.exit_code == 0, result.output
        assert "Found 0 markdown files" in result.output
        assert beeminder_session.post.call_args.kwargs["json"]["value"] == 0

    def test_server_error_exits_non_zero(
        self, note_tree: Path, beeminder_session: MagicMock
    ) -> None:
        """Test that a hard API failure is surfaced."""
        failure = MagicMock()
        failure.ok = False
        failure.status_code = 500
        failure.text = "Internal Server Error"
        beeminder_session.post.return_value = failure

        result = CliRunner().invoke(submit_word_count, ["writing", str(note_tree)])

        assert result.exit_code == 1
        assert "Beeminder API error: 500 Internal Server Error" in result.output
