"""E2E test fixtures and configuration."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def beeminder_session(monkeypatch: pytest.MonkeyPatch) -> Iterator[MagicMock]:
    """Replace the HTTP session used by the Beeminder client.

    Yields:
        The mock session instance; set ``post.return_value`` per test
    """
    monkeypatch.setenv("BEEMINDER_API_KEY", "e2e-api-key")
    monkeypatch.delenv("BEEMINDER_API_URL", raising=False)
    monkeypatch.delenv("BEECOUNT_MAX_WORKERS", raising=False)

    with (
        patch("beecount.utils.config.load_dotenv"),
        patch("beecount.cli.submit.configure_logging"),
        patch("beecount.tracking.beeminder_client.requests.Session") as session_class,
    ):
        yield session_class.return_value
