"""Beeminder API client for submitting word-count datapoints."""

from datetime import date, datetime, timezone

import requests
import structlog

from beecount.tracking.models import DatapointRequest, DatapointResponse
from beecount.utils.config import DEFAULT_BEEMINDER_API_URL, DEFAULT_TIMEOUT_SECONDS
from beecount.utils.exceptions import BeeminderAPIError, ValidationError

logger = structlog.get_logger(__name__)

DUPLICATE_REQUEST_STATUS = 422
DUPLICATE_REQUEST_MARKER = "Duplicate request"


def build_request_id(value: int, day: date) -> str:
    """Build the idempotency key for a datapoint.

    The same value submitted on the same day always yields the same id.
    """
    return f"wordcount-{value}-{day.isoformat()}"


def today_utc() -> date:
    """Current date in UTC."""
    return datetime.now(timezone.utc).date()


class BeeminderClient:
    """Submit datapoints to a Beeminder goal.

    Submissions carry a request id derived from (value, date), so re-running
    with an unchanged total on the same day is reported by Beeminder as a
    duplicate and treated here as success.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BEEMINDER_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Beeminder personal auth token
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds
            session: Optional requests session (shared connection pool, tests)
        """
        if not api_key:
            raise ValidationError("Beeminder API key cannot be empty")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def datapoints_url(self, goal_slug: str) -> str:
        """URL of a goal's datapoint collection."""
        return f"{self.base_url}/users/me/goals/{goal_slug}/datapoints.json"

    def submit_datapoint(
        self, goal_slug: str, value: int, day: date | None = None
    ) -> DatapointResponse | None:
        """Create a datapoint, or confirm it already exists.

        Args:
            goal_slug: Goal identifier
            value: Word count to record
            day: Date used for the request id (default: today in UTC)

        Returns:
            Created datapoint, or None if Beeminder reported a duplicate request

        Raises:
            ValidationError: If goal slug is empty or value is negative
            BeeminderAPIError: On any other non-success response or transport failure
        """
        if not goal_slug or not goal_slug.strip():
            raise ValidationError("Goal slug cannot be empty")
        if value < 0:
            raise ValidationError(f"Datapoint value cannot be negative: {value}")

        payload = DatapointRequest(
            value=value,
            requestid=build_request_id(value, day or today_utc()),
            comment=f"Word count from beeminder-{goal_slug} tagged files",
        )

        try:
            response = self.session.post(
                self.datapoints_url(goal_slug),
                params={"auth_token": self.api_key},
                json=payload.model_dump(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("datapoint_request_failed", goal_slug=goal_slug, error=str(e))
            raise BeeminderAPIError(
                f"Beeminder request failed: {e}", is_retryable=True
            ) from e

        if not response.ok:
            error_text = response.text

            if (
                response.status_code == DUPLICATE_REQUEST_STATUS
                and DUPLICATE_REQUEST_MARKER in error_text
            ):
                logger.info(
                    "datapoint_already_exists",
                    goal_slug=goal_slug,
                    value=value,
                    requestid=payload.requestid,
                )
                return None

            logger.error(
                "datapoint_submission_failed",
                goal_slug=goal_slug,
                status_code=response.status_code,
                error=error_text,
            )
            raise BeeminderAPIError(
                f"Beeminder API error: {response.status_code} {error_text}",
                status_code=response.status_code,
                is_retryable=response.status_code == 429 or response.status_code >= 500,
            )

        try:
            datapoint = DatapointResponse.model_validate(response.json())
        except ValueError as e:
            # Created anyway; an unreadable echo is not a failure
            logger.warning("datapoint_response_unparsed", goal_slug=goal_slug, error=str(e))
            datapoint = DatapointResponse()

        logger.info(
            "datapoint_submitted",
            goal_slug=goal_slug,
            value=value,
            requestid=payload.requestid,
            datapoint_id=datapoint.id,
        )
        return datapoint
