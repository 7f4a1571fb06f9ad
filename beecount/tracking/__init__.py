"""Beeminder goal tracking."""

from beecount.tracking.beeminder_client import BeeminderClient
from beecount.tracking.models import DatapointRequest, DatapointResponse

__all__ = ["BeeminderClient", "DatapointRequest", "DatapointResponse"]
