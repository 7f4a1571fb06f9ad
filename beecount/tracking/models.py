"""Request and response models for the Beeminder datapoints API."""

from pydantic import BaseModel, ConfigDict, Field


class DatapointRequest(BaseModel):
    """Body of a create-datapoint request.

    ``requestid`` makes the call idempotent: Beeminder answers a repeated id
    with a 422 "Duplicate request" instead of adding a second datapoint.
    """

    value: int = Field(ge=0)
    requestid: str
    comment: str


class DatapointResponse(BaseModel):
    """Datapoint as echoed back by Beeminder after creation."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    value: float | None = None
    requestid: str | None = None
    comment: str | None = None
    timestamp: int | None = None
