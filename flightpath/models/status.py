"""Service status models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StatusResponse(BaseModel):
    """Snapshot of poller health returned by the status endpoint."""

    status: str = Field(..., description="Overall service status")
    uptime_seconds: int = Field(..., description="Seconds since the service started")
    last_update_timestamp: Optional[datetime] = Field(
        default=None, description="When the flight list was last published (UTC)"
    )
    flight_count: int = Field(..., description="Number of flights currently served")
    provider: str = Field(..., description="Configured flight data provider")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


__all__ = ["StatusResponse"]
