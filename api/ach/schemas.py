"""
Pydantic schemas for ACH endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AchPayload(BaseModel):
    # Optional at the type level; presence is checked by the service (400, not 422).
    roomName: str | None = None
    roomVolume: float | None = Field(
        default=None, allow_inf_nan=False, description="Room volume in cubic meters."
    )
    airflowRate: float | None = Field(
        default=None, allow_inf_nan=False, description="Airflow rate in cubic meters per hour."
    )
    ach: float | None = Field(
        default=None, allow_inf_nan=False, description="Air changes per hour, supplied by the caller."
    )


class AchRecord(BaseModel):
    id: int
    roomName: str
    roomVolume: float
    airflowRate: float
    ach: float


class MessageResponse(BaseModel):
    message: str
