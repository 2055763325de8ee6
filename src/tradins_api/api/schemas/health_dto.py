from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tradins_api.domain.value_objects import HealthReport


class HealthResponseDTO(BaseModel):
    """Response payload returned by `GET /api/health`."""

    ok: bool = Field(examples=[True])
    status: str = Field(examples=["ok"])
    storage: str = Field(examples=["memory"])
    now: str = Field(examples=["2024-01-01T00:00:00.000Z"])

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_report(cls, report: HealthReport) -> HealthResponseDTO:
        return cls(**report.to_dict())


class ErrorResponseDTO(BaseModel):
    """Error payload used for storage and unexpected server failures."""

    error: str
    message: str
    request_id: str | None = None
    code: str | None = None
