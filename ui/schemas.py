from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HeatPoint(BaseModel):
    """One heat-risk data point; wire keys are ``lat``, ``lon``, ``heat_risk``, ``population``."""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    latitude: float = Field(alias="lat", ge=-90, le=90)
    longitude: float = Field(alias="lon", ge=-180, le=180)
    heat_risk: float = Field(ge=0)
    population: int = Field(ge=0)

    def to_row(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
