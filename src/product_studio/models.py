"""Request bodies accepted by the HTTP API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScanRequest(BaseModel):
    platforms: list[str] = Field(
        ...,
        description="Platform identifiers to scan, e.g. ['amazon', 'etsy']. Unknown values match nothing.",
    )


class TrendIn(BaseModel):
    """A trend as returned by the scanner; only the first three fields are required."""

    model_config = ConfigDict(extra="ignore")

    productType: str = Field(..., min_length=1)
    keywords: list[str]
    averagePrice: float = Field(..., ge=0, allow_inf_nan=False)
    # informational only; passed through untouched
    searchVolume: Optional[float] = None
    competition: Optional[float] = None
    buyingIntent: Optional[float] = None
    salesVelocity: Optional[float] = None
    opportunityScore: Optional[float] = None
    platform: Optional[str] = None

    def as_trend(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class GenerateRequest(BaseModel):
    trend: TrendIn
