"""Metrics, provenance, and per-run result models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mini_etl.models.raw import RawUser
from mini_etl.models.user import CleanUser

# Shown as the last record when nothing was retained
NO_DATA = "n/a"


class Metrics(BaseModel):
    """Aggregate counts over one processed batch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rows_in: int = Field(default=0, ge=0, description="Records considered, before dedup")
    rows_out: int = Field(default=0, ge=0, description="Records retained")
    dedup_removed: int = Field(default=0, ge=0, description="rows_in - rows_out")
    countries: int = Field(default=0, ge=0, description="Distinct countries among retained records")
    last_record: str = Field(default=NO_DATA, alias="lastRecord")


class ProcessingResult(BaseModel):
    """Loaded batch plus provenance: where it came from and when."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    users: tuple[RawUser, ...] = ()
    source_url: str = Field(..., alias="sourceUrl")
    fallback_used: bool = Field(..., alias="fallbackUsed")
    fetched_at: datetime = Field(..., alias="fetchedAt")


class FallbackDataset(BaseModel):
    """Bundled demo data used when the live source is unavailable."""

    model_config = ConfigDict(frozen=True)

    pipeline: tuple[str, ...] = ("extract", "transform", "load")
    users: tuple[RawUser, ...] = ()
    metrics: Metrics = Field(default_factory=Metrics)


class PipelineRun(BaseModel):
    """Everything one run publishes: cleaned users, metrics, and provenance."""

    model_config = ConfigDict(frozen=True)

    result: ProcessingResult
    users: tuple[CleanUser, ...] = ()
    metrics: Metrics
    metrics_reused: bool = Field(
        default=False,
        description="Metrics are the bundled fallback metrics, not computed from this batch",
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible payload with camelCase provenance keys."""
        return {
            "users": [u.model_dump(mode="json") for u in self.users],
            "metrics": self.metrics.model_dump(mode="json", by_alias=True),
            "sourceUrl": self.result.source_url,
            "fallbackUsed": self.result.fallback_used,
            "fetchedAt": self.result.fetched_at.isoformat(),
        }
