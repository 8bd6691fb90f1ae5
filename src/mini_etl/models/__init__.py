"""Data models for user records, metrics, and run provenance."""

from mini_etl.models.raw import Location, RawUser
from mini_etl.models.result import (
    NO_DATA,
    FallbackDataset,
    Metrics,
    PipelineRun,
    ProcessingResult,
)
from mini_etl.models.user import CleanUser

__all__ = [
    "NO_DATA",
    "CleanUser",
    "FallbackDataset",
    "Location",
    "Metrics",
    "PipelineRun",
    "ProcessingResult",
    "RawUser",
]
