"""Validation, deduplication, and metrics for loaded user batches."""

from .dedupe import dedupe_users, identity_key
from .metrics import build_metrics, country_of
from .processor import process
from .validation import is_valid, normalize_user

__all__ = [
    "build_metrics",
    "country_of",
    "dedupe_users",
    "identity_key",
    "is_valid",
    "normalize_user",
    "process",
]
