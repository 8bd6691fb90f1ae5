"""Aggregate metrics over a deduplicated batch."""

from typing import Optional, Sequence

from mini_etl.models.raw import RawUser
from mini_etl.models.result import NO_DATA, Metrics


def country_of(user: RawUser) -> Optional[str]:
    """location.country, falling back to the nationality code."""
    if user.location is not None and user.location.country:
        return user.location.country
    return user.nat


def build_metrics(rows_in: int, retained: Sequence[RawUser]) -> Metrics:
    """
    Metrics for one batch.
    rows_in counts input records before dedup; retained is the deduplicated list.
    """
    rows_out = len(retained)
    countries = {c for c in (country_of(u) for u in retained) if c}
    last_record = NO_DATA
    if retained:
        last = retained[-1]
        last_record = last.id or last.name or NO_DATA
    return Metrics(
        rows_in=rows_in,
        rows_out=rows_out,
        dedup_removed=rows_in - rows_out,
        countries=len(countries),
        last_record=last_record,
    )
