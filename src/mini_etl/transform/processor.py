"""Transform stage: validate, deduplicate, and summarize a raw batch."""

from typing import Sequence

from mini_etl.models.raw import RawUser
from mini_etl.models.result import Metrics
from mini_etl.models.user import CleanUser

from .dedupe import dedupe_users
from .metrics import build_metrics
from .validation import is_valid, normalize_user


def _to_clean(user: RawUser) -> CleanUser:
    normalized = normalize_user(user)
    data = normalized.model_dump(exclude={"valid"})
    return CleanUser(**data, valid=is_valid(normalized))


def process(raw_users: Sequence[RawUser]) -> tuple[list[CleanUser], Metrics]:
    """
    Run the transform stage over one batch.
    Returns (clean users in first-seen order, metrics). Invalid records are kept and flagged.
    """
    clean = [_to_clean(u) for u in raw_users]
    retained = dedupe_users(clean)
    return retained, build_metrics(len(clean), retained)
