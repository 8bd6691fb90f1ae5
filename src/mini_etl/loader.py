"""Extract stage: load one batch of users from the live source or the bundled fallback."""

import logging
from datetime import datetime, timezone
from typing import Optional

from mini_etl.connectors.base import BaseConnector
from mini_etl.connectors.fallback import FALLBACK_SOURCE, load_fallback_dataset
from mini_etl.connectors.randomuser import RandomUserConnector
from mini_etl.models.result import ProcessingResult
from mini_etl.settings import Settings

logger = logging.getLogger(__name__)


def fallback_result() -> ProcessingResult:
    """ProcessingResult built from the bundled dataset, stamped now."""
    dataset = load_fallback_dataset()
    return ProcessingResult(
        users=dataset.users,
        source_url=FALLBACK_SOURCE,
        fallback_used=True,
        fetched_at=datetime.now(timezone.utc),
    )


def load_users(
    prefer_live: bool = True,
    *,
    connector: Optional[BaseConnector] = None,
    settings: Optional[Settings] = None,
) -> ProcessingResult:
    """
    Load one batch of raw users.
    With prefer_live, fetch from the connector (default: Random User API); on any
    failure (transport, HTTP status, malformed payload) return the bundled fallback instead.
    Never raises: failure shows up as fallback_used=True.
    """
    if not prefer_live:
        logger.info("Live data not requested; using bundled fallback dataset")
        return fallback_result()

    owned = connector is None
    try:
        if connector is None:
            connector = RandomUserConnector(settings=settings)
        users = connector.fetch_all()
    except Exception as e:
        source = connector.source_url if connector is not None else "live source"
        logger.warning("Retrieval from %s failed, using fallback dataset: %s", source, e)
        return fallback_result()
    finally:
        if owned and connector is not None:
            connector.close()

    logger.info("Loaded %d records from %s", len(users), connector.source_url)
    return ProcessingResult(
        users=tuple(users),
        source_url=connector.source_url,
        fallback_used=connector.is_fallback,
        fetched_at=datetime.now(timezone.utc),
    )
