"""Bundled fallback dataset used when the live source is unavailable."""

from functools import lru_cache
from importlib import resources
from typing import Any, Optional

from mini_etl.connectors.base import BaseConnector
from mini_etl.models.raw import RawUser
from mini_etl.models.result import FallbackDataset
from mini_etl.settings import Settings

# sourceUrl reported for results built from bundled data
FALLBACK_SOURCE = "fallback:mock-data/etl.json"


@lru_cache(maxsize=1)
def load_fallback_dataset() -> FallbackDataset:
    """Read and validate the bundled etl.json (pipeline steps, users, precomputed metrics)."""
    text = resources.files("mini_etl").joinpath("data/etl.json").read_text(encoding="utf-8")
    return FallbackDataset.model_validate_json(text)


class FallbackConnector(BaseConnector):
    """Serves the bundled users; never touches the network."""

    source_id = "fallback"
    source_url = FALLBACK_SOURCE
    is_fallback = True

    def __init__(self, settings: Optional[Settings] = None):
        """settings is accepted so every registered connector builds the same way; it is unused."""

    def search(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        """Bundled users as plain dicts; limit is ignored, the dataset is fixed."""
        return [u.model_dump() for u in load_fallback_dataset().users]

    def normalize(self, item: dict[str, Any]) -> RawUser:
        return RawUser.model_validate(item)
