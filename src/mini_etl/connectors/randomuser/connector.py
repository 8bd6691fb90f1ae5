"""Random User API connector.

The API (https://randomuser.me) returns a JSON envelope:
    {"results": [{...user...}, ...], "info": {"seed": ..., "results": N, ...}}
Each user nests its identifier under login.uuid, its name under name.first/last,
and its age under dob.age.
"""

import logging
from typing import Any, Optional

import httpx

from mini_etl.connectors.base import BaseConnector
from mini_etl.errors import RetrievalFailure
from mini_etl.models.raw import RawUser
from mini_etl.settings import Settings

from .constants import INCLUDE_FIELDS
from .parsers import extract_items, user_from_item

logger = logging.getLogger(__name__)


class RandomUserConnector(BaseConnector):
    """
    Connector for the Random User API.
    Fetches one batch per call; no paging and no caching.
    """

    source_id = "randomuser"

    DEFAULT_HEADERS = {
        "User-Agent": "mini-etl/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            settings: Endpoint, batch size, seed, and timeout (default: from environment)
            client: Optional httpx client; when given, the caller owns it
        """
        self._settings = settings or Settings.from_env()
        self.source_url = self._settings.source_url
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=self._settings.timeout,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    def _params(self, limit: Optional[int] = None) -> dict[str, Any]:
        params: dict[str, Any] = {
            "results": limit or self._settings.results,
            "inc": INCLUDE_FIELDS,
        }
        if self._settings.seed:
            params["seed"] = self._settings.seed
        return params

    def _fetch_json(self, params: dict[str, Any]) -> Any:
        """GET the endpoint and decode JSON. Raises httpx.HTTPError on transport/status errors."""
        response = self._client.get(self.source_url, params=params)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            content_type = response.headers.get("content-type", "")
            raise RetrievalFailure(
                f"Response from {self.source_url} is not JSON (content-type={content_type})"
            ) from e

    def search(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        """Fetch one batch of user objects in API shape."""
        payload = self._fetch_json(self._params(limit))
        items = extract_items(payload)
        logger.debug("Fetched %d records from %s", len(items), self.source_url)
        return items

    def normalize(self, item: dict[str, Any]) -> RawUser:
        """Convert one API user object to RawUser."""
        return RawUser.model_validate(user_from_item(item))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
