"""Abstract base class for user source connectors."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from mini_etl.models.raw import RawUser


class BaseConnector(ABC):
    """
    Standard interface for user record sources.
    All connectors must implement search and normalize.
    """

    source_id: str = ""
    source_url: str = ""
    # Set on connectors that serve bundled data instead of a live source
    is_fallback: bool = False

    @abstractmethod
    def search(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        """
        Retrieve one batch of records in the source's native shape.
        """
        pass

    @abstractmethod
    def normalize(self, item: dict[str, Any]) -> RawUser:
        """
        Convert one native record to RawUser.
        """
        pass

    def fetch_all(self, limit: Optional[int] = None) -> list[RawUser]:
        """
        Fetch one batch and return it as RawUser records, in source order.
        """
        return [self.normalize(item) for item in self.search(limit=limit)]

    def close(self) -> None:
        """Release any resources held by the connector."""
