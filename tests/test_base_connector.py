"""Unit tests for BaseConnector interface."""

from mini_etl.connectors.base import BaseConnector
from mini_etl.models.raw import RawUser


class ConcreteConnector(BaseConnector):
    """Concrete implementation for testing base behavior."""

    source_id = "test"
    source_url = "https://example.test/users"

    def __init__(self) -> None:
        self.limits: list = []

    def search(self, limit=None):
        self.limits.append(limit)
        return [
            {"uid": "1", "full_name": "A"},
            {"uid": "2", "full_name": "B"},
        ]

    def normalize(self, item: dict) -> RawUser:
        return RawUser(id=item.get("uid"), name=item.get("full_name"))


class TestBaseConnector:
    """Tests for BaseConnector default implementations."""

    def test_fetch_all_uses_search_and_normalize(self) -> None:
        """fetch_all calls search then normalizes each result."""
        connector = ConcreteConnector()
        results = connector.fetch_all()
        assert len(results) == 2
        assert results[0].name == "A"
        assert results[1].name == "B"
        assert results[0].id == "1"

    def test_fetch_all_passes_limit(self) -> None:
        connector = ConcreteConnector()
        connector.fetch_all(limit=10)
        assert connector.limits == [10]

    def test_close_is_a_no_op_by_default(self) -> None:
        ConcreteConnector().close()
