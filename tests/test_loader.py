"""Unit tests for the extract stage."""

from datetime import datetime, timezone

import httpx

from mini_etl.connectors.base import BaseConnector
from mini_etl.connectors.fallback import FALLBACK_SOURCE, load_fallback_dataset
from mini_etl.loader import load_users
from mini_etl.models.raw import RawUser
from mini_etl.settings import Settings


class BrokenConnector(BaseConnector):
    """Connector whose transport always fails."""

    source_id = "broken"
    source_url = "https://broken.example/api"

    def search(self, limit=None):
        raise httpx.ConnectError("connection refused")

    def normalize(self, item):
        return RawUser.model_validate(item)


class StaticConnector(BaseConnector):
    """Connector returning a fixed list of items."""

    source_id = "static"
    source_url = "https://static.example/api"

    def __init__(self, items: list[dict]) -> None:
        self.items = items
        self.closed = False

    def search(self, limit=None):
        return self.items

    def normalize(self, item):
        return RawUser.model_validate(item)

    def close(self) -> None:
        self.closed = True


class TestLoadUsers:
    """Tests for load_users."""

    def test_live_success(self) -> None:
        """Live records are returned with the connector's URL."""
        before = datetime.now(timezone.utc)
        result = load_users(connector=StaticConnector([{"id": "1"}, {"id": "2"}]))
        assert result.fallback_used is False
        assert result.source_url == "https://static.example/api"
        assert [u.id for u in result.users] == ["1", "2"]
        assert result.fetched_at >= before

    def test_retrieval_failure_uses_fallback(self) -> None:
        """A transport error yields the bundled dataset, not an exception."""
        result = load_users(connector=BrokenConnector())
        assert result.fallback_used is True
        assert result.source_url == FALLBACK_SOURCE
        assert list(result.users) == list(load_fallback_dataset().users)

    def test_http_status_failure_uses_fallback(self, make_connector) -> None:
        result = load_users(connector=make_connector(lambda request: httpx.Response(500)))
        assert result.fallback_used is True

    def test_malformed_payload_uses_fallback(self, make_connector) -> None:
        connector = make_connector(lambda request: httpx.Response(200, json={"unexpected": True}))
        result = load_users(connector=connector)
        assert result.fallback_used is True

    def test_prefer_live_false_skips_connector(self) -> None:
        """No retrieval is attempted when live data is not preferred."""
        result = load_users(False, connector=BrokenConnector())
        assert result.fallback_used is True
        assert len(result.users) == len(load_fallback_dataset().users)

    def test_empty_live_batch_is_success(self) -> None:
        """An empty array is a valid, empty batch."""
        result = load_users(connector=StaticConnector([]))
        assert result.fallback_used is False
        assert result.users == ()

    def test_caller_connector_not_closed(self) -> None:
        connector = StaticConnector([])
        load_users(connector=connector)
        assert connector.closed is False

    def test_default_connector_failure_falls_back(self) -> None:
        """An unreachable default endpoint still returns a result."""
        settings = Settings(source_url="http://127.0.0.1:9/api", timeout=0.5)
        result = load_users(settings=settings)
        assert result.fallback_used is True

    def test_fetched_at_is_utc(self) -> None:
        result = load_users(False)
        assert result.fetched_at.tzinfo is not None


class TestLoadUsersRecordTolerance:
    """One bad record must not cost the whole live batch."""

    def test_unparsable_age_keeps_live_batch(self, make_connector) -> None:
        items = [
            {"id": "a", "name": "Ana", "email": "ana@example.com", "age": "--5"},
            {"id": "b", "name": "Ben", "email": "ben@example.com", "age": "40"},
        ]
        result = load_users(connector=make_connector(lambda request: httpx.Response(200, json=items)))
        assert result.fallback_used is False
        assert [u.id for u in result.users] == ["a", "b"]
        assert result.users[0].age is None
        assert result.users[1].age == 40

    def test_fallback_connector_reports_fallback(self) -> None:
        """Bundled data is flagged as fallback even when selected directly."""
        from mini_etl.connectors.fallback import FallbackConnector

        result = load_users(connector=FallbackConnector())
        assert result.fallback_used is True
        assert result.source_url == FALLBACK_SOURCE
