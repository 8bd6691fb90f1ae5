"""Pytest fixtures for mini-etl tests."""

from typing import Any, Callable

import httpx
import pytest

from mini_etl.connectors.randomuser import RandomUserConnector
from mini_etl.settings import Settings


@pytest.fixture
def sample_randomuser_item() -> dict[str, Any]:
    """One user object as returned by the Random User API."""
    return {
        "gender": "female",
        "name": {"title": "Ms", "first": "Aino", "last": "Lehtonen"},
        "location": {
            "street": {"number": 4521, "name": "Hämeenkatu"},
            "city": "Tampere",
            "state": "Pirkanmaa",
            "country": "Finland",
            "postcode": 33100,
        },
        "email": "Aino.Lehtonen@example.com",
        "login": {"uuid": "0b5c4b8e-2f0a-4c6e-9d1e-5a7f3c2b1e90", "username": "bluecat512"},
        "dob": {"date": "1989-06-14T08:31:22.000Z", "age": 37},
        "phone": "03-555-412",
        "cell": "041-555-02-11",
        "id": {"name": "HETU", "value": "NaNNA012undefined"},
        "nat": "FI",
    }


@pytest.fixture
def sample_randomuser_payload(sample_randomuser_item: dict[str, Any]) -> dict[str, Any]:
    """Full API envelope with two users."""
    second = {
        "gender": "male",
        "name": {"title": "Mr", "first": "Mateo", "last": "Díaz"},
        "location": {"city": "Sevilla", "country": "Spain"},
        "email": "mateo.diaz@example.com",
        "login": {"uuid": "9a1d7e34-6b2c-4f18-8e0a-3c5d7f9b2a41"},
        "dob": {"date": "1995-02-03T10:00:00.000Z", "age": 31},
        "phone": "955-555-019",
        "nat": "ES",
    }
    return {
        "results": [sample_randomuser_item, second],
        "info": {"seed": "abc123", "results": 2, "page": 1, "version": "1.4"},
    }


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, independent of the environment."""
    return Settings(seed="abc123", results=2)


@pytest.fixture
def make_connector(settings: Settings) -> Callable[..., RandomUserConnector]:
    """Build a RandomUserConnector whose HTTP calls go to a handler instead of the network."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RandomUserConnector:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return RandomUserConnector(settings=settings, client=client)

    return _make
