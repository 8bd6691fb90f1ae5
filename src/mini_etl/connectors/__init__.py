"""Source connectors for user ingestion."""

from mini_etl.connectors.base import BaseConnector
from mini_etl.connectors.registry import ConnectorRegistry

__all__ = ["BaseConnector", "ConnectorRegistry"]
