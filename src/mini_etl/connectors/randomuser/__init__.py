"""Random User API connector."""

from .connector import RandomUserConnector

__all__ = ["RandomUserConnector"]
