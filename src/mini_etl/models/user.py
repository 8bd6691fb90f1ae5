"""Cleaned user record."""

from mini_etl.models.raw import RawUser


class CleanUser(RawUser):
    """Normalized user with a derived validity flag."""

    valid: bool = False
