"""First-wins deduplication by identity key."""

from typing import Iterable, TypeVar

from mini_etl.models.raw import RawUser

U = TypeVar("U", bound=RawUser)


def identity_key(user: RawUser) -> tuple[str, str]:
    """
    Identity used for dedup: ("id", id) when the id is present, else ("email", email).
    A record with neither groups under ("email", ""), so all such records collapse to the first.
    The tag keeps an id value from ever matching an email value.
    """
    if user.id is not None:
        return ("id", user.id)
    return ("email", (user.email or "").lower())


def dedupe_users(users: Iterable[U]) -> list[U]:
    """
    Keep the first record for each identity key, in order of first appearance.
    Later duplicates are dropped, never merged into the earlier record.
    """
    seen: set[tuple[str, str]] = set()
    retained: list[U] = []
    for user in users:
        key = identity_key(user)
        if key in seen:
            continue
        seen.add(key)
        retained.append(user)
    return retained
