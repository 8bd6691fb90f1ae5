"""Parsing utilities for Random User API payloads."""

from typing import Any, Optional

from mini_etl.errors import RetrievalFailure

from .constants import (
    CELL,
    CITY,
    COUNTRY,
    DOB,
    DOB_AGE,
    EMAIL,
    ERROR,
    GENDER,
    ID,
    ID_VALUE,
    LOCATION,
    LOGIN,
    LOGIN_UUID,
    NAME,
    NAME_FIRST,
    NAME_LAST,
    NAT,
    PHONE,
    RESULTS,
)


def extract_items(payload: Any) -> list[dict[str, Any]]:
    """
    Pull the list of user objects out of a response body.
    Accepts the API envelope {"results": [...]} or a bare JSON array.
    Anything else is a malformed payload.
    """
    if isinstance(payload, dict):
        if payload.get(ERROR):
            raise RetrievalFailure(f"Source reported an error: {payload[ERROR]}")
        items = payload.get(RESULTS)
        if not isinstance(items, list):
            raise RetrievalFailure(f"Payload has no '{RESULTS}' list (keys: {sorted(payload)})")
    elif isinstance(payload, list):
        items = payload
    else:
        raise RetrievalFailure(f"Unexpected payload type: {type(payload).__name__}")

    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise RetrievalFailure(f"Record {idx} is {type(item).__name__}, expected object")
    return items


def _nested(item: dict[str, Any], key: str, sub: str) -> Any:
    """item[key][sub] when item[key] is an object, else None."""
    block = item.get(key)
    if isinstance(block, dict):
        return block.get(sub)
    return None


def parse_user_id(item: dict[str, Any]) -> Optional[Any]:
    """login.uuid, else a scalar id, else the value of the API's id block."""
    uuid = _nested(item, LOGIN, LOGIN_UUID)
    if uuid:
        return uuid
    raw_id = item.get(ID)
    if isinstance(raw_id, dict):
        return raw_id.get(ID_VALUE) or None
    return raw_id


def parse_name(value: Any) -> Optional[str]:
    """Join {"first", "last"} into one display name; plain strings pass through."""
    if isinstance(value, dict):
        parts = [str(value.get(k) or "").strip() for k in (NAME_FIRST, NAME_LAST)]
        joined = " ".join(p for p in parts if p)
        return joined or None
    if isinstance(value, str):
        return value
    return None


def parse_location(value: Any) -> Optional[dict[str, Any]]:
    """Keep only city and country from the location block."""
    if not isinstance(value, dict):
        return None
    return {CITY: value.get(CITY), COUNTRY: value.get(COUNTRY)}


def user_from_item(item: dict[str, Any]) -> dict[str, Any]:
    """Map one API user object (nested or already flat) to RawUser fields."""
    location = parse_location(item.get(LOCATION))
    if location is None and (CITY in item or COUNTRY in item):
        location = {CITY: item.get(CITY), COUNTRY: item.get(COUNTRY)}
    age = _nested(item, DOB, DOB_AGE)
    if age is None and not isinstance(item.get(DOB), dict):
        age = item.get("age")
    return {
        "id": parse_user_id(item),
        "name": parse_name(item.get(NAME)),
        "email": item.get(EMAIL),
        "phone": item.get(PHONE) or item.get(CELL),
        "location": location,
        "age": age,
        "gender": item.get(GENDER),
        "nat": item.get(NAT),
    }
