"""Raw user representation before validation and deduplication."""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_INT_PATTERN = re.compile(r"-?[0-9]+")


def optional_text(value: Any) -> Optional[str]:
    """
    Coerce a scalar to a stripped string; blanks and non-scalars become None.
    Integral floats render as ints, so 1.0 and 1 give the same "1".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def optional_int(value: Any) -> Optional[int]:
    """Coerce to int where unambiguous; anything else becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if _INT_PATTERN.fullmatch(text):
            return int(text)
    return None


class Location(BaseModel):
    """Free-form location; both parts optional."""

    model_config = ConfigDict(frozen=True)

    city: Optional[str] = None
    country: Optional[str] = None

    @field_validator("city", "country", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return optional_text(value)


class RawUser(BaseModel):
    """
    User-like record as received from a source.
    Every field is explicitly present or absent (None); junk values never fail validation,
    they degrade to absent.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[Location] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    nat: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flat_location(cls, data: Any) -> Any:
        """Fold top-level city/country into location when there is no location block."""
        if not isinstance(data, dict) or isinstance(data.get("location"), (dict, Location)):
            return data
        if "city" not in data and "country" not in data:
            return data
        data = dict(data)
        data["location"] = {"city": data.pop("city", None), "country": data.pop("country", None)}
        return data

    @field_validator("id", "name", "email", "phone", "gender", "nat", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return optional_text(value)

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, value: Any) -> Optional[int]:
        return optional_int(value)

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> Any:
        if isinstance(value, (dict, Location)):
            return value
        return None
