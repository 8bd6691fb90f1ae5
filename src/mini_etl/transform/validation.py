"""Record normalization and the validity predicate."""

import re

from mini_etl.models.raw import RawUser

# local@domain.tld, nothing stricter
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_user(user: RawUser) -> RawUser:
    """
    Return a normalized copy: emails lower-cased.
    Blank strings are already absent after RawUser validation.
    """
    if user.email and user.email != user.email.lower():
        return user.model_copy(update={"email": user.email.lower()})
    return user


def is_valid(user: RawUser) -> bool:
    """
    True iff id, name, and email are all present and the email looks like an address.
    Total: missing fields make the record invalid, never raise.
    """
    if user.id is None or user.name is None or user.email is None:
        return False
    return bool(_EMAIL_PATTERN.match(user.email))
