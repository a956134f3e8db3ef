from __future__ import annotations

import re

from voting.errors import ValidationError

# Optional sign followed by ASCII digits, e.g. "123", "-7", "+42".
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_integer_literal(value: str) -> bool:
    return _INTEGER_RE.fullmatch(value) is not None


def validate_name(name: str) -> str:
    """Check a proposed cryptocurrency name and return it unchanged.

    Raises ValidationError when the name is empty or is an integer literal.
    Whitespace is kept as sent, so a name of spaces is accepted.
    """
    if not name:
        raise ValidationError("Name cannot be empty")
    if is_integer_literal(name):
        raise ValidationError("Name cannot be a number")
    return name
