"""
Opaque pagination cursors.

A cursor is the primary key of the last item of a page (the store's
"last evaluated key"), serialized as URL-safe base64 JSON. Callers only
ever hand it back; its structure is not part of the API.
"""

# Standard library imports
import base64
import binascii
import json
from typing import Dict

# Local application imports
from ...domain.constants import TableFields
from ...domain.exceptions import ValidationError


def encode_cursor(key: Dict[str, str]) -> str:
    raw = json.dumps(
        {TableFields.PK: key[TableFields.PK], TableFields.SK: key[TableFields.SK]},
        separators=(",", ":"),
        sort_keys=True,
    )
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> Dict[str, str]:
    """
    Decode a cursor produced by encode_cursor

    Raises:
        ValidationError: If the cursor was not produced by encode_cursor
    """
    try:
        padded = cursor + "=" * (-len(cursor) % 4)
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        key = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise ValidationError("Invalid pagination cursor") from e

    if (
        not isinstance(key, dict)
        or set(key) != {TableFields.PK, TableFields.SK}
        or not all(isinstance(value, str) for value in key.values())
    ):
        raise ValidationError("Invalid pagination cursor")
    return key
