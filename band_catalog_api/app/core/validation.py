"""
Field validation for request payloads.

Payloads arrive as plain dictionaries decoded from JSON.  Each
endpoint declares its fields in order; ``validate_fields`` walks them
top to bottom and raises ``ValidationError`` for the first field that
is not a string or is shorter than its minimum length.  Only the
first problem is ever reported.

For partial updates, a field that is absent from the payload means
"leave unchanged".  Absence is decided by the key being missing, so
an explicit ``null`` or ``""`` is still validated and rejected.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from .errors import ValidationError


@dataclass(frozen=True)
class FieldSpec:
    """A required string field with a minimum length."""

    name: str
    min_length: int = 1


BAND_FIELDS = (FieldSpec("id"), FieldSpec("name"))
SONG_CREATE_FIELDS = (FieldSpec("id"), FieldSpec("name"), FieldSpec("bandId"))
SONG_UPDATE_FIELDS = (FieldSpec("id"), FieldSpec("name"), FieldSpec("band_id"))

_MISSING = object()


def check_field(spec: FieldSpec, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(spec.name, "must be string")
    if len(value) < spec.min_length:
        plural = "character" if spec.min_length == 1 else "characters"
        raise ValidationError(spec.name, f"must contain at least {spec.min_length} {plural}")
    return value


def validate_fields(
    payload: Mapping[str, Any],
    fields: Sequence[FieldSpec],
    partial: bool = False,
) -> Dict[str, str]:
    """Validate ``payload`` against ``fields`` and return the checked values.

    With ``partial=False`` every field is required; a missing key fails
    the type check like any other non-string.  With ``partial=True``
    missing keys are skipped and left out of the result.
    """
    values: Dict[str, str] = {}
    for spec in fields:
        value = payload.get(spec.name, _MISSING)
        if value is _MISSING and partial:
            continue
        values[spec.name] = check_field(spec, None if value is _MISSING else value)
    return values
