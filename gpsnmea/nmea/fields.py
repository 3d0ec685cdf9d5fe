"""NMEA field tokenizing and decoding utilities.

This module splits a sentence payload into fields and decodes individual
fields into typed values. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data); the tokenizer keeps empty fields
in place so that every field keeps its positional index.

Every decoder takes the tokenized field list and an index into it. Indexing
is range-checked: asking for a field the sentence does not have raises
``MalformedSentenceError`` instead of ``IndexError``.

Empty-field policy:
    - ``safe_*`` decoders and the composite decoders (time, date,
      coordinate, height) return None for an empty field.
    - ``parse_int_field`` and ``parse_float_field`` return 0 for an empty
      field, matching permissive receivers that treat a blank numeric
      field as zero.
    - Non-numeric text in a numeric field always raises
      ``FieldDecodeError``; it is never silently turned into a default.
"""

import re

from gpsnmea.nmea.errors import FieldDecodeError, MalformedSentenceError
from gpsnmea.nmea.types import Coordinate, Date, Height, Time

# Fixed tokenizer bounds. A GSV sentence with four satellites is the widest
# standard sentence at exactly 20 fields.
MAX_FIELDS = 20
MAX_FIELD_LENGTH = 30

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

_DIGITS = frozenset("0123456789")

# Plain ASCII decimal text only: no "+", exponent, whitespace, underscore,
# or "nan"/"inf". Integers are unsigned.
_INTEGER_PATTERN = re.compile(r"[0-9]+")
_DECIMAL_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def tokenize(
    payload: str,
    max_fields: int = MAX_FIELDS,
    max_field_length: int = MAX_FIELD_LENGTH,
) -> list[str]:
    """Split a payload on commas into a bounded list of fields.

    Empty fields are preserved, including a trailing one, because the
    availability checks of the decoders rely on field positions.

    Args:
        payload: Text between '$' and '*' (exclusive).
        max_fields: Upper bound on the number of fields.
        max_field_length: Upper bound on the length of any single field.

    Returns:
        Ordered list of field strings; index 0 is the sentence ID.

    Raises:
        MalformedSentenceError: If either bound is exceeded.

    Example:
        >>> tokenize("1,,3")
        ['1', '', '3']
    """
    fields = payload.split(",")

    if len(fields) > max_fields:
        raise MalformedSentenceError(
            f"Sentence has {len(fields)} fields (limit {max_fields})"
        )

    for index, value in enumerate(fields):
        if len(value) > max_field_length:
            raise MalformedSentenceError(
                f"Field {index} is {len(value)} characters "
                f"(limit {max_field_length})"
            )

    return fields


def get_field(fields: list[str], index: int) -> str:
    """Return the field at *index*, range-checked.

    Raises:
        MalformedSentenceError: If the sentence has no field at *index*.
    """
    if not 0 <= index < len(fields):
        raise MalformedSentenceError(
            f"Sentence has {len(fields)} fields, field {index} is missing"
        )
    return fields[index]


def require_fields(fields: list[str], count: int) -> None:
    """Reject a sentence with fewer than *count* fields (a truncated one).

    Raises:
        MalformedSentenceError: If ``len(fields) < count``.
    """
    if len(fields) < count:
        raise MalformedSentenceError(
            f"{fields[0] if fields else 'Sentence'} has {len(fields)} fields, "
            f"expected at least {count}"
        )


def is_available(fields: list[str], index: int) -> bool:
    """True iff the field at *index* is non-empty."""
    return get_field(fields, index) != ""


def _to_int(index: int, value: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FieldDecodeError(index, value, "not an integer")
    return int(value)


def _to_float(index: int, value: str) -> float:
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise FieldDecodeError(index, value, "not a decimal number")
    return float(value)


def is_digit(char: str) -> bool:
    """True iff *char* is a single ASCII digit."""
    return char in _DIGITS


def _two_digit_groups(index: int, value: str, groups: int) -> list[int]:
    """Decode the first ``2 * groups`` characters as 2-digit integers."""
    width = 2 * groups
    prefix = value[:width]
    if len(prefix) != width or not _DIGITS.issuperset(prefix):
        raise FieldDecodeError(index, value, f"expected {width} leading digits")
    return [int(prefix[k : k + 2]) for k in range(0, width, 2)]


def parse_int_field(fields: list[str], index: int) -> int:
    """Parse a field as a base-10 integer; an empty field is 0.

    Example:
        >>> parse_int_field(["GPGGA", "08"], 1)
        8
    """
    value = get_field(fields, index)
    if not value:
        return 0
    return _to_int(index, value)


def parse_float_field(fields: list[str], index: int) -> float:
    """Parse a field as a decimal number; an empty field is 0.0."""
    value = get_field(fields, index)
    if not value:
        return 0.0
    return _to_float(index, value)


def safe_int_field(fields: list[str], index: int) -> int | None:
    """Parse a field as an integer, returning None if it is empty.

    Used where "not reported" must stay distinct from zero, such as a
    satellite's SNR or an unused GSA satellite slot.
    """
    if not is_available(fields, index):
        return None
    return _to_int(index, fields[index])


def safe_float_field(fields: list[str], index: int) -> float | None:
    """Parse a field as a decimal number, returning None if it is empty.

    Example:
        >>> safe_float_field(["GPVTG", ""], 1)  # stationary, no track
        None
    """
    if not is_available(fields, index):
        return None
    return _to_float(index, fields[index])


def parse_char_field(fields: list[str], index: int) -> str | None:
    """Return the first character of a field, or None if it is empty."""
    value = get_field(fields, index)
    return value[0] if value else None


def hemisphere_sign(fields: list[str], index: int) -> int:
    """Return -1 for a 'S' or 'W' hemisphere field, +1 otherwise.

    An empty field counts as +1.
    """
    value = get_field(fields, index)
    return -1 if value[:1] in ("S", "W") else 1


def parse_time_field(fields: list[str], index: int) -> Time | None:
    """Decode an ``hhmmss[.ss]`` field.

    The first six characters are read as hours, minutes and seconds. When
    a decimal point follows, the next two digits are hundredths (a single
    digit is right-padded, so ``.5`` is 50); otherwise hundredths is None.
    Digits past the second are ignored, but every character after the
    point must be a digit.

    Example:
        >>> parse_time_field(["GPGGA", "123519.5"], 1)
        Time(hours=12, minutes=35, seconds=19, hundredths=50)
    """
    value = get_field(fields, index)
    if not value:
        return None

    hours, minutes, seconds = _two_digit_groups(index, value, 3)

    hundredths = None
    rest = value[6:]
    if rest:
        digits = rest[1:]
        if rest[0] != "." or not digits or not _DIGITS.issuperset(digits):
            raise FieldDecodeError(index, value, "malformed fractional seconds")
        hundredths = int(digits[:2].ljust(2, "0"))

    return Time(hours, minutes, seconds, hundredths)


def parse_date_field(fields: list[str], index: int) -> Date | None:
    """Decode a ``ddmmyy`` field without inferring the century."""
    value = get_field(fields, index)
    if not value:
        return None
    if len(value) != 6:
        raise FieldDecodeError(index, value, "expected 6 digits")
    day, month, year = _two_digit_groups(index, value, 3)
    return Date(day, month, year)


def parse_coordinate_field(fields: list[str], index: int) -> Coordinate | None:
    """Decode a ``(D)DDMM.mmmm`` field and the hemisphere field after it.

    The integer part before the decimal point packs degrees and whole
    minutes as ``degrees * 100 + minutes``. The digits after the point are
    the fractional minutes, scaled by their count. The sign comes from the
    next field, so every coordinate occupies two consecutive fields.

    Args:
        fields: Tokenized sentence fields.
        index: Index of the value field; ``index + 1`` is the hemisphere.

    Returns:
        Coordinate, or None if the value field is empty.

    Raises:
        FieldDecodeError: On non-digit text or minutes of 60 or more.

    Example:
        >>> parse_coordinate_field(["GPGGA", "4807.038", "N"], 1)
        Coordinate(sign=1, degrees=48, minutes=7.038)
    """
    value = get_field(fields, index)
    if not value:
        return None

    whole, _, fraction = value.partition(".")
    if not whole or not _DIGITS.issuperset(whole) or not _DIGITS.issuperset(fraction):
        raise FieldDecodeError(index, value, "not a degrees-minutes coordinate")

    packed = int(whole)
    minutes = packed % 100
    fractional_minutes = int(fraction) / 10 ** len(fraction) if fraction else 0.0

    if minutes >= 60:
        raise FieldDecodeError(index, value, "minutes must be below 60")

    return Coordinate(
        sign=hemisphere_sign(fields, index + 1),
        degrees=packed // 100,
        minutes=minutes + fractional_minutes,
    )


def parse_height_field(fields: list[str], index: int) -> Height | None:
    """Decode a height value and the unit field after it.

    Returns None if the value field is empty. The unit is the first
    character of the next field, or an empty string if that is empty.
    """
    value = get_field(fields, index)
    if not value:
        return None
    units = get_field(fields, index + 1)[:1]
    return Height(value=_to_float(index, value), units=units)
