"""Fixed-width field formatters for outgoing NMEA sentences.

Each formatter renders one wire field with a fixed width and precision so
that encoded sentences decode back to the same values. None always renders
as an empty field.
"""

from gpsnmea.nmea.checksum import calculate_checksum, format_checksum
from gpsnmea.nmea.types import Coordinate, Date, Height, Time

# Coordinates carry four fractional-minute digits (DDMM.mmmm).
_MINUTE_SCALE = 10_000
_MINUTES_PER_DEGREE = 60

SENTENCE_TERMINATOR = "\r"


def format_time(value: Time | None) -> str:
    """Format a Time as ``hhmmss``, plus ``.ss`` when hundredths are set."""
    if value is None:
        return ""
    text = f"{value.hours:02d}{value.minutes:02d}{value.seconds:02d}"
    if value.hundredths is not None:
        text += f".{value.hundredths:02d}"
    return text


def format_date(value: Date | None) -> str:
    """Format a Date as ``ddmmyy``."""
    if value is None:
        return ""
    return f"{value.day:02d}{value.month:02d}{value.year % 100:02d}"


def _format_coordinate(value: Coordinate, degree_digits: int) -> str:
    # Round to the last transmitted digit, carrying into whole degrees.
    scaled = round(value.minutes * _MINUTE_SCALE)
    degrees = value.degrees
    if scaled >= _MINUTES_PER_DEGREE * _MINUTE_SCALE:
        scaled -= _MINUTES_PER_DEGREE * _MINUTE_SCALE
        degrees += 1
    whole, fraction = divmod(scaled, _MINUTE_SCALE)
    return f"{degrees:0{degree_digits}d}{whole:02d}.{fraction:04d}"


def format_latitude(value: Coordinate | None) -> tuple[str, str]:
    """Format latitude as ``DDMM.mmmm`` and its N/S indicator.

    Example:
        >>> format_latitude(Coordinate(sign=-1, degrees=33, minutes=56.123))
        ('3356.1230', 'S')
    """
    if value is None:
        return "", ""
    return _format_coordinate(value, 2), "S" if value.sign < 0 else "N"


def format_longitude(value: Coordinate | None) -> tuple[str, str]:
    """Format longitude as ``DDDMM.mmmm`` and its E/W indicator."""
    if value is None:
        return "", ""
    return _format_coordinate(value, 3), "W" if value.sign < 0 else "E"


def format_height(value: Height | None) -> tuple[str, str]:
    """Format a height as a one-decimal value and its unit character."""
    if value is None:
        return "", ""
    return f"{value.value:.1f}", value.units


def format_float(value: float | None, spec: str = ".1f") -> str:
    """Format a decimal field with a fixed format *spec*."""
    if value is None:
        return ""
    return format(value, spec)


def format_int(value: int | None, spec: str = "d") -> str:
    """Format an integer field with a fixed format *spec*."""
    if value is None:
        return ""
    return format(value, spec)


def join_fields(sentence_id: str, fields: list[str]) -> str:
    """Join a sentence ID and its fields into a payload."""
    return ",".join([sentence_id, *fields])


def wrap_sentence(payload: str, terminator: str = SENTENCE_TERMINATOR) -> bytes:
    """Wrap a payload as a full NMEA sentence with checksum and terminator.

    Example:
        >>> wrap_sentence("GPGLL,4916.45,N,12311.12,W,225444,A,")
        b'$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\\r'
    """
    checksum = format_checksum(calculate_checksum(payload))
    return f"${payload}*{checksum}{terminator}".encode("ascii")
