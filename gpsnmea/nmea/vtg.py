"""VTG sentence decoder and encoder.

VTG (Track Made Good and Ground Speed) provides velocity information from
GNSS: ground speed and heading, both relative to true and magnetic north.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N), NMEA 2.3+
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Every value field may be empty. When stationary, the track angles are
typically empty (no heading when not moving).
"""

from gpsnmea.nmea.fields import parse_char_field, require_fields, safe_float_field
from gpsnmea.nmea.formatting import format_float, join_fields, wrap_sentence
from gpsnmea.nmea.types import VTGData

SENTENCE_TYPE = "VTG"

# VTG has 9 fields in basic format, 10 with FAA mode indicator
_MINIMUM_FIELD_COUNT = 9
_MODE_INDEX = 9

_VALUE_FORMAT = "05.1f"


def _extract_mode(fields: list[str]) -> str | None:
    """Extract the FAA mode indicator from VTG fields.

    The mode indicator was added in NMEA 2.3 and appears at index 9.
    Older receivers may not include this field.
    """
    if len(fields) <= _MODE_INDEX:
        return None
    return parse_char_field(fields, _MODE_INDEX)


def decode_vtg(fields: list[str]) -> VTGData:
    """Construct a VTGData object from tokenized fields.

    Maps NMEA field indices to VTGData attributes:
        fields[1] -> track_true_degrees
        fields[3] -> track_magnetic_degrees
        fields[5] -> speed_knots
        fields[7] -> speed_kilometers_per_hour
        fields[9] -> mode (FAA mode indicator, if present)

    All four values decode to None when their field is empty.
    """
    require_fields(fields, _MINIMUM_FIELD_COUNT)

    return VTGData(
        track_true_degrees=safe_float_field(fields, 1),
        track_magnetic_degrees=safe_float_field(fields, 3),
        speed_knots=safe_float_field(fields, 5),
        speed_kilometers_per_hour=safe_float_field(fields, 7),
        mode=_extract_mode(fields),
        talker=fields[0][:2],
    )


def encode_vtg(record: VTGData) -> bytes:
    """Format a VTGData as a ready-to-transmit sentence.

    Values are written ``%05.1f`` followed by their T/M/N/K unit field.
    The mode field is only written when the record carries one.
    """
    fields = [
        format_float(record.track_true_degrees, _VALUE_FORMAT),
        "T",
        format_float(record.track_magnetic_degrees, _VALUE_FORMAT),
        "M",
        format_float(record.speed_knots, _VALUE_FORMAT),
        "N",
        format_float(record.speed_kilometers_per_hour, _VALUE_FORMAT),
        "K",
    ]
    if record.mode is not None:
        fields.append(record.mode)

    return wrap_sentence(join_fields(record.talker + SENTENCE_TYPE, fields))
