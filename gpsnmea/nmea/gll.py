"""GLL sentence decoder and encoder.

GLL (Geographic Position - Latitude/Longitude) reports the current position
and the UTC time it was computed at.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,*1D
           |       | |        | |      |
           |       | |        | |      +-- Status (A=valid, V=void), NMEA 2.0+
           |       | |        | +-- UTC time (HHMMSS[.ss])
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S
"""

from gpsnmea.nmea.fields import (
    parse_char_field,
    parse_coordinate_field,
    parse_time_field,
    require_fields,
)
from gpsnmea.nmea.formatting import (
    format_latitude,
    format_longitude,
    format_time,
    join_fields,
    wrap_sentence,
)
from gpsnmea.nmea.types import GLLData

SENTENCE_TYPE = "GLL"

_MINIMUM_FIELD_COUNT = 6
_STATUS_INDEX = 6


def decode_gll(fields: list[str]) -> GLLData:
    """Construct a GLLData object from tokenized fields.

    Maps NMEA field indices to GLLData attributes:
        fields[1, 2] -> latitude + N/S
        fields[3, 4] -> longitude + E/W
        fields[5]    -> time
        fields[6]    -> status (only on receivers that send it)
    """
    require_fields(fields, _MINIMUM_FIELD_COUNT)

    status = None
    if len(fields) > _STATUS_INDEX:
        status = parse_char_field(fields, _STATUS_INDEX)

    return GLLData(
        latitude=parse_coordinate_field(fields, 1),
        longitude=parse_coordinate_field(fields, 3),
        time=parse_time_field(fields, 5),
        status=status,
        talker=fields[0][:2],
    )


def encode_gll(record: GLLData) -> bytes:
    """Format a GLLData as a ready-to-transmit sentence.

    The status field is only written when the record carries one.
    """
    latitude, north_south = format_latitude(record.latitude)
    longitude, east_west = format_longitude(record.longitude)

    fields = [
        latitude,
        north_south,
        longitude,
        east_west,
        format_time(record.time),
    ]
    if record.status is not None:
        fields.append(record.status)

    return wrap_sentence(join_fields(record.talker + SENTENCE_TYPE, fields))
