"""RMC sentence decoder and encoder.

RMC (Recommended Minimum Specific GNSS Data) is the minimal navigation
sentence: time, date, position, speed and course in one record.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Track angle, degrees true
           |      | |        | |         | +-- Speed over ground, knots
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=warning)
           +-- UTC time (HHMMSS[.ss])

NMEA 2.3 receivers append a 13th field with the FAA mode indicator.

Magnetic variation sign convention: East is positive and West negative,
so ``003.1,W`` decodes to -3.1.
"""

from gpsnmea.nmea.fields import (
    hemisphere_sign,
    is_available,
    parse_char_field,
    parse_coordinate_field,
    parse_date_field,
    parse_float_field,
    parse_time_field,
    require_fields,
    safe_float_field,
)
from gpsnmea.nmea.formatting import (
    format_date,
    format_float,
    format_latitude,
    format_longitude,
    format_time,
    join_fields,
    wrap_sentence,
)
from gpsnmea.nmea.types import DEFAULT_TALKER, Coordinate, Date, RMCData, Time

SENTENCE_TYPE = "RMC"

_MINIMUM_FIELD_COUNT = 10
_MAGNETIC_VARIATION_INDEX = 10
_MODE_INDEX = 12

# Speeds, tracks and variation are sent as ddd.d
_ANGLE_FORMAT = "05.1f"


def _parse_magnetic_variation(fields: list[str]) -> float | None:
    """Decode fields 10-11 as a signed variation, or None if not sent."""
    if len(fields) <= _MAGNETIC_VARIATION_INDEX:
        return None
    if not is_available(fields, _MAGNETIC_VARIATION_INDEX):
        return None
    return hemisphere_sign(
        fields, _MAGNETIC_VARIATION_INDEX + 1
    ) * parse_float_field(fields, _MAGNETIC_VARIATION_INDEX)


def decode_rmc(fields: list[str]) -> RMCData:
    """Construct an RMCData object from tokenized fields.

    Maps NMEA field indices to RMCData attributes:
        fields[1]      -> time
        fields[2]      -> warning (status character)
        fields[3, 4]   -> latitude + N/S
        fields[5, 6]   -> longitude + E/W
        fields[7]      -> ground_speed_knots
        fields[8]      -> track_angle (None if empty)
        fields[9]      -> date
        fields[10, 11] -> magnetic_variation (only if field 10 is non-empty)
        fields[12]     -> mode (NMEA 2.3+ only)
    """
    require_fields(fields, _MINIMUM_FIELD_COUNT)

    mode = None
    if len(fields) > _MODE_INDEX:
        mode = parse_char_field(fields, _MODE_INDEX)

    return RMCData(
        time=parse_time_field(fields, 1),
        warning=parse_char_field(fields, 2),
        latitude=parse_coordinate_field(fields, 3),
        longitude=parse_coordinate_field(fields, 5),
        ground_speed_knots=parse_float_field(fields, 7),
        track_angle=safe_float_field(fields, 8),
        date=parse_date_field(fields, 9),
        magnetic_variation=_parse_magnetic_variation(fields),
        mode=mode,
        talker=fields[0][:2],
    )


def encode_rmc(record: RMCData) -> bytes:
    """Format an RMCData as a ready-to-transmit sentence.

    Field formats: speed, track and magnetic variation ``%05.1f``
    (variation as a magnitude followed by E/W). The mode field is only
    written when the record carries one.
    """
    latitude, north_south = format_latitude(record.latitude)
    longitude, east_west = format_longitude(record.longitude)

    variation, variation_hemisphere = "", ""
    if record.magnetic_variation is not None:
        variation = format(abs(record.magnetic_variation), _ANGLE_FORMAT)
        variation_hemisphere = "W" if record.magnetic_variation < 0 else "E"

    fields = [
        format_time(record.time),
        record.warning or "",
        latitude,
        north_south,
        longitude,
        east_west,
        format_float(record.ground_speed_knots, _ANGLE_FORMAT),
        format_float(record.track_angle, _ANGLE_FORMAT),
        format_date(record.date),
        variation,
        variation_hemisphere,
    ]
    if record.mode is not None:
        fields.append(record.mode)

    return wrap_sentence(join_fields(record.talker + SENTENCE_TYPE, fields))


def build_rmc(
    latitude: float,
    longitude: float,
    speed_knots: float,
    *,
    time: Time | None = None,
    date: Date | None = None,
    track_angle: float | None = None,
    warning: str = "A",
    mode: str | None = "A",
    talker: str = DEFAULT_TALKER,
) -> bytes:
    """Build an RMC sentence from decimal-degree coordinates and a speed."""
    return encode_rmc(
        RMCData(
            time=time,
            warning=warning,
            latitude=Coordinate.from_decimal_degrees(latitude),
            longitude=Coordinate.from_decimal_degrees(longitude),
            ground_speed_knots=speed_knots,
            track_angle=track_angle,
            date=date,
            mode=mode,
            talker=talker,
        )
    )
