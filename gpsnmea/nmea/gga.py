"""GGA sentence decoder and encoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | ||
           |      |        | |         | | |  |   |     | |    | |+-- DGPS station ID
           |      |        | |         | | |  |   |     | |    | +-- DGPS age
           |      |        | |         | | |  |   |     | +----+-- Geoid separation (M=meters)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-6)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS[.ss])
"""

from gpsnmea.nmea.errors import FieldDecodeError
from gpsnmea.nmea.fields import (
    get_field,
    is_digit,
    parse_coordinate_field,
    parse_float_field,
    parse_height_field,
    parse_int_field,
    parse_time_field,
    require_fields,
)
from gpsnmea.nmea.formatting import (
    format_float,
    format_height,
    format_latitude,
    format_longitude,
    format_time,
    join_fields,
    wrap_sentence,
)
from gpsnmea.nmea.types import DEFAULT_TALKER, Coordinate, GGAData, Height, Time

SENTENCE_TYPE = "GGA"

# Fields 0-12 are required; the two DGPS fields (13, 14) are often omitted.
_MINIMUM_FIELD_COUNT = 13


def _parse_fix_quality(fields: list[str]) -> int:
    """Decode the single fix-quality digit; an empty field means no fix."""
    value = get_field(fields, 6)
    if not value:
        return 0
    if not is_digit(value[0]):
        raise FieldDecodeError(6, value, "fix quality is not a digit")
    return int(value[0])


def decode_gga(fields: list[str]) -> GGAData:
    """Construct a GGAData object from tokenized fields.

    Maps NMEA field indices to GGAData attributes:
        fields[1]     -> time
        fields[2, 3]  -> latitude + N/S
        fields[4, 5]  -> longitude + E/W
        fields[6]     -> fix_quality (first digit)
        fields[7]     -> num_satellites
        fields[8]     -> HDOP
        fields[9, 10] -> altitude + unit
        fields[11, 12] -> geoid separation + unit

    Raises:
        MalformedSentenceError: If fewer than 13 fields are present.
        FieldDecodeError: If a numeric field holds non-numeric text.
    """
    require_fields(fields, _MINIMUM_FIELD_COUNT)

    return GGAData(
        time=parse_time_field(fields, 1),
        latitude=parse_coordinate_field(fields, 2),
        longitude=parse_coordinate_field(fields, 4),
        fix_quality=_parse_fix_quality(fields),
        num_satellites=parse_int_field(fields, 7),
        horizontal_dilution_of_precision=parse_float_field(fields, 8),
        altitude=parse_height_field(fields, 9),
        geoid_separation=parse_height_field(fields, 11),
        talker=fields[0][:2],
    )


def encode_gga(record: GGAData) -> bytes:
    """Format a GGAData as a ready-to-transmit sentence.

    Field formats: time ``hhmmss[.ss]``, coordinates ``DDMM.mmmm`` /
    ``DDDMM.mmmm``, fix quality one digit, satellites ``%02d``, HDOP,
    altitude and geoid separation ``%.1f``. The DGPS age and station
    fields are left empty.
    """
    latitude, north_south = format_latitude(record.latitude)
    longitude, east_west = format_longitude(record.longitude)
    altitude, altitude_units = format_height(record.altitude)
    geoid, geoid_units = format_height(record.geoid_separation)

    fields = [
        format_time(record.time),
        latitude,
        north_south,
        longitude,
        east_west,
        f"{record.fix_quality:d}",
        f"{record.num_satellites:02d}",
        format_float(record.horizontal_dilution_of_precision),
        altitude,
        altitude_units,
        geoid,
        geoid_units,
        "",
        "",
    ]
    return wrap_sentence(join_fields(record.talker + SENTENCE_TYPE, fields))


def build_gga(
    latitude: float,
    longitude: float,
    *,
    time: Time | None = None,
    fix_quality: int = 1,
    num_satellites: int = 0,
    hdop: float = 0.0,
    altitude_meters: float | None = None,
    geoid_separation_meters: float | None = None,
    talker: str = DEFAULT_TALKER,
) -> bytes:
    """Build a GGA sentence from decimal-degree coordinates and scalars.

    Example:
        >>> build_gga(48.1173, 11.5167, fix_quality=1, num_satellites=8)
        b'$GPGGA,,4807.0380,N,01131.0020,E,1,08,0.0,,,,,,*7A\\r'
    """
    return encode_gga(
        GGAData(
            time=time,
            latitude=Coordinate.from_decimal_degrees(latitude),
            longitude=Coordinate.from_decimal_degrees(longitude),
            fix_quality=fix_quality,
            num_satellites=num_satellites,
            horizontal_dilution_of_precision=hdop,
            altitude=_meters(altitude_meters),
            geoid_separation=_meters(geoid_separation_meters),
            talker=talker,
        )
    )


def _meters(value: float | None) -> Height | None:
    return None if value is None else Height(value, "M")
