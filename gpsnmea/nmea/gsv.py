"""GSV sentence decoder and encoder.

GSV (GNSS Satellites in View) describes every satellite the receiver can
see, four per sentence, spread over a cycle of several sentences.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  |  |  |   +-- SNR in dB-Hz (empty = not tracking)
           | | |  |  |  +-- Azimuth, degrees true
           | | |  |  +-- Elevation, degrees
           | | |  +-- Satellite PRN        (repeated for up to 4 satellites)
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages
"""

from gpsnmea.nmea.errors import MalformedSentenceError
from gpsnmea.nmea.fields import (
    parse_int_field,
    require_fields,
    safe_int_field,
)
from gpsnmea.nmea.formatting import format_int, join_fields, wrap_sentence
from gpsnmea.nmea.types import GSVData, SatelliteInView

SENTENCE_TYPE = "GSV"

SATELLITES_PER_MESSAGE = 4

_MINIMUM_FIELD_COUNT = 4
_FIELDS_PER_SATELLITE = 4


def _decode_satellite(fields: list[str], index: int) -> SatelliteInView:
    return SatelliteInView(
        prn=parse_int_field(fields, index),
        elevation=parse_int_field(fields, index + 1),
        azimuth=parse_int_field(fields, index + 2),
        snr=safe_int_field(fields, index + 3),
    )


def decode_gsv(fields: list[str]) -> GSVData:
    """Construct a GSVData object from tokenized fields.

    Maps NMEA field indices to GSVData attributes:
        fields[1] -> total_messages
        fields[2] -> message_number
        fields[3] -> satellites_in_view
        fields[4 + 4k .. 7 + 4k] -> satellites[k] (PRN, elevation,
            azimuth, SNR)

    Satellite fields after the header must come in complete groups of
    four; any remainder means the sentence was truncated.

    Raises:
        MalformedSentenceError: If a satellite group is incomplete.
    """
    require_fields(fields, _MINIMUM_FIELD_COUNT)

    count, remainder = divmod(
        len(fields) - _MINIMUM_FIELD_COUNT, _FIELDS_PER_SATELLITE
    )
    if remainder:
        raise MalformedSentenceError(
            f"{fields[0]} has an incomplete satellite group "
            f"({remainder} trailing fields)"
        )
    satellites = tuple(
        _decode_satellite(fields, (k + 1) * _FIELDS_PER_SATELLITE)
        for k in range(count)
    )

    return GSVData(
        total_messages=parse_int_field(fields, 1),
        message_number=parse_int_field(fields, 2),
        satellites_in_view=parse_int_field(fields, 3),
        satellites=satellites,
        talker=fields[0][:2],
    )


def encode_gsv(record: GSVData) -> bytes:
    """Format a GSVData as a ready-to-transmit sentence.

    Field formats: message counts ``%d``, satellites in view ``%02d``,
    PRN ``%02d``, elevation ``%02d``, azimuth ``%03d``, SNR ``%02d``.

    Raises:
        ValueError: If the record carries more than four satellites.
    """
    if len(record.satellites) > SATELLITES_PER_MESSAGE:
        raise ValueError(
            f"GSV carries at most {SATELLITES_PER_MESSAGE} satellites, "
            f"got {len(record.satellites)}"
        )

    fields = [
        f"{record.total_messages:d}",
        f"{record.message_number:d}",
        f"{record.satellites_in_view:02d}",
    ]
    for satellite in record.satellites:
        fields += [
            f"{satellite.prn:02d}",
            f"{satellite.elevation:02d}",
            f"{satellite.azimuth:03d}",
            format_int(satellite.snr, "02d"),
        ]

    return wrap_sentence(join_fields(record.talker + SENTENCE_TYPE, fields))
