"""GSA sentence decoder and encoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                      |   |   |
           | | |                      |   |   +-- VDOP
           | | |                      |   +-- HDOP
           | | |                      +-- PDOP
           | | +-- 12 satellite PRN slots (empty = unused)
           | +-- Fix type (1=none, 2=2D, 3=3D)
           +-- Mode (M=manual, A=automatic 2D/3D)
"""

from gpsnmea.nmea.fields import (
    parse_char_field,
    parse_float_field,
    parse_int_field,
    require_fields,
    safe_int_field,
)
from gpsnmea.nmea.formatting import (
    format_float,
    format_int,
    join_fields,
    wrap_sentence,
)
from gpsnmea.nmea.types import GSAData

SENTENCE_TYPE = "GSA"

SATELLITE_SLOTS = 12

_FIRST_SLOT_INDEX = 3
_PDOP_INDEX = _FIRST_SLOT_INDEX + SATELLITE_SLOTS
_MINIMUM_FIELD_COUNT = _PDOP_INDEX + 3


def decode_gsa(fields: list[str]) -> GSAData:
    """Construct a GSAData object from tokenized fields.

    Maps NMEA field indices to GSAData attributes:
        fields[1]     -> mode
        fields[2]     -> fix_type
        fields[3..14] -> satellite_ids (None for an empty slot)
        fields[15]    -> PDOP
        fields[16]    -> HDOP
        fields[17]    -> VDOP
    """
    require_fields(fields, _MINIMUM_FIELD_COUNT)

    satellite_ids = tuple(
        safe_int_field(fields, index)
        for index in range(_FIRST_SLOT_INDEX, _PDOP_INDEX)
    )

    return GSAData(
        mode=parse_char_field(fields, 1),
        fix_type=parse_int_field(fields, 2),
        satellite_ids=satellite_ids,
        position_dop=parse_float_field(fields, _PDOP_INDEX),
        horizontal_dop=parse_float_field(fields, _PDOP_INDEX + 1),
        vertical_dop=parse_float_field(fields, _PDOP_INDEX + 2),
        talker=fields[0][:2],
    )


def encode_gsa(record: GSAData) -> bytes:
    """Format a GSAData as a ready-to-transmit sentence.

    Satellite IDs are written ``%02d``; a record with fewer than 12 IDs is
    padded with empty slots. DOP values are written ``%.1f``.

    Raises:
        ValueError: If the record carries more than 12 satellite IDs.
    """
    if len(record.satellite_ids) > SATELLITE_SLOTS:
        raise ValueError(
            f"GSA carries at most {SATELLITE_SLOTS} satellite IDs, "
            f"got {len(record.satellite_ids)}"
        )
    padding = [None] * (SATELLITE_SLOTS - len(record.satellite_ids))

    fields = [
        record.mode or "",
        f"{record.fix_type:d}",
        *(format_int(prn, "02d") for prn in [*record.satellite_ids, *padding]),
        format_float(record.position_dop),
        format_float(record.horizontal_dop),
        format_float(record.vertical_dop),
    ]
    return wrap_sentence(join_fields(record.talker + SENTENCE_TYPE, fields))
