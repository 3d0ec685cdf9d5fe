"""gpsnmea package for streaming NMEA 0183 decoding and encoding."""

from gpsnmea.nmea import (
    ChecksumError,
    Coordinate,
    Date,
    FieldDecodeError,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Height,
    MalformedSentenceError,
    NMEAError,
    RMCData,
    SatelliteInView,
    SentenceRecord,
    Time,
    UnknownSentenceError,
    VTGData,
    build_gga,
    build_rmc,
    encode_sentence,
    parse_sentence,
    validate_checksum,
)
from gpsnmea.stream import NMEAReader, SentenceAssembler, SentenceHandler

__all__ = [
    "ChecksumError",
    "Coordinate",
    "Date",
    "FieldDecodeError",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "Height",
    "MalformedSentenceError",
    "NMEAError",
    "NMEAReader",
    "RMCData",
    "SatelliteInView",
    "SentenceAssembler",
    "SentenceHandler",
    "SentenceRecord",
    "Time",
    "UnknownSentenceError",
    "VTGData",
    "build_gga",
    "build_rmc",
    "encode_sentence",
    "parse_sentence",
    "validate_checksum",
]
