"""NMEA 0183 decoders and encoders for GGA, GLL, GSA, GSV, RMC and VTG sentences."""

from gpsnmea.nmea.checksum import (
    calculate_checksum,
    format_checksum,
    split_sentence,
    validate_checksum,
    verify_checksum,
)
from gpsnmea.nmea.errors import (
    ChecksumError,
    FieldDecodeError,
    MalformedSentenceError,
    NMEAError,
    UnknownSentenceError,
)
from gpsnmea.nmea.fields import VALID_TALKER_IDS, tokenize
from gpsnmea.nmea.gga import build_gga, decode_gga, encode_gga
from gpsnmea.nmea.gll import decode_gll, encode_gll
from gpsnmea.nmea.gsa import decode_gsa, encode_gsa
from gpsnmea.nmea.gsv import decode_gsv, encode_gsv
from gpsnmea.nmea.parser import decode_payload, encode_sentence, parse_sentence
from gpsnmea.nmea.rmc import build_rmc, decode_rmc, encode_rmc
from gpsnmea.nmea.types import (
    DEFAULT_TALKER,
    Coordinate,
    Date,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Height,
    RMCData,
    SatelliteInView,
    SentenceRecord,
    Time,
    VTGData,
)
from gpsnmea.nmea.vtg import decode_vtg, encode_vtg

__all__ = [
    "DEFAULT_TALKER",
    "VALID_TALKER_IDS",
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
    "RMCData",
    "SatelliteInView",
    "SentenceRecord",
    "Time",
    "UnknownSentenceError",
    "VTGData",
    "build_gga",
    "build_rmc",
    "calculate_checksum",
    "decode_gga",
    "decode_gll",
    "decode_gsa",
    "decode_gsv",
    "decode_payload",
    "decode_rmc",
    "decode_vtg",
    "encode_gga",
    "encode_gll",
    "encode_gsa",
    "encode_gsv",
    "encode_rmc",
    "encode_sentence",
    "encode_vtg",
    "format_checksum",
    "parse_sentence",
    "split_sentence",
    "tokenize",
    "validate_checksum",
    "verify_checksum",
]
