"""Sentence identification and dispatch to the per-type decoders.

``parse_sentence`` is the one-call entry point for a complete sentence
string. ``decode_payload`` does the same work on a payload whose checksum
has already been checked, which is how the stream assembler uses it.
"""

import dataclasses
from collections.abc import Callable

from gpsnmea.nmea import gga, gll, gsa, gsv, rmc, vtg
from gpsnmea.nmea.checksum import calculate_checksum, split_sentence
from gpsnmea.nmea.errors import (
    ChecksumError,
    MalformedSentenceError,
    UnknownSentenceError,
)
from gpsnmea.nmea.fields import VALID_TALKER_IDS, tokenize
from gpsnmea.nmea.types import (
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    RMCData,
    SentenceRecord,
    VTGData,
)

# Sentence IDs are a 2-character talker followed by a 3-character type.
SENTENCE_ID_LENGTH = 5
_TALKER_LENGTH = 2

SENTENCE_DECODERS: dict[str, Callable[[list[str]], SentenceRecord]] = {
    gga.SENTENCE_TYPE: gga.decode_gga,
    gll.SENTENCE_TYPE: gll.decode_gll,
    gsa.SENTENCE_TYPE: gsa.decode_gsa,
    gsv.SENTENCE_TYPE: gsv.decode_gsv,
    rmc.SENTENCE_TYPE: rmc.decode_rmc,
    vtg.SENTENCE_TYPE: vtg.decode_vtg,
}

SENTENCE_ENCODERS: dict[type, Callable[..., bytes]] = {
    GGAData: gga.encode_gga,
    GLLData: gll.encode_gll,
    GSAData: gsa.encode_gsa,
    GSVData: gsv.encode_gsv,
    RMCData: rmc.encode_rmc,
    VTGData: vtg.encode_vtg,
}


def split_talker(sentence_id: str) -> tuple[str, str]:
    """Split a sentence ID such as ``"GPGGA"`` into talker and type.

    Raises:
        MalformedSentenceError: If the ID is not exactly 5 characters.

    Example:
        >>> split_talker("GNVTG")
        ('GN', 'VTG')
    """
    if len(sentence_id) != SENTENCE_ID_LENGTH:
        raise MalformedSentenceError(f"Invalid sentence ID {sentence_id!r}")
    return sentence_id[:_TALKER_LENGTH], sentence_id[_TALKER_LENGTH:]


def decode_payload(payload: str, sentence: str = "") -> SentenceRecord:
    """Tokenize a checksum-verified payload and run its decoder.

    *sentence*, the raw text the payload came from, is stored on the
    record when given.

    Raises:
        MalformedSentenceError: If the payload exceeds the tokenizer bounds
            or misses a required field.
        UnknownSentenceError: If no decoder exists for the sentence type.
        FieldDecodeError: If a field cannot be decoded.
    """
    fields = tokenize(payload)
    _, sentence_type = split_talker(fields[0])

    decoder = SENTENCE_DECODERS.get(sentence_type)
    if decoder is None:
        raise UnknownSentenceError(f"No decoder for sentence {fields[0]!r}")

    record = decoder(fields)
    if sentence:
        record = dataclasses.replace(record, sentence=sentence)
    return record


def parse_sentence(
    sentence: str,
    talker_ids: tuple[str, ...] = VALID_TALKER_IDS,
) -> SentenceRecord:
    """Parse a complete NMEA sentence into its typed record.

    This performs:
    1. Whitespace stripping (handles \\r\\n line endings)
    2. Checksum validation
    3. Talker validation (must be one of *talker_ids*)
    4. Field tokenizing and decoding by sentence type

    Args:
        sentence: Raw sentence string, e.g. ``"$GPGGA,...*47\\r\\n"``.
        talker_ids: Accepted 2-character talker IDs.

    Returns:
        The decoded record (GGAData, GLLData, GSAData, GSVData, RMCData
        or VTGData).

    Raises:
        MalformedSentenceError: If the sentence structure is invalid or the
            talker is not accepted.
        ChecksumError: If the checksum does not match.
        UnknownSentenceError: If the sentence type has no decoder.
        FieldDecodeError: If a field cannot be decoded.

    Example:
        >>> record = parse_sentence(
        ...     "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        >>> record.latitude.decimal_degrees
        48.1173
    """
    try:
        payload, transmitted = split_sentence(sentence)
        calculated = calculate_checksum(payload)
    except UnicodeEncodeError as exc:
        raise MalformedSentenceError("Sentence contains non-ASCII text") from exc

    if calculated != transmitted:
        raise ChecksumError(calculated, transmitted)

    talker, _ = split_talker(payload.split(",", 1)[0])
    if talker not in talker_ids:
        raise MalformedSentenceError(f"Talker {talker!r} is not accepted")

    return decode_payload(payload, sentence.strip())


def encode_sentence(record: SentenceRecord) -> bytes:
    """Encode any sentence record with the encoder for its type.

    Raises:
        TypeError: If *record* is not a known sentence record.
    """
    encoder = SENTENCE_ENCODERS.get(type(record))
    if encoder is None:
        raise TypeError(f"No encoder for {type(record).__name__}")
    return encoder(record)
