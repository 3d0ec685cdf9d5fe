"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^                       checksum content                      ^^
    start                                                checksum (0x47 = 71)

The same calculation is used in both directions: to verify a received
sentence and to produce the checksum appended to an outgoing one.
"""

from gpsnmea.nmea.errors import MalformedSentenceError

_HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def calculate_checksum(payload: str | bytes) -> int:
    """Calculate the XOR checksum of a sentence payload.

    The NMEA checksum algorithm XORs the value of each byte in the payload.
    This is a simple error-detection mechanism that can detect single-bit
    errors and some multi-bit errors.

    Args:
        payload: The text between '$' and '*' (exclusive), as ``str`` or
            raw ``bytes``.

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPGLL,4916.45,N,12311.12,W,225444,A,")
        29
    """
    data = payload.encode("ascii") if isinstance(payload, str) else payload
    result = 0
    for byte in data:
        result ^= byte
    return result


def format_checksum(value: int) -> str:
    """Render a checksum as the two uppercase hex digits used on the wire."""
    return f"{value & 0xFF:02X}"


def verify_checksum(payload: str | bytes, transmitted: int) -> bool:
    """Return True if *payload* hashes to the *transmitted* checksum."""
    return calculate_checksum(payload) == transmitted


def split_sentence(sentence: str) -> tuple[str, int]:
    """Separate a sentence into its payload and transmitted checksum.

    NMEA sentences follow the format: $<payload>*<checksum>. Trailing
    whitespace (the CR/LF terminator) is ignored.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPGGA,...*47\\r\\n")

    Returns:
        A tuple of (payload, checksum_value).

    Raises:
        MalformedSentenceError: If the '$' or '*' delimiter is missing, or
            the checksum token is not exactly two hex digits.

    Example:
        >>> split_sentence("$GPGGA,123519*77")
        ('GPGGA,123519', 119)
    """
    sentence = sentence.strip()
    if not sentence.startswith("$"):
        raise MalformedSentenceError("Sentence does not start with '$'")
    if "*" not in sentence:
        raise MalformedSentenceError("Sentence has no '*' checksum delimiter")

    end = sentence.index("*")
    payload = sentence[1:end]
    token = sentence[end + 1 :]

    if len(token) != 2 or not _HEX_DIGITS.issuperset(token):
        raise MalformedSentenceError(f"Invalid checksum token {token!r}")

    return payload, int(token, 16)


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the payload between '$' and '*'
    2. Computing the XOR of all payload bytes
    3. Comparing against the provided 2-digit hex checksum

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum
    """
    try:
        payload, transmitted = split_sentence(sentence)
        return verify_checksum(payload, transmitted)
    except (MalformedSentenceError, UnicodeEncodeError):
        return False
