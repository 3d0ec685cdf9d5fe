"""Exceptions raised while assembling, decoding, or encoding NMEA sentences.

Every error derives from ``NMEAError``, itself a ``ValueError``, so callers
that only care about "bad input" can catch a single builtin type.
"""


class NMEAError(ValueError):
    """Base class for all NMEA decode and encode errors."""


class MalformedSentenceError(NMEAError):
    """The sentence does not fit the wire layout.

    Raised for missing ``$``/``*`` delimiters, a checksum token that is not
    two hex digits, an accumulation longer than the assembler capacity, too
    many or too long fields, or a required field index that is absent.
    """


class ChecksumError(NMEAError):
    """The transmitted checksum does not match the computed one."""

    def __init__(self, calculated: int, transmitted: int) -> None:
        super().__init__(
            f"Checksum mismatch: calculated {calculated:02X}, "
            f"transmitted {transmitted:02X}"
        )
        self.calculated = calculated
        self.transmitted = transmitted


class FieldDecodeError(NMEAError):
    """A field holds text that cannot be decoded as its expected type."""

    def __init__(self, index: int, value: str, reason: str) -> None:
        super().__init__(f"Field {index} ({value!r}): {reason}")
        self.index = index
        self.value = value


class UnknownSentenceError(NMEAError):
    """The checksum is valid but no decoder exists for the sentence type."""
