"""SentenceAssembler: byte-at-a-time NMEA sentence reassembly and dispatch.

The assembler is push-driven: the transport calls ``feed_byte`` (or
``feed`` for a batch) with whatever bytes arrive. A sentence is complete
when the next '$' arrives, so the assembler never looks ahead and never
blocks.

Processing a completed sentence:
    1. Talker filter: sentences from talkers outside ``talker_ids`` are
       ignored (startup noise, other constellations).
    2. Checksum: a mismatch drops the sentence before any decoder runs.
    3. Decode: the sentence type selects a decoder; unknown types are
       ignored.
    4. Dispatch: the record is passed to the handler hook for its type.

Errors never escape ``feed_byte``. Overflows, checksum mismatches and
decode failures are logged and reported to ``SentenceHandler.handle_error``;
the assembler is always ready for the next sentence.
"""

import enum
import logging

from gpsnmea.nmea.checksum import calculate_checksum, split_sentence
from gpsnmea.nmea.errors import (
    ChecksumError,
    MalformedSentenceError,
    NMEAError,
    UnknownSentenceError,
)
from gpsnmea.nmea.parser import decode_payload
from gpsnmea.nmea.types import DEFAULT_TALKER, SentenceRecord
from gpsnmea.stream.handler import SentenceHandler

__all__ = ["SentenceAssembler"]

logger = logging.getLogger(__name__)

# --- buffer defaults ----------------------------------------------------------

# Longest accumulation accepted between two '$' delimiters, terminator included.
_DEFAULT_CAPACITY = 200

_START_DELIMITER = ord("$")
_TALKER_LENGTH = 2


class _State(enum.Enum):
    IDLE = "idle"  # waiting for the first '$'
    ACCUMULATING = "accumulating"
    DISCARDING = "discarding"  # overflowed, waiting for the next '$'


class SentenceAssembler:
    """Reassemble NMEA sentences from a byte stream and dispatch records.

    Example::

        assembler = SentenceAssembler(FixPrinter())
        for chunk in transport:
            assembler.feed(chunk)

    Args:
        handler: Receives decoded records and drop diagnostics. Defaults
            to a ``SentenceHandler`` whose hooks do nothing.
        talker_ids: Accepted 2-character talker IDs (default ``("GP",)``).
        capacity: Maximum number of bytes accumulated for one sentence.
    """

    def __init__(
        self,
        handler: SentenceHandler | None = None,
        talker_ids: tuple[str, ...] = (DEFAULT_TALKER,),
        capacity: int = _DEFAULT_CAPACITY,
    ) -> None:
        self._handler = handler if handler is not None else SentenceHandler()
        self._talker_ids = talker_ids
        self._capacity = capacity
        self._buffer = bytearray()
        self._state = _State.IDLE

    @property
    def pending(self) -> bytes:
        """Bytes accumulated for the sentence currently in progress."""
        return bytes(self._buffer)

    def reset(self) -> None:
        """Discard any partial sentence and wait for the next '$'."""
        self._buffer.clear()
        self._state = _State.IDLE

    def feed_byte(self, byte: int) -> SentenceRecord | None:
        """Consume one byte.

        Returns:
            The record decoded from the sentence this byte completed, or
            None if no record was produced.
        """
        if byte == _START_DELIMITER:
            previous = self._state
            raw = bytes(self._buffer)
            self._buffer.clear()
            self._state = _State.ACCUMULATING
            if previous is _State.ACCUMULATING:
                return self._complete(raw)
            return None

        if self._state is _State.ACCUMULATING:
            if len(self._buffer) >= self._capacity:
                self._overflow()
            else:
                self._buffer.append(byte)
        return None

    def feed(self, data: bytes) -> list[SentenceRecord]:
        """Consume a batch of bytes and return the records it completed."""
        records = []
        for byte in data:
            record = self.feed_byte(byte)
            if record is not None:
                records.append(record)
        return records

    def flush(self) -> SentenceRecord | None:
        """Process the sentence in progress without waiting for a '$'.

        Used at the end of a finite stream, where the last sentence has no
        following delimiter.
        """
        previous = self._state
        raw = bytes(self._buffer)
        self.reset()
        if previous is _State.ACCUMULATING:
            return self._complete(raw)
        return None

    def _overflow(self) -> None:
        error = MalformedSentenceError(
            f"Sentence exceeds buffer capacity of {self._capacity} bytes"
        )
        raw = bytes(self._buffer)
        logger.warning("Dropped sentence %r: %s", raw[:16], error)
        self._buffer.clear()
        self._state = _State.DISCARDING
        self._handler.handle_error(error, raw)

    def _complete(self, raw: bytes) -> SentenceRecord | None:
        try:
            record = self._decode(raw)
        except NMEAError as exc:
            logger.debug("Dropped sentence %r: %s", raw, exc)
            self._handler.handle_error(exc, raw)
            return None

        if record is not None:
            self._handler.dispatch(record)
        return record

    def _decode(self, raw: bytes) -> SentenceRecord | None:
        """Decode one accumulated sentence (without its leading '$').

        Returns None for sentences that are ignored rather than rejected.
        """
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as exc:
            raise MalformedSentenceError("Sentence contains non-ASCII bytes") from exc

        talker = text[:_TALKER_LENGTH]
        if talker not in self._talker_ids:
            logger.debug("Ignored sentence from talker %r", talker)
            return None

        sentence = ("$" + text).strip()
        payload, transmitted = split_sentence(sentence)
        calculated = calculate_checksum(payload)
        if calculated != transmitted:
            raise ChecksumError(calculated, transmitted)

        try:
            return decode_payload(payload, sentence)
        except UnknownSentenceError:
            logger.debug("Ignored unsupported sentence %r", payload[:5])
            return None
