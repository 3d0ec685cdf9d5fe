"""NMEAReader: pull-style adapter feeding a byte stream into the assembler.

The caller opens the transport (a log file, ``serial.Serial``, or
``socket.makefile("rb")``) and hands the binary stream to the reader, which
takes ownership and closes it on exit.

Reading strategy:
    Bytes are read in chunks (``read1`` where the stream provides it, so a
    socket or pipe returns as soon as any data is available) and pushed
    through a ``SentenceAssembler``. Records completed by a chunk are
    queued and returned one at a time. At end of stream the last sentence,
    which has no following '$', is flushed.
"""

import collections
import logging
from collections.abc import Iterator
from types import TracebackType
from typing import IO

from gpsnmea.nmea.types import DEFAULT_TALKER, SentenceRecord
from gpsnmea.stream.assembler import SentenceAssembler
from gpsnmea.stream.handler import SentenceHandler

__all__ = ["NMEAReader"]

logger = logging.getLogger(__name__)

# --- read defaults ------------------------------------------------------------

_CHUNK_SIZE = 256


class NMEAReader:
    """Context manager for reading decoded NMEA records from a byte stream.

    Two consumption patterns are supported:

    Continuous iteration (stops at end of stream)::

        with NMEAReader(open("drive.nmea", "rb")) as reader:
            for record in reader:
                process(record)

    Single read (useful for one-shot or polling scenarios)::

        with NMEAReader(serial_port) as reader:
            record = reader.read()

    A handler, if given, is invoked for every record exactly as with a bare
    ``SentenceAssembler``; the records are returned from ``read`` as well.

    Args:
        stream: Binary stream to read from. Closed when the ``with`` block
            exits. A read returning ``b""`` is taken as end of stream.
        handler: Optional hooks invoked for each record and each drop.
        talker_ids: Accepted 2-character talker IDs (default ``("GP",)``).
        chunk_size: Maximum number of bytes requested per read.
    """

    def __init__(
        self,
        stream: IO[bytes],
        handler: SentenceHandler | None = None,
        talker_ids: tuple[str, ...] = (DEFAULT_TALKER,),
        chunk_size: int = _CHUNK_SIZE,
    ) -> None:
        """Store the stream; reading starts in ``__enter__``."""
        self._stream: IO[bytes] | None = None
        self._source = stream
        self._chunk_size = chunk_size
        self._assembler = SentenceAssembler(handler, talker_ids=talker_ids)
        self._records: collections.deque[SentenceRecord] = collections.deque()
        self._cancelled: bool = False

    def __enter__(self) -> "NMEAReader":
        """Attach the stream and reset internal state."""
        self._stream = self._source
        self._cancelled = False
        self._records.clear()
        self._assembler.reset()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the stream."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def cancel(self) -> None:
        """Make the next ``read`` raise ``EOFError``.

        Records already decoded are discarded. A read blocked inside the
        stream itself returns only when the stream does.
        """
        self._cancelled = True

    def _recv_chunk(self, stream: IO[bytes]) -> bytes | None:
        """Read one chunk; returns ``None`` on timeout retry.

        Raises:
            EOFError: If the stream was closed underneath the reader.
        """
        read = getattr(stream, "read1", stream.read)
        try:
            return read(self._chunk_size)
        except TimeoutError:
            return None
        except OSError as e:
            raise EOFError("NMEA stream closed.") from e

    def _fill(self, stream: IO[bytes]) -> None:
        """Read until at least one record is queued.

        Raises:
            EOFError: If cancelled, or the stream ended with nothing left.
        """
        while not self._records:
            if self._cancelled:
                self._records.clear()
                raise EOFError("NMEA read cancelled.")
            chunk = self._recv_chunk(stream)
            if chunk is None:
                continue
            if not chunk:
                record = self._assembler.flush()
                if record is None:
                    raise EOFError("NMEA stream ended.")
                self._records.append(record)
                return
            self._records.extend(self._assembler.feed(chunk))

    def read(self) -> SentenceRecord:
        """Block until the next decoded record and return it.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._stream is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        if self._cancelled:
            self._records.clear()
            raise EOFError("NMEA read cancelled.")
        self._fill(self._stream)
        return self._records.popleft()

    def __iter__(self) -> Iterator[SentenceRecord]:
        """Yield records until the stream ends or the reader is cancelled."""
        while True:
            try:
                record = self.read()
            except EOFError:
                logger.debug("NMEA iteration finished")
                return
            yield record
