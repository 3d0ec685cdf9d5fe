"""Handler hooks invoked by the stream assembler.

Subclass ``SentenceHandler`` and override the hooks for the sentence types
of interest; every hook defaults to a no-op::

    class FixPrinter(SentenceHandler):
        def handle_gga(self, record: GGAData) -> None:
            print(record.latitude, record.longitude)

Every record carries the raw sentence it was decoded from in
``record.sentence``, so a hook can log or dump the wire text.

Hooks run synchronously inside ``SentenceAssembler.feed_byte``; a hook
that blocks stalls the byte stream.
"""

from gpsnmea.nmea.errors import NMEAError
from gpsnmea.nmea.types import (
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    RMCData,
    SentenceRecord,
    VTGData,
)

__all__ = ["SentenceHandler"]

_HOOK_NAMES: dict[type, str] = {
    GGAData: "handle_gga",
    GLLData: "handle_gll",
    GSAData: "handle_gsa",
    GSVData: "handle_gsv",
    RMCData: "handle_rmc",
    VTGData: "handle_vtg",
}


class SentenceHandler:
    """Receives decoded sentence records, one hook per sentence type."""

    def handle_gga(self, record: GGAData) -> None:
        """Called with each decoded GGA (position fix) record."""

    def handle_gll(self, record: GLLData) -> None:
        """Called with each decoded GLL (geographic position) record."""

    def handle_gsa(self, record: GSAData) -> None:
        """Called with each decoded GSA (DOP and active satellites) record."""

    def handle_gsv(self, record: GSVData) -> None:
        """Called with each decoded GSV (satellites in view) record."""

    def handle_rmc(self, record: RMCData) -> None:
        """Called with each decoded RMC (recommended minimum) record."""

    def handle_vtg(self, record: VTGData) -> None:
        """Called with each decoded VTG (track and ground speed) record."""

    def handle_error(self, error: NMEAError, sentence: bytes) -> None:
        """Diagnostic hook for a dropped sentence.

        Called for buffer overflows, checksum mismatches and decode
        failures, with the raw accumulated bytes. Foreign talkers and
        unknown sentence types are ignored without calling this hook.
        """

    def dispatch(self, record: SentenceRecord) -> None:
        """Route *record* to the hook for its sentence type."""
        getattr(self, _HOOK_NAMES[type(record)])(record)
