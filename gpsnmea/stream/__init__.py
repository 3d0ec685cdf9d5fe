"""Streaming sentence assembly and handler dispatch for NMEA byte streams."""

from gpsnmea.stream.assembler import SentenceAssembler
from gpsnmea.stream.handler import SentenceHandler
from gpsnmea.stream.reader import NMEAReader

__all__ = ["NMEAReader", "SentenceAssembler", "SentenceHandler"]
