"""NMEA data types for parsed sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Frozen dataclasses: a record is built atomically from one complete,
       checksum-validated payload and never changes afterwards. Handlers
       may keep a reference without copying.

    2. Optional fields (X | None): NMEA fields may be empty, indicated by
       consecutive commas. Fields the wire layout marks as optional decode
       to None, which distinguishes "not reported" from "measured zero".

    3. Composite values (Time, Date, Coordinate, Height) keep the wire
       representation (degrees + minutes, two-digit year) rather than
       converting eagerly, so an encoded record reproduces the original
       fields. Derived values are exposed as properties.

    4. Every sentence record carries the talker ID it was received with,
       so a record can be re-encoded under the same talker.

    5. Decoded records keep the raw sentence they came from in
       ``sentence`` for logging and debugging. It is excluded from
       equality, so a decoded record equals one built from the same values.
"""

from dataclasses import dataclass, field

DEFAULT_TALKER = "GP"


@dataclass(frozen=True)
class Time:
    """UTC time of day from an ``hhmmss[.ss]`` field.

    Attributes:
        hours: 0-23.
        minutes: 0-59.
        seconds: 0-59 (60 during a leap second).
        hundredths: Sub-second fraction in hundredths of a second, or None
            when the field carries no decimal part.
    """

    hours: int
    minutes: int
    seconds: int
    hundredths: int | None = None


@dataclass(frozen=True)
class Date:
    """Calendar date from a ``ddmmyy`` field. The year is the two
    transmitted digits; no century is inferred."""

    day: int
    month: int
    year: int


@dataclass(frozen=True)
class Coordinate:
    """A latitude or longitude in NMEA degrees-and-minutes form.

    Attributes:
        sign: +1 for North/East, -1 for South/West.
        degrees: Whole degrees, never negative.
        minutes: Decimal minutes in [0, 60).

    Example:
        >>> Coordinate(sign=1, degrees=48, minutes=7.038).decimal_degrees
        48.1173
    """

    sign: int
    degrees: int
    minutes: float

    @property
    def decimal_degrees(self) -> float:
        """Signed decimal degrees: ``sign * (degrees + minutes / 60)``."""
        return self.sign * (self.degrees + self.minutes / 60.0)

    @classmethod
    def from_decimal_degrees(cls, value: float) -> "Coordinate":
        """Split signed decimal degrees into sign, degrees and minutes."""
        magnitude = abs(value)
        degrees = int(magnitude)
        return cls(
            sign=-1 if value < 0 else 1,
            degrees=degrees,
            minutes=(magnitude - degrees) * 60.0,
        )


@dataclass(frozen=True)
class Height:
    """A height value with its unit character (``"M"`` for meters)."""

    value: float
    units: str


@dataclass(frozen=True)
class SatelliteInView:
    """One satellite entry of a GSV sentence.

    Attributes:
        prn: Satellite PRN number.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees from true north (0-359).
        snr: Signal-to-noise ratio in dB-Hz, or None when the satellite
            is not being tracked.
    """

    prn: int
    elevation: int
    azimuth: int
    snr: int | None


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        time: UTC time of the fix. None if the field was empty.

        latitude: Latitude, positive=North. None if no fix.

        longitude: Longitude, positive=East. None if no fix.

        fix_quality: GPS fix quality indicator (0 when the field is empty):
            0 = Invalid (no fix)
            1 = GPS fix (SPS - Standard Positioning Service)
            2 = DGPS fix (Differential GPS)
            4 = RTK Fixed (centimeter-level accuracy)
            5 = RTK Float (decimeter-level accuracy, converging)
            6 = Dead reckoning mode

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better (< 1 = ideal, 1-2 = excellent,
            2-5 = good, > 10 = poor).

        altitude: Altitude above mean sea level with its unit.
            None if the field was empty.

        geoid_separation: Height of the geoid (MSL) above the WGS84
            ellipsoid with its unit. None if the field was empty.

        talker: Talker ID the sentence was received with.

        sentence: Raw sentence text the record was decoded from, without
            the line terminator. Empty for records built in code; not
            part of equality.
    """

    time: Time | None
    latitude: Coordinate | None
    longitude: Coordinate | None
    fix_quality: int
    num_satellites: int
    horizontal_dilution_of_precision: float
    altitude: Height | None
    geoid_separation: Height | None
    talker: str = DEFAULT_TALKER
    sentence: str = field(default="", compare=False, repr=False)

    @property
    def valid(self) -> bool:
        """Navigation validity: True only if fix_quality > 0."""
        return self.fix_quality > 0


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Attributes:
        latitude: Latitude, positive=North. None if the field was empty.
        longitude: Longitude, positive=East. None if the field was empty.
        time: UTC time of the position. None if the field was empty.
        status: 'A' (valid) or 'V' (void). None on receivers that omit
            the status field.
        talker: Talker ID the sentence was received with.
        sentence: Raw sentence text the record was decoded from, without
            the line terminator. Empty for records built in code; not
            part of equality.
    """

    latitude: Coordinate | None
    longitude: Coordinate | None
    time: Time | None
    status: str | None = None
    talker: str = DEFAULT_TALKER
    sentence: str = field(default="", compare=False, repr=False)

    @property
    def valid(self) -> bool:
        return self.status == "A"


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (DOP and Active Satellites) sentence.

    Attributes:
        mode: 'M' = manual 2D/3D selection, 'A' = automatic.
        fix_type: 1 = no fix, 2 = 2D fix, 3 = 3D fix.
        satellite_ids: Exactly 12 PRN slots used in the solution; unused
            slots are None.
        position_dop: PDOP.
        horizontal_dop: HDOP.
        vertical_dop: VDOP.
        talker: Talker ID the sentence was received with.
        sentence: Raw sentence text the record was decoded from, without
            the line terminator. Empty for records built in code; not
            part of equality.
    """

    mode: str | None
    fix_type: int
    satellite_ids: tuple[int | None, ...]
    position_dop: float
    horizontal_dop: float
    vertical_dop: float
    talker: str = DEFAULT_TALKER
    sentence: str = field(default="", compare=False, repr=False)

    @property
    def active_satellite_ids(self) -> tuple[int, ...]:
        """PRNs of the occupied slots, in transmitted order."""
        return tuple(prn for prn in self.satellite_ids if prn is not None)


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (Satellites in View) sentence.

    A full sky view is spread over ``total_messages`` sentences with up to
    four satellites each.

    Attributes:
        total_messages: Number of GSV sentences in this cycle.
        message_number: 1-based index of this sentence in the cycle.
        satellites_in_view: Total satellites in view across the cycle.
        satellites: Entries carried by this sentence (0-4).
        talker: Talker ID the sentence was received with.
        sentence: Raw sentence text the record was decoded from, without
            the line terminator. Empty for records built in code; not
            part of equality.
    """

    total_messages: int
    message_number: int
    satellites_in_view: int
    satellites: tuple[SatelliteInView, ...]
    talker: str = DEFAULT_TALKER
    sentence: str = field(default="", compare=False, repr=False)


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        time: UTC time of the fix. None if the field was empty.
        warning: 'A' = active (valid), 'V' = navigation receiver warning.
        latitude: Latitude, positive=North. None if no fix.
        longitude: Longitude, positive=East. None if no fix.
        ground_speed_knots: Speed over ground in knots.
        track_angle: Course over ground in degrees true. None when
            unavailable (typically while stationary).
        date: UTC date. None if the field was empty.
        magnetic_variation: Signed degrees, East positive and West
            negative. None when the receiver does not report it.
        mode: FAA mode indicator (NMEA 2.3+), None on older receivers.
        talker: Talker ID the sentence was received with.
        sentence: Raw sentence text the record was decoded from, without
            the line terminator. Empty for records built in code; not
            part of equality.
    """

    time: Time | None
    warning: str | None
    latitude: Coordinate | None
    longitude: Coordinate | None
    ground_speed_knots: float
    track_angle: float | None
    date: Date | None
    magnetic_variation: float | None = None
    mode: str | None = None
    talker: str = DEFAULT_TALKER
    sentence: str = field(default="", compare=False, repr=False)

    @property
    def valid(self) -> bool:
        return self.warning == "A"


# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    VTG provides velocity information - ground speed and heading (track).

    Attributes:
        track_true_degrees: Track relative to true north in degrees.
            None when stationary (GNSS cannot determine heading without
            movement).

        track_magnetic_degrees: Track relative to magnetic north.
            None if the receiver does not report it.

        speed_knots: Ground speed in knots. None if the field was empty.

        speed_kilometers_per_hour: Ground speed in km/h.
            None if the field was empty.

        mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous, 'D' = Differential, 'E' = Estimated,
            'N' = Not valid. None if the field was missing.

        talker: Talker ID the sentence was received with.

        sentence: Raw sentence text the record was decoded from, without
            the line terminator. Empty for records built in code; not
            part of equality.

    Example:
        >>> vtg.track_true_degrees
        54.7
        >>> vtg.speed_meters_per_second
        2.833...
    """

    track_true_degrees: float | None
    track_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None
    mode: str | None = None
    talker: str = DEFAULT_TALKER
    sentence: str = field(default="", compare=False, repr=False)

    @property
    def speed_meters_per_second(self) -> float | None:
        """Ground speed in m/s, derived from the km/h field."""
        if self.speed_kilometers_per_hour is None:
            return None
        return (
            self.speed_kilometers_per_hour
            / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND
        )

    @property
    def valid(self) -> bool:
        """True only if the mode is present and not 'N' (not valid)."""
        return self.mode is not None and self.mode != "N"


SentenceRecord = GGAData | GLLData | GSAData | GSVData | RMCData | VTGData
