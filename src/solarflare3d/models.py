"""Data model definitions: explicit boundaries between the fetch and render layers."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any


def _text(value: Any) -> str | None:
    """Non-empty strings pass through. Anything else from the JSON becomes None."""
    return value if isinstance(value, str) and value else None


def _parse_donki_time(value: Any) -> datetime | None:
    """Parse DONKI's "2024-05-14T16:51Z" timestamps into aware UTC datetimes."""
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


@dataclass(frozen=True)
class Instrument:
    """An observing instrument attached to a flare record."""

    display_name: str  # "GOES-P: EXIS 1.0-8.0"


@dataclass(frozen=True)
class LinkedEvent:
    """Another DONKI activity linked to a flare (CME, SEP, ...)."""

    activity_id: str | None  # "2024-05-14T17:12:00-CME-001"


@dataclass(frozen=True)
class FlareRecord:
    """A single DONKI FLR event. Immutable once deserialized."""

    flr_id: str
    class_type: str | None  # "X1.7", "M3.4"
    source_location: str | None  # "N15W30"
    begin_time: datetime | None
    peak_time: datetime | None
    end_time: datetime | None = None
    active_region_num: str | None = None
    instruments: tuple[Instrument, ...] = ()
    linked_events: tuple[LinkedEvent, ...] = ()
    link: str | None = None

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> "FlareRecord":
        """Build a FlareRecord from one element of the DONKI FLR JSON array.

        Missing keys, null values and values of the wrong JSON type become None
        (or empty tuples). An empty sourceLocation is treated as absent.
        Instrument and linked-event entries that are not objects are skipped.
        """
        region = obj.get("activeRegionNum")
        return cls(
            flr_id=str(obj.get("flrID") or ""),
            class_type=_text(obj.get("classType")),
            source_location=_text(obj.get("sourceLocation")),
            begin_time=_parse_donki_time(obj.get("beginTime")),
            peak_time=_parse_donki_time(obj.get("peakTime")),
            end_time=_parse_donki_time(obj.get("endTime")),
            active_region_num=str(region) if region not in (None, "") else None,
            instruments=tuple(
                Instrument(display_name=str(i.get("displayName") or ""))
                for i in obj.get("instruments") or ()
                if isinstance(i, dict)
            ),
            linked_events=tuple(
                LinkedEvent(activity_id=_text(e.get("activityID")))
                for e in obj.get("linkedEvents") or ()
                if isinstance(e, dict)
            ),
            link=_text(obj.get("link")),
        )


@dataclass(frozen=True)
class HeliographicCoordinate:
    """Sun-surface location as seen from Earth."""

    lat_deg: float  # North positive
    lon_deg: float  # East positive, West negative


@dataclass(frozen=True)
class Cartesian3D:
    """Point on the Sun sphere in scene coordinates (+y north, +z toward the camera)."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class FlareQuery:
    """DONKI date window. Both ends inclusive, ISO dates on the wire."""

    start_date: date
    end_date: date


@dataclass(frozen=True)
class FlareView:
    """The sole input to renderers. Everything the scene needs about one flare."""

    flare: FlareRecord | None
    position: Cartesian3D | None  # None → no marker drawn
    intensity: float
    color: str
