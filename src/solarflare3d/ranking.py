"""Flare class parsing, severity ranking, and marker styling."""

import re
from collections.abc import Sequence

from solarflare3d import config
from solarflare3d.geometry import flare_position
from solarflare3d.models import FlareRecord, FlareView

_CLASS_TOKEN = re.compile(r"([ABCMX])(\d+\.?\d*)")

# Score weight per class letter: each letter is a decade of peak X-ray flux
_SCORE_WEIGHT: dict[str, float] = {"A": 1, "B": 10, "C": 100, "M": 1000, "X": 10000}

# Marker intensity base per class letter
_BASE_INTENSITY: dict[str, float] = {"A": 0.3, "B": 0.5, "C": 1.0, "M": 2.0, "X": 4.0}

_DEFAULT_COLOR = "#ff8800"
_CLASS_COLOR: dict[str, str] = {"X": "#ff0000", "M": "#ff6600", "C": "#ffaa00"}
_MINOR_COLOR = "#ffdd00"


def parse_flare_class(class_type: str | None) -> tuple[str, float] | None:
    """Extract (letter, subgrade) from a class string such as "M3.4".

    Returns None when no class token is found.
    """
    if not isinstance(class_type, str) or not class_type:
        return None
    match = _CLASS_TOKEN.search(class_type)
    if match is None:
        return None
    return match.group(1), float(match.group(2))


def flare_score(class_type: str | None) -> float:
    """Severity score: letter weight × subgrade. Unparseable classes score 0."""
    parsed = parse_flare_class(class_type)
    if parsed is None:
        return 0.0
    letter, subgrade = parsed
    return _SCORE_WEIGHT[letter] * subgrade


def flare_intensity(class_type: str | None) -> float:
    """Marker intensity multiplier. Unparseable classes get 1.0."""
    parsed = parse_flare_class(class_type)
    if parsed is None:
        return 1.0
    letter, subgrade = parsed
    return _BASE_INTENSITY[letter] * (1 + subgrade / 5)


def flare_color(class_type: str | None) -> str:
    """Marker colour keyed on the leading class letter."""
    if not isinstance(class_type, str) or not class_type:
        return _DEFAULT_COLOR
    return _CLASS_COLOR.get(class_type[0], _MINOR_COLOR)


def rank_flares(batch: Sequence[FlareRecord]) -> list[FlareRecord]:
    """Placeable flares (with a source location), most severe first.

    sorted() is stable, so equal scores keep their batch order.
    """
    placeable = [f for f in batch if f.source_location]
    return sorted(placeable, key=lambda f: flare_score(f.class_type), reverse=True)


def select_most_significant(batch: Sequence[FlareRecord]) -> FlareRecord | None:
    """Pick the flare to display from one DONKI response.

    Args:
        batch: Flare records in API order.

    Returns:
        The highest-scoring flare with a source location. If none has a
        location, the first record of the batch. None for an empty batch.
    """
    if not batch:
        return None
    ranked = rank_flares(batch)
    if ranked:
        return ranked[0]
    return batch[0]


def build_flare_view(flare: FlareRecord | None) -> FlareView:
    """Derive everything the renderers need from the selected flare."""
    if flare is None:
        return FlareView(flare=None, position=None, intensity=1.0, color=_DEFAULT_COLOR)

    position = None
    if flare.source_location:
        position = flare_position(
            flare.source_location, config.SUN_RADIUS + config.MARKER_OFFSET
        )
    return FlareView(
        flare=flare,
        position=position,
        intensity=flare_intensity(flare.class_type),
        color=flare_color(flare.class_type),
    )
