"""Text rows for the flare detail panel."""

from datetime import datetime

from solarflare3d.i18n import t
from solarflare3d.models import FlareRecord


def _format_time(dt: datetime | None, na: str) -> str:
    if dt is None:
        return na
    return dt.strftime("%Y-%m-%d %H:%M UTC")


def flare_detail_rows(flare: FlareRecord, lang: str = "en") -> list[tuple[str, str]]:
    """Return (label, value) pairs for the detail panel.

    Missing values show as the localized "N/A".
    """
    na = t("not_available", lang)
    instruments = ", ".join(i.display_name for i in flare.instruments if i.display_name)
    return [
        (t("row_id", lang), flare.flr_id or na),
        (t("row_class", lang), flare.class_type or na),
        (t("row_start", lang), _format_time(flare.begin_time, na)),
        (t("row_peak", lang), _format_time(flare.peak_time, na)),
        (t("row_region", lang), flare.active_region_num or na),
        (t("row_source", lang), flare.source_location or na),
        (t("row_instruments", lang), instruments or na),
    ]


def linked_event_lines(flare: FlareRecord) -> list[str]:
    """One line per linked event. Empty when the flare has none."""
    return [ev.activity_id or "Event" for ev in flare.linked_events]
