from datetime import datetime, timezone

import matplotlib
import pytest

matplotlib.use("Agg")

from solarflare3d.models import FlareRecord  # noqa: E402


def make_flare(
    flr_id: str = "2024-05-14T16:46:00-FLR-001",
    class_type: str | None = "M1.0",
    source_location: str | None = "N10E20",
    **kwargs,
) -> FlareRecord:
    return FlareRecord(
        flr_id=flr_id,
        class_type=class_type,
        source_location=source_location,
        begin_time=kwargs.pop("begin_time", datetime(2024, 5, 14, 16, 46, tzinfo=timezone.utc)),
        peak_time=kwargs.pop("peak_time", datetime(2024, 5, 14, 16, 51, tzinfo=timezone.utc)),
        **kwargs,
    )


@pytest.fixture
def flare_factory():
    return make_flare


@pytest.fixture
def donki_payload() -> list[dict]:
    """Trimmed copy of a real DONKI FLR response."""
    return [
        {
            "flrID": "2024-05-14T12:40:00-FLR-001",
            "instruments": [{"displayName": "GOES-P: EXIS 1.0-8.0"}],
            "beginTime": "2024-05-14T12:40Z",
            "peakTime": "2024-05-14T12:51Z",
            "endTime": "2024-05-14T13:10Z",
            "classType": "M4.4",
            "sourceLocation": "S18W84",
            "activeRegionNum": 13664,
            "linkedEvents": None,
            "link": "https://webtools.ccmc.gsfc.nasa.gov/DONKI/view/FLR/30871/-1",
        },
        {
            "flrID": "2024-05-14T16:46:00-FLR-001",
            "instruments": [
                {"displayName": "GOES-P: EXIS 1.0-8.0"},
                {"displayName": "SDO: AIA 131"},
            ],
            "beginTime": "2024-05-14T16:46Z",
            "peakTime": "2024-05-14T16:51Z",
            "endTime": "2024-05-14T17:02Z",
            "classType": "X8.7",
            "sourceLocation": "S19W90",
            "activeRegionNum": 13664,
            "linkedEvents": [{"activityID": "2024-05-14T17:36:00-CME-001"}],
            "link": "https://webtools.ccmc.gsfc.nasa.gov/DONKI/view/FLR/30874/-1",
        },
        {
            "flrID": "2024-05-15T08:13:00-FLR-001",
            "instruments": [{"displayName": "GOES-P: EXIS 1.0-8.0"}],
            "beginTime": "2024-05-15T08:13Z",
            "peakTime": "2024-05-15T08:37Z",
            "endTime": None,
            "classType": "X3.4",
            "sourceLocation": "",
            "activeRegionNum": None,
            "linkedEvents": [],
            "link": None,
        },
    ]
