"""DONKI client: fetch flare records for a date window and pick the one to display."""

import logging
from datetime import date, timedelta

import httpx

from solarflare3d import config
from solarflare3d.models import FlareQuery, FlareRecord, FlareView
from solarflare3d.ranking import build_flare_view, select_most_significant

logger = logging.getLogger(__name__)


class FlareFetchError(Exception):
    """DONKI call failure. `status` is the HTTP status code when there was one."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


def default_start_date(today: date | None = None) -> date:
    """Start of the default window: one window length before today."""
    today = today or date.today()
    return today - timedelta(days=config.WINDOW_DAYS)


def flare_window(start_date: date) -> FlareQuery:
    """Query window starting at start_date and spanning WINDOW_DAYS."""
    return FlareQuery(
        start_date=start_date,
        end_date=start_date + timedelta(days=config.WINDOW_DAYS),
    )


def fetch_flares(query: FlareQuery) -> tuple[FlareRecord, ...]:
    """Call DONKI FLR for the query window.

    Args:
        query: Date window to search.

    Returns:
        Flare records in API order. Empty when DONKI has nothing for the window.

    Raises:
        FlareFetchError: On non-2xx status, transport failure, or a body that
            is not a JSON array.
    """
    params = {
        "startDate": query.start_date.isoformat(),
        "endDate": query.end_date.isoformat(),
        "api_key": config.api_key(),
    }
    logger.info("Fetching DONKI flares %s → %s", params["startDate"], params["endDate"])
    try:
        resp = httpx.get(
            f"{config.DONKI_BASE_URL}/FLR", params=params, timeout=config.REQUEST_TIMEOUT
        )
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("DONKI returned HTTP %s", status)
        raise FlareFetchError(f"HTTP error! status: {status}", status=status) from e
    except httpx.HTTPError as e:
        logger.warning("DONKI request failed: %s", e)
        raise FlareFetchError(f"Request failed: {e}") from e

    # DONKI answers an empty window with an empty body on some deployments
    if not resp.content.strip():
        return ()
    try:
        data = resp.json()
    except ValueError as e:
        raise FlareFetchError(f"Invalid JSON from DONKI: {e}", status=resp.status_code) from e
    if data is None:
        return ()
    if not isinstance(data, list):
        raise FlareFetchError(
            f"Unexpected DONKI payload: {type(data).__name__}", status=resp.status_code
        )

    try:
        records = tuple(FlareRecord.from_json(obj) for obj in data if isinstance(obj, dict))
    except (TypeError, AttributeError, ValueError) as e:
        logger.warning("Malformed DONKI flare record: %s", e)
        raise FlareFetchError(
            f"Unexpected DONKI payload: {e}", status=resp.status_code
        ) from e
    logger.info("Received %d flare records", len(records))
    return records


def run(query: FlareQuery) -> FlareView:
    """Top-level entry point: fetch a window and return the view of its top flare.

    Raises:
        FlareFetchError: When the fetch fails.
    """
    return build_flare_view(select_most_significant(fetch_flares(query)))
