"""View state container and its transitions.

Each fetch is tagged with a generation number taken from begin_fetch().
Only a result or error carrying the current generation is applied, so a
slow response for an earlier date cannot overwrite a newer selection.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date

from solarflare3d.models import FlareRecord
from solarflare3d.ranking import select_most_significant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    """Everything the UI shows besides the scene itself."""

    start_date: date
    flare: FlareRecord | None = None
    loading: bool = False
    error: str | None = None
    generation: int = 0


def initial_state(start_date: date) -> ViewState:
    return ViewState(start_date=start_date)


def begin_fetch(state: ViewState, start_date: date) -> ViewState:
    """Start a new request. The previously selected flare stays on screen."""
    return replace(
        state,
        start_date=start_date,
        loading=True,
        error=None,
        generation=state.generation + 1,
    )


def apply_fetch_result(
    state: ViewState, generation: int, batch: Sequence[FlareRecord]
) -> ViewState:
    """Replace the selection with the top flare of batch (None when empty)."""
    if generation != state.generation:
        logger.info(
            "Dropping stale flare result (generation %d, current %d)",
            generation,
            state.generation,
        )
        return state
    return replace(state, flare=select_most_significant(batch), loading=False)


def apply_fetch_error(state: ViewState, generation: int, message: str) -> ViewState:
    """Record a failed request. The prior selection is left untouched."""
    if generation != state.generation:
        logger.info(
            "Dropping stale flare error (generation %d, current %d)",
            generation,
            state.generation,
        )
        return state
    return replace(state, error=message, loading=False)
