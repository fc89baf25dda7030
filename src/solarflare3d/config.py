"""Runtime settings. Values come from the environment (.env is loaded by entry points)."""

import os

DONKI_BASE_URL = os.environ.get("DONKI_BASE_URL", "https://api.nasa.gov/DONKI")
REQUEST_TIMEOUT = float(os.environ.get("DONKI_TIMEOUT", "10"))

WINDOW_DAYS = 7  # Length of one DONKI query window, and default look-back from today

SUN_RADIUS = 2.0  # Scene units
MARKER_OFFSET = 0.05  # Lift the flare marker just above the surface


def api_key() -> str:
    """NASA API key. Falls back to the rate-limited public DEMO_KEY."""
    return os.environ.get("NASA_API_KEY") or "DEMO_KEY"
