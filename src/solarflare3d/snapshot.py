"""CLI entry point for a static flare snapshot.

Edit the start date below (None = one week ago), then run:
    uv run python -m solarflare3d.snapshot
"""

from datetime import date

from dotenv import load_dotenv

load_dotenv()

from solarflare3d.donki import default_start_date, flare_window, run  # noqa: E402
from solarflare3d.renderers.static import save_static_chart  # noqa: E402

start: date | None = None

if __name__ == "__main__":
    view = run(flare_window(start or default_start_date()))
    path = save_static_chart(view)
    print(f"Saved: {path}")
