"""Wall-clock and uptime helpers."""

import time
from datetime import datetime, timezone

# Captured once when the process imports the package.
PROCESS_STARTED_AT = time.monotonic()


def utc_timestamp(now: datetime | None = None) -> str:
    """Return ``now`` (default: current time) as an RFC3339 UTC string."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_duration(seconds: float) -> str:
    """
    Render a duration rounded to whole seconds.

    Follows the ``1h2m3s`` convention: the largest unit present leads and
    every smaller unit is spelled out, so one minute is ``1m0s``.
    """

    total = int(seconds + 0.5) if seconds > 0 else 0
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)

    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def uptime() -> str:
    """Elapsed time since process start."""
    return format_duration(time.monotonic() - PROCESS_STARTED_AT)
