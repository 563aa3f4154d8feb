"""Rate limit state parsed from response headers.

The API reports its budget in these headers:

- ``x-ratelimit-limit``: requests allowed per window
- ``x-ratelimit-remaining``: requests left in the current window
- ``x-ratelimit-reset``: unix timestamp when the window resets
- ``retry-after``: seconds to wait (429 responses), or an HTTP date
"""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

APPROACHING_LIMIT_RATIO = 0.2


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_retry_after(value: str | None, *, now: datetime | None = None) -> float | None:
    """Parse a Retry-After header value into seconds.

    Accepts delta-seconds (integer or decimal) and HTTP dates. Returns None
    for missing, unparseable or non-finite values; negative values clamp to 0.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return max(0.0, seconds) if math.isfinite(seconds) else None
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    return max(0.0, (when - now).total_seconds())


@dataclass(frozen=True)
class RateLimitState:
    """Snapshot of the server's rate limit budget."""

    limit: int | None = None
    remaining: int | None = None
    reset_time: int | None = None
    retry_after: float | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimitState | None:
        """Build state from response headers; None when none are present."""
        lowered = {k.lower(): v for k, v in headers.items()}
        limit = _to_int(lowered.get("x-ratelimit-limit"))
        remaining = _to_int(lowered.get("x-ratelimit-remaining"))
        reset_time = _to_int(lowered.get("x-ratelimit-reset"))
        retry_after = parse_retry_after(lowered.get("retry-after"))
        if limit is None and remaining is None and reset_time is None and retry_after is None:
            return None
        return cls(limit=limit, remaining=remaining, reset_time=reset_time, retry_after=retry_after)

    @property
    def is_rate_limited(self) -> bool:
        return self.remaining is not None and self.remaining <= 0

    @property
    def is_approaching_limit(self) -> bool:
        if self.limit is None or self.remaining is None or self.limit <= 0:
            return False
        return self.remaining / self.limit < APPROACHING_LIMIT_RATIO

    def time_until_reset(self, now: float | None = None) -> float:
        if self.reset_time is None:
            return 0.0
        now = time.time() if now is None else now
        return max(0.0, self.reset_time - now)

    def suggested_delay(self, now: float | None = None) -> float:
        """Seconds to wait before the next request, 0 if none is needed."""
        if self.retry_after is not None:
            return self.retry_after
        if self.is_rate_limited:
            return self.time_until_reset(now)
        if self.is_approaching_limit and self.remaining:
            return self.time_until_reset(now) / self.remaining
        return 0.0
