"""Reporting period helpers."""

from datetime import date, timedelta

DEFAULT_RANGE_DAYS = 90
RANGE_PRESETS = {"30": 30, "90": 90}


def _coerce_date(value: date | str | None) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def resolve_period(
    range_preset: str | None,
    date_from: date | str | None,
    date_to: date | str | None,
    today: date,
) -> tuple[date, date]:
    """Return concrete period bounds for a preset or explicit range.

    Explicit bounds win. Presets ``"30"`` and ``"90"`` cover the trailing
    number of days ending at ``date_to`` (or today). ``"custom"`` without
    bounds and unknown presets fall back to 90 days.

    Args:
        range_preset: Preset identifier ("30", "90" or "custom").
        date_from: Optional explicit lower bound.
        date_to: Optional explicit upper bound.
        today: Reference date for relative presets.

    Returns:
        tuple[date, date]: Inclusive lower and upper bounds.

    Raises:
        ValueError: If an explicit bound is not an ISO date.
    """
    end = _coerce_date(date_to) or today
    start = _coerce_date(date_from)
    if start is None:
        days = RANGE_PRESETS.get(str(range_preset or ""), DEFAULT_RANGE_DAYS)
        start = end - timedelta(days=days)
    return start, end


__all__ = ["DEFAULT_RANGE_DAYS", "RANGE_PRESETS", "resolve_period"]
