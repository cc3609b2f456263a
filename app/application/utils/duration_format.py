from __future__ import annotations


def format_duration(minutes: int) -> str:
    """Short label for the summary, e.g. "2 hrs", "1 hr 30 min", "45 min"."""
    if minutes <= 0:
        return "0 min"
    hours, mins = divmod(minutes, 60)
    hours_text = f"{hours} hr{'s' if hours > 1 else ''}" if hours else ""
    if mins == 0:
        return hours_text
    if hours_text:
        return f"{hours_text} {mins} min"
    return f"{mins} min"
