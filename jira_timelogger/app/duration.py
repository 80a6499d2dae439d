# jira_timelogger/app/duration.py
"""Format elapsed seconds as JIRA duration phrases (e.g. '1h 5m')."""


def format_duration(seconds: float, rounding: str | None = None) -> str:
    """
    Format seconds as a JIRA time phrase.

    Args:
        seconds: Elapsed seconds (negative values are treated as 0)
        rounding: "min" rounds to the nearest minute and drops seconds;
            anything else keeps whole seconds

    Returns:
        Phrase such as '2h 5m' or '5m 17s'. Zero parts are omitted.
    """
    total = max(0, int(seconds))

    if rounding == "min":
        minutes = (total + 30) // 60
        h, m = divmod(minutes, 60)
        parts = [f"{h}h" if h else "", f"{m}m" if m else ""]
        return " ".join(p for p in parts if p) or "0m"

    m, s = divmod(total, 60)
    h, m = divmod(m, 60)
    parts = [f"{h}h" if h else "", f"{m}m" if m else "", f"{s}s" if s else ""]
    return " ".join(p for p in parts if p) or "0s"
