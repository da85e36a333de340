# engine/stats.py

from typing import List, Tuple

from config import STAT_MAX, STAT_MIN

STAT_LABELS = {
    "motivation": "Student Motivation",
    "authority": "Professor Authority",
    "energy": "Energy (Caffeine)",
}

STAT_ORDER = ("motivation", "authority", "energy")


def clamp_stat(value, low: int = STAT_MIN, high: int = STAT_MAX) -> int:
    """
    Clamp a stat for display. The service is asked for 0-100 but nothing
    stops it from drifting outside.
    """
    try:
        value = int(value)
    except (TypeError, ValueError):
        value = low
    return max(low, min(high, value))


def display_stats(stats) -> List[Tuple[str, str, int]]:
    """
    (key, label, clamped value) in display order.
    Accepts a GameStats or a plain dict.
    """
    out = []
    for key in STAT_ORDER:
        raw = stats.get(key) if isinstance(stats, dict) else getattr(stats, key, None)
        out.append((key, STAT_LABELS[key], clamp_stat(raw)))
    return out


def render_bar(value: int, width: int = 20) -> str:
    value = clamp_stat(value)
    filled = round(width * value / STAT_MAX)
    return "[" + "#" * filled + "-" * (width - filled) + "]"
