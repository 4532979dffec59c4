"""Cálculo de rachas de días consecutivos."""

from datetime import date, timedelta
from typing import Iterable, Optional


def current_streak(dates: Iterable[date], reference_date: Optional[date] = None) -> int:
    """
    Días consecutivos con actividad que terminan en reference_date.

    Si no hubo actividad ese día pero sí el anterior la racha sigue viva y se
    cuenta desde ayer.
    """
    today = reference_date or date.today()
    unique_dates = {d for d in dates if d <= today}
    if not unique_dates:
        return 0

    cursor = today
    if cursor not in unique_dates:
        cursor = today - timedelta(days=1)
        if cursor not in unique_dates:
            return 0

    streak = 0
    while cursor in unique_dates:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(dates: Iterable[date]) -> int:
    """Racha más larga de días consecutivos en el conjunto de fechas."""
    ordered = sorted(set(dates))
    if not ordered:
        return 0

    max_streak = 1
    streak = 1
    prev_date = ordered[0]
    for current_date in ordered[1:]:
        if current_date == prev_date + timedelta(days=1):
            streak += 1
        else:
            max_streak = max(max_streak, streak)
            streak = 1
        prev_date = current_date

    # No olvidar la última racha
    return max(max_streak, streak)
