"""
Clasificador de actividad de deportistas.

A partir de las fechas de las sesiones recientes calcula cuántas caen en la
ventana semanal y deriva el estado active / moderate / inactive. Función pura:
no consulta la base de datos ni guarda nada, el estado se recalcula en cada
lectura.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Sequence

from judotrack.core.exceptions import ValidationError
from judotrack.schemas.activity import ActivityStatus, ActivitySummary, GroupActivitySummary

logger = logging.getLogger(__name__)

WINDOW_DAYS = 7
ACTIVE_THRESHOLD = 3


def parse_session_date(value: Any) -> date:
    """
    Normaliza la fecha de una sesión a `date`.

    Acepta `date`, `datetime` o una cadena ISO-8601 ("2024-05-01" o
    "2024-05-01T18:30:00"). Cualquier otra cosa es un error del llamador.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            # Python < 3.11 no acepta el sufijo Z
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValidationError(f"Fecha de sesión inválida: {value!r}")
    raise ValidationError(f"Fecha de sesión inválida: {value!r}")


def _session_date(session: Any) -> date:
    if isinstance(session, dict):
        if "date" not in session:
            raise ValidationError("La sesión no tiene campo 'date'")
        return parse_session_date(session["date"])
    # También se aceptan fechas sueltas (datetime tiene un método date)
    if isinstance(session, (date, str)):
        return parse_session_date(session)
    if hasattr(session, "date"):
        return parse_session_date(session.date)
    return parse_session_date(session)


def status_for_count(weekly_count: int, active_threshold: int = ACTIVE_THRESHOLD) -> ActivityStatus:
    if weekly_count >= active_threshold:
        return ActivityStatus.active
    if weekly_count >= 1:
        return ActivityStatus.moderate
    return ActivityStatus.inactive


def classify(
    sessions: Iterable[Any],
    reference_date: Any,
    window_days: int = WINDOW_DAYS,
    active_threshold: int = ACTIVE_THRESHOLD,
) -> ActivitySummary:
    """
    Cuenta las sesiones dentro de [reference_date - window_days, reference_date]
    (ambos extremos incluidos) y clasifica el resultado.

    Las sesiones con fecha posterior a reference_date no cuentan. El orden de
    la lista es indiferente.
    """
    reference = parse_session_date(reference_date)
    window_start = reference - timedelta(days=window_days)

    weekly_count = 0
    for session in sessions:
        session_date = _session_date(session)
        if window_start <= session_date <= reference:
            weekly_count += 1

    return ActivitySummary(
        weekly_count=weekly_count,
        status=status_for_count(weekly_count, active_threshold),
    )


def summarize_group(summaries: Sequence[ActivitySummary]) -> GroupActivitySummary:
    """Resumen de un grupo de deportistas (por ejemplo, los de un entrenador)."""
    total = len(summaries)
    if total == 0:
        return GroupActivitySummary()

    active = sum(1 for s in summaries if s.status == ActivityStatus.active)
    average = sum(s.weekly_count for s in summaries) / total
    return GroupActivitySummary(
        total_athletes=total,
        active_athletes=active,
        average_weekly_sessions=round(average, 2),
    )
