"""
Evaluador de reglas de logros.

Recibe las métricas agregadas del usuario por categoría, el catálogo de
insignias y las insignias ya ganadas, y devuelve los IDs de las insignias
recién conseguidas. No tiene efectos secundarios: crear el UserAchievement y
la notificación es trabajo de AchievementService.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, Iterable, List, Optional, Union

from judotrack.models.achievement import CriteriaType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryMetrics:
    count: int = 0
    current_streak: int = 0


# Conjunto de IDs o predicado sobre la insignia
Signals = Union[Collection[Any], Callable[[Any], bool], None]

_EMPTY_METRICS = CategoryMetrics()


def _field(badge: Any, name: str) -> Any:
    if isinstance(badge, dict):
        return badge.get(name)
    return getattr(badge, name, None)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _metrics_for(user_metrics: Dict[str, Any], category: Any) -> CategoryMetrics:
    metrics = user_metrics.get(_enum_value(category))
    if metrics is None:
        return _EMPTY_METRICS
    if isinstance(metrics, dict):
        return CategoryMetrics(
            count=metrics.get("count", 0) or 0,
            current_streak=metrics.get("current_streak", 0) or 0,
        )
    return metrics


def _signalled(signals: Signals, badge: Any, badge_id: Any) -> bool:
    if signals is None:
        return False
    if callable(signals):
        return bool(signals(badge))
    return badge_id in signals


def metric_value(user_metrics: Dict[str, Any], badge: Any) -> Optional[int]:
    """Valor de la métrica que compara la insignia, o None si no es calculable."""
    criteria_type = _enum_value(_field(badge, "criteria_type"))
    metrics = _metrics_for(user_metrics, _field(badge, "category"))
    if criteria_type == CriteriaType.COUNT.value:
        return metrics.count
    if criteria_type == CriteriaType.STREAK.value:
        return metrics.current_streak
    return None


def evaluate(
    user_metrics: Dict[str, Any],
    catalog: Iterable[Any],
    already_earned: Collection[Any],
    signals: Signals = None,
) -> List[Any]:
    """
    Devuelve los IDs de las insignias ganadas ahora, en el orden del catálogo.

    - count: la cuenta de la categoría alcanza criteria_value.
    - streak: la racha actual de la categoría alcanza criteria_value.
    - milestone / achievement: solo si `signals` lo indica.
    - Cualquier otro criteria_type se ignora y se registra en el log.

    Las insignias inactivas o ya ganadas nunca se devuelven, así que volver a
    evaluar con already_earned actualizado no produce duplicados.
    """
    earned = set(already_earned)
    newly_earned: List[Any] = []

    for badge in catalog:
        badge_id = _field(badge, "id")
        is_active = _field(badge, "is_active")
        # Sin campo is_active la insignia se considera activa
        if is_active is not None and not is_active:
            continue
        if badge_id in earned:
            continue

        criteria_type = _enum_value(_field(badge, "criteria_type"))
        criteria_value = _field(badge, "criteria_value") or 0

        if criteria_type in (CriteriaType.COUNT.value, CriteriaType.STREAK.value):
            achieved = metric_value(user_metrics, badge) >= criteria_value
        elif criteria_type in (CriteriaType.MILESTONE.value, CriteriaType.ACHIEVEMENT.value):
            achieved = _signalled(signals, badge, badge_id)
        else:
            logger.warning(
                f"Insignia {badge_id} con criteria_type desconocido '{criteria_type}', se omite"
            )
            continue

        if achieved:
            newly_earned.append(badge_id)
            earned.add(badge_id)

    return newly_earned
