import logging
from collections import Counter
from datetime import date, datetime, timezone
from typing import Collection, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from judotrack.core.exceptions import ConflictError, NotFoundError
from judotrack.models.achievement import AchievementBadge, UserAchievement
from judotrack.models.notification import NotificationType
from judotrack.repositories.achievement import achievement_badge_repository, user_achievement_repository
from judotrack.repositories.notification import notification_repository
from judotrack.schemas.achievement import (
    AchievementBadgeCreate, AchievementBadgeUpdate, AchievementStats
)
from judotrack.schemas.notification import NotificationCreate
from judotrack.services.achievement_evaluator import evaluate, metric_value
from judotrack.services.achievement_metrics import achievement_metrics_service

logger = logging.getLogger(__name__)

ACHIEVEMENT_NOTIFICATION_TITLE = "¡Nuevo logro desbloqueado!"

DEFAULT_BADGES = [
    # Entrenamiento
    {"name": "Primer Entrenamiento", "description": "Completa tu primera sesión de entrenamiento",
     "category": "training", "criteria_type": "count", "criteria_value": 1},
    {"name": "Guerrero del Tatami", "description": "Completa 10 sesiones de entrenamiento",
     "category": "training", "criteria_type": "count", "criteria_value": 10},
    {"name": "Judoka Dedicado", "description": "Completa 50 sesiones de entrenamiento",
     "category": "training", "criteria_type": "count", "criteria_value": 50},
    {"name": "Maestro del Entrenamiento", "description": "Completa 100 sesiones de entrenamiento",
     "category": "training", "criteria_type": "count", "criteria_value": 100},
    # Técnicas
    {"name": "Primera Técnica", "description": "Registra tu primera técnica de judo",
     "category": "technique", "criteria_type": "count", "criteria_value": 1},
    {"name": "Coleccionista de Técnicas", "description": "Registra 10 técnicas diferentes",
     "category": "technique", "criteria_type": "count", "criteria_value": 10},
    {"name": "Enciclopedia Viviente", "description": "Registra 25 técnicas diferentes",
     "category": "technique", "criteria_type": "count", "criteria_value": 25},
    # Constancia
    {"name": "Racha Iniciada", "description": "Entrena 3 días seguidos",
     "category": "consistency", "criteria_type": "streak", "criteria_value": 3},
    {"name": "Constancia de Hierro", "description": "Entrena 7 días seguidos",
     "category": "consistency", "criteria_type": "streak", "criteria_value": 7},
    {"name": "Disciplina de Samurai", "description": "Entrena 30 días seguidos",
     "category": "consistency", "criteria_type": "streak", "criteria_value": 30},
    # Peso
    {"name": "Primer Registro", "description": "Registra tu peso por primera vez",
     "category": "weight", "criteria_type": "count", "criteria_value": 1},
    {"name": "Seguimiento Consistente", "description": "Registra tu peso 10 veces",
     "category": "weight", "criteria_type": "count", "criteria_value": 10},
    {"name": "Monitor de Peso", "description": "Registra tu peso 30 veces",
     "category": "weight", "criteria_type": "count", "criteria_value": 30},
]


class AchievementService:
    # === Catálogo ===

    def seed_default_badges(self, db: Session) -> int:
        """
        Crea el catálogo por defecto si todavía no hay ninguna insignia.

        Returns:
            Número de insignias creadas
        """
        if achievement_badge_repository.count(db) > 0:
            return 0

        for badge in DEFAULT_BADGES:
            db.add(AchievementBadge(is_active=True, **badge))
        db.commit()
        logger.info(f"Catálogo de logros inicializado con {len(DEFAULT_BADGES)} insignias")
        return len(DEFAULT_BADGES)

    def get_catalog(self, db: Session, active_only: bool = True) -> List[AchievementBadge]:
        return achievement_badge_repository.get_catalog(db, active_only=active_only)

    def create_badge(self, db: Session, badge_in: AchievementBadgeCreate) -> AchievementBadge:
        data = badge_in.model_dump()
        data["category"] = badge_in.category.value
        data["criteria_type"] = badge_in.criteria_type.value
        return achievement_badge_repository.create(db, obj_in=data)

    def update_badge(self, db: Session, badge_id: int, badge_in: AchievementBadgeUpdate) -> AchievementBadge:
        badge = achievement_badge_repository.get(db, id=badge_id)
        if not badge:
            raise NotFoundError("Insignia no encontrada")
        return achievement_badge_repository.update(db, db_obj=badge, obj_in=badge_in)

    # === Logros del usuario ===

    def get_user_achievements(self, db: Session, user_id: int) -> List[UserAchievement]:
        return user_achievement_repository.get_by_user(db, user_id=user_id)

    def check_achievements(
        self,
        db: Session,
        user_id: int,
        signals: Optional[Collection[int]] = None,
        reference_date: Optional[date] = None
    ) -> List[UserAchievement]:
        """
        Evalúa el catálogo para el usuario y registra los logros nuevos.

        Por cada insignia conseguida se crea exactamente un UserAchievement y
        una notificación, todo en la misma transacción.

        Args:
            db: Sesión de base de datos
            user_id: ID del usuario
            signals: IDs de insignias milestone/achievement que el cliente da por cumplidas
            reference_date: Día de referencia para las rachas (hoy por defecto)

        Returns:
            Lista de logros recién creados (con su insignia cargada)
        """
        metrics = achievement_metrics_service.collect(db, user_id, reference_date)
        catalog = achievement_badge_repository.get_catalog(db, active_only=True)
        already_earned = user_achievement_repository.get_earned_badge_ids(db, user_id=user_id)

        new_badge_ids = evaluate(metrics, catalog, already_earned, signals=set(signals or ()))
        if not new_badge_ids:
            return []

        badges_by_id = {badge.id: badge for badge in catalog}
        now = datetime.now(timezone.utc)
        created: List[UserAchievement] = []

        try:
            for badge_id in new_badge_ids:
                badge = badges_by_id[badge_id]
                progress = metric_value(metrics, badge)
                achievement = UserAchievement(
                    user_id=user_id,
                    badge_id=badge_id,
                    earned_at=now,
                    progress=progress if progress is not None else badge.criteria_value,
                    level=1,
                    is_notified=False,
                )
                db.add(achievement)
                notification_repository.add(db, notification=NotificationCreate(
                    user_id=user_id,
                    title=ACHIEVEMENT_NOTIFICATION_TITLE,
                    message=f"Has conseguido: {badge.name}",
                    notification_type=NotificationType.ACHIEVEMENT,
                ))
                created.append(achievement)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Conflicto registrando logros del usuario {user_id}: {e}")
            raise ConflictError("Los logros de este usuario ya se están registrando")

        for achievement in created:
            db.refresh(achievement)
        logger.info(f"Usuario {user_id} consiguió {len(created)} logro(s): {new_badge_ids}")
        return created

    def mark_notified(self, db: Session, user_id: int, achievement_id: int) -> UserAchievement:
        achievement = user_achievement_repository.get(db, achievement_id=achievement_id, user_id=user_id)
        if not achievement:
            raise NotFoundError("Logro no encontrado")
        if not achievement.is_notified:
            achievement.is_notified = True
            db.add(achievement)
            db.commit()
            db.refresh(achievement)
        return achievement

    def get_stats(self, db: Session, user_id: int) -> AchievementStats:
        """
        Progreso del usuario sobre el catálogo activo.
        """
        catalog = achievement_badge_repository.get_catalog(db, active_only=True)
        earned_ids = user_achievement_repository.get_earned_badge_ids(db, user_id=user_id)

        total = len(catalog)
        earned = [badge for badge in catalog if badge.id in earned_ids]
        completion_rate = round(len(earned) / total * 100, 2) if total else 0.0

        return AchievementStats(
            total_badges=total,
            earned_badges=len(earned),
            completion_rate=completion_rate,
            category_counts=dict(Counter(badge.category for badge in catalog)),
            earned_category_counts=dict(Counter(badge.category for badge in earned)),
        )

    def get_recent(self, db: Session, user_id: int, days: int = 30) -> List[UserAchievement]:
        return user_achievement_repository.get_recent(db, user_id=user_id, days=days)


achievement_service = AchievementService()
