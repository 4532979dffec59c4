"""
Modelos del sistema de logros.

El catálogo de insignias lo define un administrador; nunca se borra, se
desactiva con is_active. Cada usuario gana una insignia como máximo una vez.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum

from judotrack.db.base_class import Base


class BadgeCategory(str, enum.Enum):
    TRAINING = "training"
    TECHNIQUE = "technique"
    CONSISTENCY = "consistency"
    WEIGHT = "weight"
    NUTRITION = "nutrition"


class CriteriaType(str, enum.Enum):
    COUNT = "count"              # Total de registros de la categoría
    STREAK = "streak"            # Racha actual de días consecutivos
    MILESTONE = "milestone"      # Señal externa
    ACHIEVEMENT = "achievement"  # Señal externa


class AchievementBadge(Base):
    __tablename__ = "achievement_badge"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    icon_url = Column(String, nullable=True)
    # Se guardan como texto: el catálogo puede contener tipos que este servicio no conoce
    category = Column(String(32), nullable=False)
    criteria_type = Column(String(32), nullable=False)
    criteria_value = Column(Integer, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class UserAchievement(Base):
    __tablename__ = "user_achievement"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    badge_id = Column(Integer, ForeignKey("achievement_badge.id"), nullable=False)
    earned_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    progress = Column(Integer, default=0, comment="Valor de la métrica al ganar el logro")
    level = Column(Integer, default=1)
    is_notified = Column(Boolean, default=False, nullable=False)

    badge = relationship("AchievementBadge")

    __table_args__ = (
        UniqueConstraint('user_id', 'badge_id', name='uq_user_badge'),
    )
