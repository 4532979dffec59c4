from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, Enum, ForeignKey, Index
from sqlalchemy.sql import func
import enum

from judotrack.db.base_class import Base


class NotificationType(str, enum.Enum):
    ACHIEVEMENT = "achievement"
    ASSIGNMENT = "assignment"
    REMINDER = "reminder"
    SYSTEM = "system"


class Notification(Base):
    """Notificación visible para el usuario dentro de la aplicación."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    notification_type = Column(Enum(NotificationType), default=NotificationType.SYSTEM, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    read_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index('idx_notification_user_read', 'user_id', 'is_read'),
    )
