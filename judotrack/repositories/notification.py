from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from judotrack.models.notification import Notification
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.notification import NotificationCreate


class NotificationRepository(BaseRepository[Notification, NotificationCreate, NotificationCreate]):
    def get_for_user(
        self, db: Session, *, user_id: int, unread_only: bool = False, skip: int = 0, limit: int = 50
    ) -> List[Notification]:
        """
        Notificaciones de un usuario, más recientes primero.
        """
        query = db.query(Notification).filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.is_read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).offset(skip).limit(limit).all()

    def count_unread(self, db: Session, *, user_id: int) -> int:
        return db.query(Notification).filter(
            Notification.user_id == user_id,
            Notification.is_read.is_(False)
        ).count()

    def mark_as_read(self, db: Session, *, notification: Notification) -> Notification:
        if not notification.is_read:
            notification.is_read = True
            notification.read_at = datetime.now(timezone.utc)
            db.add(notification)
            self._commit(db, notification)
        return notification

    def mark_all_as_read(self, db: Session, *, user_id: int) -> int:
        """
        Marca todas las notificaciones pendientes del usuario como leídas.

        Returns:
            Número de notificaciones actualizadas
        """
        updated = db.query(Notification).filter(
            Notification.user_id == user_id,
            Notification.is_read.is_(False)
        ).update(
            {Notification.is_read: True, Notification.read_at: datetime.now(timezone.utc)},
            synchronize_session=False
        )
        self._commit(db)
        return updated

    def add(self, db: Session, *, notification: NotificationCreate) -> Notification:
        """Añade la notificación a la sesión sin confirmar (la confirma quien llama)."""
        db_obj = Notification(**notification.model_dump())
        db.add(db_obj)
        return db_obj


notification_repository = NotificationRepository(Notification)
