import logging
from typing import List

from sqlalchemy.orm import Session

from judotrack.core.exceptions import NotFoundError
from judotrack.models.notification import Notification
from judotrack.repositories.notification import notification_repository
from judotrack.schemas.notification import NotificationCreate

logger = logging.getLogger(__name__)


class NotificationService:
    def notify(self, db: Session, notification_in: NotificationCreate) -> Notification:
        """
        Crea y confirma una notificación para un usuario.
        """
        notification = notification_repository.add(db, notification=notification_in)
        db.commit()
        db.refresh(notification)
        logger.debug(f"Notificación {notification.id} creada para usuario {notification.user_id}")
        return notification

    def get_notifications(
        self, db: Session, user_id: int, unread_only: bool = False, skip: int = 0, limit: int = 50
    ) -> List[Notification]:
        return notification_repository.get_for_user(
            db, user_id=user_id, unread_only=unread_only, skip=skip, limit=limit
        )

    def count_unread(self, db: Session, user_id: int) -> int:
        return notification_repository.count_unread(db, user_id=user_id)

    def mark_as_read(self, db: Session, user_id: int, notification_id: int) -> Notification:
        notification = notification_repository.get(db, id=notification_id, user_id=user_id)
        if not notification:
            raise NotFoundError("Notificación no encontrada")
        return notification_repository.mark_as_read(db, notification=notification)

    def mark_all_as_read(self, db: Session, user_id: int) -> int:
        updated = notification_repository.mark_all_as_read(db, user_id=user_id)
        logger.info(f"{updated} notificaciones marcadas como leídas para usuario {user_id}")
        return updated


notification_service = NotificationService()
