from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from judotrack.models.notification import NotificationType


class NotificationCreate(BaseModel):
    user_id: int
    title: str = Field(..., description="Título de la notificación")
    message: str = Field(..., description="Mensaje de la notificación")
    notification_type: NotificationType = NotificationType.SYSTEM


class Notification(NotificationCreate):
    id: int
    is_read: bool
    read_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UnreadCount(BaseModel):
    unread: int


class MarkAllReadResult(BaseModel):
    updated: int
