from typing import List

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user
from judotrack.db.session import get_db
from judotrack.models.user import User
from judotrack.schemas.notification import MarkAllReadResult, Notification, UnreadCount
from judotrack.services.notification import notification_service

router = APIRouter()


@router.get("", response_model=List[Notification])
async def list_notifications(
    db: Session = Depends(get_db),
    unread_only: bool = Query(False),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    current_user: User = Depends(get_current_user),
):
    """List the notifications of the current user, newest first."""
    return notification_service.get_notifications(
        db, current_user.id, unread_only=unread_only, skip=skip, limit=limit
    )


@router.get("/unread-count", response_model=UnreadCount)
async def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return UnreadCount(unread=notification_service.count_unread(db, current_user.id))


@router.patch("/read-all", response_model=MarkAllReadResult)
async def mark_all_notifications_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Mark every pending notification of the current user as read."""
    return MarkAllReadResult(updated=notification_service.mark_all_as_read(db, current_user.id))


@router.patch("/{notification_id}/read", response_model=Notification)
async def mark_notification_read(
    *,
    db: Session = Depends(get_db),
    notification_id: int = Path(..., title="ID de la notificación"),
    current_user: User = Depends(get_current_user),
):
    """Mark one notification as read. Marking it again changes nothing."""
    return notification_service.mark_as_read(db, current_user.id, notification_id)
