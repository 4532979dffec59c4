from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user, require_role
from judotrack.db.session import get_db
from judotrack.models.user import AppRole, User
from judotrack.schemas.club import Club, ClubCreate, ClubUpdate
from judotrack.services.club import club_service

router = APIRouter()


@router.get("", response_model=List[Club])
async def list_clubs(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: User = Depends(get_current_user),
):
    """List clubs ordered by name."""
    return club_service.get_clubs(db, skip=skip, limit=limit)


@router.post("", response_model=Club, status_code=status.HTTP_201_CREATED)
async def create_club(
    *,
    db: Session = Depends(get_db),
    club_in: ClubCreate,
    current_user: User = Depends(require_role(AppRole.TRAINER, AppRole.ADMIN)),
):
    """Create a club. Trainers and administrators only."""
    return club_service.create_club(db, club_in, created_by=current_user.id)


@router.patch("/{club_id}", response_model=Club)
async def update_club(
    *,
    db: Session = Depends(get_db),
    club_id: int = Path(..., title="ID del club"),
    club_in: ClubUpdate,
    current_user: User = Depends(get_current_user),
):
    """Update a club. Only its creator or an administrator may do it."""
    return club_service.update_club(db, club_id, club_in, current_user)


@router.delete("/{club_id}", response_model=Club)
async def delete_club(
    *,
    db: Session = Depends(get_db),
    club_id: int = Path(..., title="ID del club"),
    current_user: User = Depends(get_current_user),
):
    """Delete a club. Only its creator or an administrator may do it."""
    return club_service.delete_club(db, club_id, current_user)
