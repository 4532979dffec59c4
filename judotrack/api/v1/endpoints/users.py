from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user
from judotrack.db.session import get_db
from judotrack.models.user import User
from judotrack.schemas.user import User as UserSchema, UserCreate, UserUpdate
from judotrack.services.user import user_service

router = APIRouter()


@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def register_user(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate,
):
    """
    Register a new user profile.

    The profile starts with the athlete role. Role changes go through
    `PUT /roles/{user_id}` and are restricted to administrators.

    Raises:
        409: a profile with the same email already exists
        404: the club referenced by `club_id` does not exist
    """
    return user_service.register(db, user_in)


@router.get("/me", response_model=UserSchema)
async def read_my_profile(
    current_user: User = Depends(get_current_user),
):
    """Get the profile of the user identified by the `X-User-ID` header."""
    return current_user


@router.patch("/me", response_model=UserSchema)
async def update_my_profile(
    *,
    db: Session = Depends(get_db),
    user_in: UserUpdate,
    current_user: User = Depends(get_current_user),
):
    """Update belt, club, category and the rest of the sports profile."""
    return user_service.update_profile(db, current_user, user_in)


@router.get("/{user_id}", response_model=UserSchema)
async def read_user(
    *,
    db: Session = Depends(get_db),
    user_id: int = Path(..., title="ID del usuario"),
    current_user: User = Depends(get_current_user),
):
    return user_service.get_user(db, user_id)
