import logging
from typing import List

from sqlalchemy.orm import Session

from judotrack.core.exceptions import NotFoundError, PermissionDeniedError
from judotrack.models.club import Club
from judotrack.models.user import AppRole, User
from judotrack.repositories.club import club_repository
from judotrack.schemas.club import Club as ClubSchema, ClubCreate, ClubUpdate

logger = logging.getLogger(__name__)


class ClubService:
    def get_clubs(self, db: Session, skip: int = 0, limit: int = 100) -> List[Club]:
        return club_repository.get_multi(db, skip=skip, limit=limit, order_by="name", descending=False)

    def create_club(self, db: Session, club_in: ClubCreate, created_by: int) -> Club:
        club = club_repository.create(db, obj_in=club_in, user_id=created_by)
        logger.info(f"Club {club.id} creado por usuario {created_by}")
        return club

    def _get_editable(self, db: Session, club_id: int, user: User) -> Club:
        """
        Solo el creador del club o un administrador pueden modificarlo.
        """
        club = club_repository.get(db, id=club_id)
        if not club:
            raise NotFoundError("Club no encontrado")
        if club.created_by != user.id and user.role != AppRole.ADMIN:
            raise PermissionDeniedError("Solo el creador del club o un administrador pueden modificarlo")
        return club

    def update_club(self, db: Session, club_id: int, club_in: ClubUpdate, user: User) -> Club:
        club = self._get_editable(db, club_id, user)
        return club_repository.update(db, db_obj=club, obj_in=club_in)

    def delete_club(self, db: Session, club_id: int, user: User) -> ClubSchema:
        club = self._get_editable(db, club_id, user)
        deleted = ClubSchema.model_validate(club)
        club_repository.remove(db, id=club_id)
        logger.info(f"Club {club_id} eliminado por usuario {user.id}")
        return deleted


club_service = ClubService()
