from judotrack.models.club import Club
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.club import ClubCreate, ClubUpdate


class ClubRepository(BaseRepository[Club, ClubCreate, ClubUpdate]):
    pass


club_repository = ClubRepository(Club, owner_field="created_by")
