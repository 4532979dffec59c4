from typing import List
from datetime import date

from sqlalchemy.orm import Session

from judotrack.models.knowledge import TacticalNote, Technique
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.knowledge import (
    TacticalNoteCreate, TacticalNoteUpdate, TechniqueCreate, TechniqueUpdate
)


class TechniqueRepository(BaseRepository[Technique, TechniqueCreate, TechniqueUpdate]):
    def get_dates_by_user(self, db: Session, *, user_id: int) -> List[date]:
        """Días en que el usuario registró técnicas."""
        rows = db.query(Technique.created_at).filter(Technique.user_id == user_id).all()
        return [row[0].date() for row in rows if row[0] is not None]


class TacticalNoteRepository(BaseRepository[TacticalNote, TacticalNoteCreate, TacticalNoteUpdate]):
    pass


technique_repository = TechniqueRepository(Technique)
tactical_note_repository = TacticalNoteRepository(TacticalNote)
