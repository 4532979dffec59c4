from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from judotrack.models.tracking import MoodEntry, NutritionEntry, WeightEntry
from judotrack.repositories.base import BaseRepository, CreateSchemaType, ModelType, UpdateSchemaType
from judotrack.schemas.tracking import (
    MoodEntryCreate, MoodEntryUpdate, NutritionEntryCreate, NutritionEntryUpdate,
    WeightEntryCreate, WeightEntryUpdate
)


class DatedEntryRepository(BaseRepository[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Repositorio de registros diarios con columna date."""

    def get_latest_by_user(self, db: Session, *, user_id: int) -> Optional[ModelType]:
        return db.query(self.model).filter(
            self.model.user_id == user_id
        ).order_by(self.model.date.desc(), self.model.id.desc()).first()

    def get_dates_by_user(self, db: Session, *, user_id: int) -> List[date]:
        return [row[0] for row in db.query(self.model.date).filter(self.model.user_id == user_id).all()]


class WeightEntryRepository(DatedEntryRepository[WeightEntry, WeightEntryCreate, WeightEntryUpdate]):
    pass


class NutritionEntryRepository(DatedEntryRepository[NutritionEntry, NutritionEntryCreate, NutritionEntryUpdate]):
    pass


class MoodEntryRepository(DatedEntryRepository[MoodEntry, MoodEntryCreate, MoodEntryUpdate]):
    pass


weight_entry_repository = WeightEntryRepository(WeightEntry)
nutrition_entry_repository = NutritionEntryRepository(NutritionEntry)
mood_entry_repository = MoodEntryRepository(MoodEntry)
