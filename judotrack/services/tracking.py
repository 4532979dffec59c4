from judotrack.repositories.tracking import (
    mood_entry_repository, nutrition_entry_repository, weight_entry_repository
)
from judotrack.schemas.tracking import MoodEntry, NutritionEntry, WeightEntry
from judotrack.services.crud import CRUDService

weight_entry_service = CRUDService(
    "weight_entries",
    weight_entry_repository,
    WeightEntry,
    label="Registro de peso",
    order_by="date",
)
nutrition_entry_service = CRUDService(
    "nutrition_entries",
    nutrition_entry_repository,
    NutritionEntry,
    label="Registro de nutrición",
    order_by="date",
)
mood_entry_service = CRUDService(
    "mood_entries",
    mood_entry_repository,
    MoodEntry,
    label="Registro de ánimo",
    order_by="date",
)
