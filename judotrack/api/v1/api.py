from fastapi import APIRouter

from judotrack.api.v1.endpoints import (
    achievements, activity, clubs, mood_themes, notifications, roles, trainer_assignments, users
)
from judotrack.api.v1.endpoints.crud import build_crud_router
from judotrack.schemas.knowledge import (
    TacticalNote, TacticalNoteCreate, TacticalNoteUpdate, Technique, TechniqueCreate, TechniqueUpdate
)
from judotrack.schemas.tracking import (
    MoodEntry, MoodEntryCreate, MoodEntryUpdate, NutritionEntry, NutritionEntryCreate,
    NutritionEntryUpdate, WeightEntry, WeightEntryCreate, WeightEntryUpdate
)
from judotrack.schemas.training import (
    Exercise, ExerciseCreate, ExerciseRecord, ExerciseRecordCreate, ExerciseRecordUpdate,
    ExerciseUpdate, TrainingSession, TrainingSessionCreate, TrainingSessionUpdate
)
from judotrack.services.knowledge import tactical_note_service, technique_service
from judotrack.services.tracking import mood_entry_service, nutrition_entry_service, weight_entry_service
from judotrack.services.training import exercise_record_service, exercise_service, training_session_service

api_router = APIRouter()

# Users and roles
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])

# Clubs
api_router.include_router(clubs.router, prefix="/clubs", tags=["clubs"])

# Trainer-athlete assignments
api_router.include_router(trainer_assignments.router, prefix="/trainer-assignments", tags=["trainer-assignments"])

# Training log
api_router.include_router(
    build_crud_router(training_session_service, TrainingSessionCreate, TrainingSessionUpdate, TrainingSession),
    prefix="/training-sessions", tags=["training"]
)
api_router.include_router(
    build_crud_router(exercise_service, ExerciseCreate, ExerciseUpdate, Exercise),
    prefix="/exercises", tags=["training"]
)
api_router.include_router(
    build_crud_router(exercise_record_service, ExerciseRecordCreate, ExerciseRecordUpdate, ExerciseRecord),
    prefix="/exercise-records", tags=["training"]
)

# Techniques and tactics
api_router.include_router(
    build_crud_router(technique_service, TechniqueCreate, TechniqueUpdate, Technique),
    prefix="/techniques", tags=["knowledge"]
)
api_router.include_router(
    build_crud_router(tactical_note_service, TacticalNoteCreate, TacticalNoteUpdate, TacticalNote),
    prefix="/tactical-notes", tags=["knowledge"]
)

# Daily tracking
api_router.include_router(
    build_crud_router(weight_entry_service, WeightEntryCreate, WeightEntryUpdate, WeightEntry),
    prefix="/weight-entries", tags=["tracking"]
)
api_router.include_router(
    build_crud_router(nutrition_entry_service, NutritionEntryCreate, NutritionEntryUpdate, NutritionEntry),
    prefix="/nutrition-entries", tags=["tracking"]
)
api_router.include_router(
    build_crud_router(mood_entry_service, MoodEntryCreate, MoodEntryUpdate, MoodEntry),
    prefix="/mood-entries", tags=["tracking"]
)

# Activity, achievements, notifications and themes
api_router.include_router(activity.router, prefix="/activity", tags=["activity"])
api_router.include_router(achievements.router, prefix="/achievements", tags=["achievements"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
api_router.include_router(mood_themes.router, prefix="/mood-themes", tags=["mood-themes"])
