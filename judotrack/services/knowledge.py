from judotrack.repositories.knowledge import tactical_note_repository, technique_repository
from judotrack.schemas.knowledge import TacticalNote, Technique
from judotrack.services.crud import CRUDService

technique_service = CRUDService(
    "techniques",
    technique_repository,
    Technique,
    label="Técnica",
    order_by="created_at",
)
tactical_note_service = CRUDService(
    "tactical_notes",
    tactical_note_repository,
    TacticalNote,
    label="Nota táctica",
    order_by="created_at",
)
