"""
Tests para CRUDService: propiedad de los registros e invalidación de caché
solo después de un commit correcto.
"""

from datetime import date

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import IntegrityError

from judotrack.core.exceptions import ConflictError, NotFoundError
from judotrack.schemas.training import ExerciseRecordCreate, TrainingSessionCreate, TrainingSessionUpdate
from judotrack.services.crud import CrudMessages
from judotrack.services.training import (
    exercise_record_service, exercise_service, training_session_service
)


def _session_in(**overrides):
    data = {"date": date(2024, 5, 10), "session_type": "randori", "duration_minutes": 90, "intensity": 7}
    data.update(overrides)
    return TrainingSessionCreate(**data)


def test_default_messages_from_label():
    messages = CrudMessages.for_label("Técnica")

    assert messages.created == "Técnica creado exitosamente"
    assert messages.updated == "Técnica actualizado exitosamente"
    assert messages.deleted == "Técnica eliminado exitosamente"
    assert messages.create_error == "No se pudo crear técnica"


class TestCRUDService:
    @pytest.mark.asyncio
    async def test_create_assigns_owner_and_invalidates(self, db, athlete_user):
        redis_client = AsyncMock()

        session = await training_session_service.create(
            db, user_id=athlete_user.id, obj_in=_session_in(), redis_client=redis_client
        )

        assert session.id is not None
        assert session.user_id == athlete_user.id
        deleted_keys = [call.args[0] for call in redis_client.delete.await_args_list]
        assert f"judotrack:training_sessions:user:{athlete_user.id}" in deleted_keys
        assert f"judotrack:exercise_records:user:{athlete_user.id}" in deleted_keys

    @pytest.mark.asyncio
    async def test_failed_create_leaves_cache_untouched(self, db, athlete_user):
        redis_client = AsyncMock()
        error = IntegrityError("INSERT", {}, Exception("duplicado"))

        with patch.object(training_session_service.repository, "create", side_effect=error):
            with pytest.raises(ConflictError) as exc_info:
                await training_session_service.create(
                    db, user_id=athlete_user.id, obj_in=_session_in(), redis_client=redis_client
                )

        assert exc_info.value.message == training_session_service.messages.create_error
        redis_client.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_only_changes_sent_fields(self, db, athlete_user):
        session = await training_session_service.create(db, user_id=athlete_user.id, obj_in=_session_in())

        updated = await training_session_service.update(
            db, id=session.id, user_id=athlete_user.id,
            obj_in=TrainingSessionUpdate(notes="Trabajo de agarre")
        )

        assert updated.notes == "Trabajo de agarre"
        assert updated.session_type == "randori"
        assert updated.intensity == 7

    @pytest.mark.asyncio
    async def test_other_users_records_are_not_found(self, db, athlete_user, other_athlete):
        session = await training_session_service.create(db, user_id=athlete_user.id, obj_in=_session_in())
        redis_client = AsyncMock()

        with pytest.raises(NotFoundError):
            training_session_service.get_owned(db, id=session.id, user_id=other_athlete.id)
        with pytest.raises(NotFoundError):
            await training_session_service.delete(
                db, id=session.id, user_id=other_athlete.id, redis_client=redis_client
            )

        redis_client.delete.assert_not_awaited()
        assert training_session_service.get_owned(db, id=session.id, user_id=athlete_user.id)

    @pytest.mark.asyncio
    async def test_delete_returns_previous_state(self, db, athlete_user):
        session = await training_session_service.create(db, user_id=athlete_user.id, obj_in=_session_in())
        session_id = session.id

        deleted = await training_session_service.delete(db, id=session_id, user_id=athlete_user.id)

        assert deleted.id == session_id
        assert deleted.session_type == "randori"
        assert not training_session_service.repository.exists(db, session_id)

    @pytest.mark.asyncio
    async def test_list_for_user_is_ordered_and_scoped(self, db, athlete_user, other_athlete):
        await training_session_service.create(db, user_id=athlete_user.id, obj_in=_session_in(date=date(2024, 5, 1)))
        await training_session_service.create(db, user_id=athlete_user.id, obj_in=_session_in(date=date(2024, 5, 3)))
        await training_session_service.create(db, user_id=other_athlete.id, obj_in=_session_in())

        sessions = await training_session_service.list_for_user(db, user_id=athlete_user.id)

        assert [s.date for s in sessions] == [date(2024, 5, 3), date(2024, 5, 1)]

    @pytest.mark.asyncio
    async def test_exercise_record_requires_own_exercise(self, db, athlete_user, other_athlete):
        from judotrack.schemas.training import ExerciseCreate

        exercise = await exercise_service.create(db, user_id=other_athlete.id, obj_in=ExerciseCreate(name="Sentadilla"))
        record_in = ExerciseRecordCreate(exercise_id=exercise.id, sets=3, reps=10, date=date(2024, 5, 10))

        with pytest.raises(NotFoundError):
            await exercise_record_service.create(db, user_id=athlete_user.id, obj_in=record_in)

        record = await exercise_record_service.create(db, user_id=other_athlete.id, obj_in=record_in)
        assert record.exercise_id == exercise.id
