"""
Servicio CRUD genérico por entidad.

Cada entidad registrada (sesiones, técnicas, registros de peso...) comparte el
mismo flujo: lectura de la lista del usuario con caché, escritura con control
de propiedad e invalidación de la caché de esa entidad y usuario solo después
de un commit correcto. Una mutación fallida se revierte, se propaga y deja la
caché intacta.
"""

import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from redis.asyncio import Redis
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from judotrack.core.config import get_settings
from judotrack.core.exceptions import ConflictError, NotFoundError
from judotrack.repositories.base import BaseRepository, CreateSchemaType, ModelType, UpdateSchemaType
from judotrack.services.cache_service import CacheService, entity_cache_key

logger = logging.getLogger(__name__)

ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)


@dataclass(frozen=True)
class CrudMessages:
    created: str
    updated: str
    deleted: str
    create_error: str
    update_error: str
    delete_error: str

    @classmethod
    def for_label(cls, label: str) -> "CrudMessages":
        return cls(
            created=f"{label} creado exitosamente",
            updated=f"{label} actualizado exitosamente",
            deleted=f"{label} eliminado exitosamente",
            create_error=f"No se pudo crear {label.lower()}",
            update_error=f"No se pudo actualizar {label.lower()}",
            delete_error=f"No se pudo eliminar {label.lower()}",
        )


class CRUDService(Generic[ModelType, CreateSchemaType, UpdateSchemaType, ReadSchemaType]):
    def __init__(
        self,
        entity: str,
        repository: BaseRepository[ModelType, CreateSchemaType, UpdateSchemaType],
        read_schema: Type[ReadSchemaType],
        *,
        label: Optional[str] = None,
        messages: Optional[CrudMessages] = None,
        order_by: Optional[str] = None,
        related_entities: Sequence[str] = (),
    ):
        """
        Args:
            entity: Nombre de la entidad en las claves de caché (ej. "training_sessions")
            repository: Repositorio de la entidad
            read_schema: Esquema de lectura que se cachea y se devuelve
            label: Nombre legible para los mensajes al usuario
            messages: Mensajes personalizados (por defecto se construyen desde label)
            order_by: Campo de ordenación descendente de la lista
            related_entities: Entidades cuya caché también cambia al mutar esta
                (p. ej. borrar una sesión borra sus registros de ejercicios)
        """
        self.entity = entity
        self.repository = repository
        self.read_schema = read_schema
        self.messages = messages or CrudMessages.for_label(label or entity)
        self.order_by = order_by
        self.related_entities = tuple(related_entities)

    def cache_key(self, user_id: int) -> str:
        return entity_cache_key(self.entity, user_id)

    async def list_for_user(
        self, db: Session, *, user_id: int, redis_client: Optional[Redis] = None
    ) -> List[ReadSchemaType]:
        """
        Lista completa de la entidad para el usuario, cacheada en Redis.
        """
        async def db_fetch():
            rows = self.repository.get_multi_by_user(
                db, user_id=user_id, limit=1000, order_by=self.order_by
            )
            return [self.read_schema.model_validate(row) for row in rows]

        return await CacheService.get_or_set(
            redis_client=redis_client,
            cache_key=self.cache_key(user_id),
            db_fetch_func=db_fetch,
            model_class=self.read_schema,
            expiry_seconds=get_settings().CACHE_TTL_SECONDS,
            is_list=True,
        )

    def get_owned(self, db: Session, *, id: int, user_id: int) -> ModelType:
        """
        Obtener un registro del usuario. Un registro de otro usuario se trata
        como inexistente.
        """
        db_obj = self.repository.get(db, id=id, user_id=user_id)
        if db_obj is None:
            raise NotFoundError(f"{self.entity} {id} no encontrado")
        return db_obj

    def check_references(self, db: Session, *, user_id: int, obj_in: BaseModel) -> None:
        """Punto de extensión para validar referencias a otras entidades del usuario."""

    async def invalidate(self, redis_client: Optional[Redis], user_id: int) -> None:
        await CacheService.invalidate_entity(redis_client, self.entity, user_id)
        for related in self.related_entities:
            await CacheService.invalidate_entity(redis_client, related, user_id)

    async def create(
        self, db: Session, *, user_id: int, obj_in: CreateSchemaType, redis_client: Optional[Redis] = None
    ) -> ModelType:
        self.check_references(db, user_id=user_id, obj_in=obj_in)
        try:
            db_obj = self.repository.create(db, obj_in=obj_in, user_id=user_id)
        except IntegrityError as e:
            logger.error(f"{self.messages.create_error}: {e}")
            raise ConflictError(self.messages.create_error) from e

        await self.invalidate(redis_client, user_id)
        logger.info(f"{self.entity} {db_obj.id} creado para usuario {user_id}")
        return db_obj

    async def update(
        self, db: Session, *, id: int, user_id: int, obj_in: UpdateSchemaType,
        redis_client: Optional[Redis] = None
    ) -> ModelType:
        db_obj = self.get_owned(db, id=id, user_id=user_id)
        self.check_references(db, user_id=user_id, obj_in=obj_in)
        try:
            db_obj = self.repository.update(db, db_obj=db_obj, obj_in=obj_in)
        except IntegrityError as e:
            logger.error(f"{self.messages.update_error}: {e}")
            raise ConflictError(self.messages.update_error) from e

        await self.invalidate(redis_client, user_id)
        return db_obj

    async def delete(
        self, db: Session, *, id: int, user_id: int, redis_client: Optional[Redis] = None
    ) -> ReadSchemaType:
        """
        Eliminar un registro del usuario.

        Returns:
            La representación del registro tal como era antes de borrarlo
        """
        db_obj = self.get_owned(db, id=id, user_id=user_id)
        deleted = self.read_schema.model_validate(db_obj)
        try:
            self.repository.remove(db, id=id, user_id=user_id)
        except IntegrityError as e:
            logger.error(f"{self.messages.delete_error}: {e}")
            raise ConflictError(self.messages.delete_error) from e

        await self.invalidate(redis_client, user_id)
        return deleted
