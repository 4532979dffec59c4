"""
Fábrica de routers CRUD para las entidades propiedad del usuario.

Todas las entidades registradas (sesiones, ejercicios, técnicas, registros de
peso...) exponen las mismas cinco rutas sobre un CRUDService. Las mutaciones
devuelven el mensaje para el usuario en la cabecera X-Message, codificado en
porcentaje (UTF-8) porque las cabeceras HTTP solo admiten ASCII; el cliente lo
lee con decodeURIComponent.
"""

from typing import List, Optional, Type
from urllib.parse import quote

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel
from redis.asyncio import Redis
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user
from judotrack.db.redis_client import get_redis_client
from judotrack.db.session import get_db
from judotrack.models.user import User
from judotrack.services.crud import CRUDService

MESSAGE_HEADER = "X-Message"


def set_message_header(response: Response, message: str) -> None:
    response.headers[MESSAGE_HEADER] = quote(message)


def build_crud_router(
    service: CRUDService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
) -> APIRouter:
    router = APIRouter()

    @router.get("", response_model=List[read_schema])
    async def list_items(
        *,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
        redis_client: Optional[Redis] = Depends(get_redis_client),
    ):
        """List every record of this type owned by the current user."""
        return await service.list_for_user(db, user_id=current_user.id, redis_client=redis_client)

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        *,
        response: Response,
        db: Session = Depends(get_db),
        obj_in: create_schema,
        current_user: User = Depends(get_current_user),
        redis_client: Optional[Redis] = Depends(get_redis_client),
    ):
        """Create a record owned by the current user."""
        db_obj = await service.create(db, user_id=current_user.id, obj_in=obj_in, redis_client=redis_client)
        set_message_header(response, service.messages.created)
        return db_obj

    @router.get("/{item_id}", response_model=read_schema)
    async def read_item(
        *,
        db: Session = Depends(get_db),
        item_id: int = Path(..., title="ID del registro"),
        current_user: User = Depends(get_current_user),
    ):
        """Get one record; records of other users are reported as not found."""
        return service.get_owned(db, id=item_id, user_id=current_user.id)

    @router.patch("/{item_id}", response_model=read_schema)
    async def update_item(
        *,
        response: Response,
        db: Session = Depends(get_db),
        item_id: int = Path(..., title="ID del registro"),
        obj_in: update_schema,
        current_user: User = Depends(get_current_user),
        redis_client: Optional[Redis] = Depends(get_redis_client),
    ):
        """Partially update a record; only the fields sent are changed."""
        db_obj = await service.update(
            db, id=item_id, user_id=current_user.id, obj_in=obj_in, redis_client=redis_client
        )
        set_message_header(response, service.messages.updated)
        return db_obj

    @router.delete("/{item_id}", response_model=read_schema)
    async def delete_item(
        *,
        response: Response,
        db: Session = Depends(get_db),
        item_id: int = Path(..., title="ID del registro"),
        current_user: User = Depends(get_current_user),
        redis_client: Optional[Redis] = Depends(get_redis_client),
    ):
        """Delete a record and return it as it was before deletion."""
        deleted = await service.delete(db, id=item_id, user_id=current_user.id, redis_client=redis_client)
        set_message_header(response, service.messages.deleted)
        return deleted

    return router
