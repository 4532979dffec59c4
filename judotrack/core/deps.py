"""
Dependencias FastAPI compartidas: identidad del usuario, control de roles y
selector de temas por usuario.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from redis.asyncio import Redis
from sqlalchemy.orm import Session

from judotrack.core.config import get_settings
from judotrack.db.redis_client import get_redis_client
from judotrack.db.session import get_db
from judotrack.models.user import AppRole, User
from judotrack.repositories.user import user_repository
from judotrack.services.mood_theme import MoodThemeSelector, NullKeyValueStore, RedisKeyValueStore

logger = logging.getLogger(__name__)


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-ID")
) -> int:
    """
    Obtiene el ID del usuario que actúa únicamente del header X-User-ID.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Header 'X-User-ID' requerido"
        )
    try:
        return int(x_user_id)
    except (ValueError, TypeError):
        logger.warning(f"Formato inválido para X-User-ID: {x_user_id}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Header 'X-User-ID' inválido"
        )


async def get_current_user(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id)
) -> User:
    user = user_repository.get(db, id=user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    return user


def require_role(*roles: AppRole):
    """
    Fábrica de dependencias que exige que el usuario actual tenga uno de los roles.

    Uso:
        @router.post("/", dependencies=[Depends(require_role(AppRole.ADMIN))])
    """
    allowed = set(roles)

    async def _check_role(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            logger.warning(
                f"Usuario {current_user.id} con rol {current_user.role.value} "
                f"sin permiso (requiere {[r.value for r in roles]})"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="No tienes permisos para realizar esta acción"
            )
        return current_user

    return _check_role


async def get_theme_selector(
    current_user: User = Depends(get_current_user),
    redis_client: Optional[Redis] = Depends(get_redis_client)
) -> MoodThemeSelector:
    """
    Selector de temas con el historial del usuario en Redis, o sin persistencia
    si Redis no está configurado.
    """
    settings = get_settings()
    if redis_client is None:
        store = NullKeyValueStore()
    else:
        store = RedisKeyValueStore(redis_client, namespace=f"user:{current_user.id}")
    return MoodThemeSelector(store, history_limit=settings.THEME_HISTORY_LIMIT)
