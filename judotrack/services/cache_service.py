import json
import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Optional, Type, TypeVar

from pydantic import BaseModel
from redis.asyncio import Redis

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)

KEY_PREFIX = "judotrack"


def json_serializer(obj):
    """Serializador JSON que maneja fechas y decimales."""
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return float(obj)
    raise TypeError(f"Tipo no serializable: {type(obj)}")


def entity_cache_key(entity: str, user_id: int) -> str:
    """Clave de la lista de una entidad para un usuario: judotrack:{entity}:user:{user_id}."""
    return f"{KEY_PREFIX}:{entity}:user:{user_id}"


class CacheService:
    """
    Servicio genérico para cachear listas de modelos Pydantic en Redis.
    Sin cliente Redis todas las operaciones son pass-through.
    """

    @staticmethod
    async def get_or_set(
        redis_client: Optional[Redis],
        cache_key: str,
        db_fetch_func: Callable,
        model_class: Type[T],
        expiry_seconds: int = 300,
        is_list: bool = False
    ) -> Any:
        """
        Obtiene un objeto de Redis o lo establece si no existe.

        Args:
            redis_client: Cliente Redis a usar (None = sin caché)
            cache_key: Clave única para identificar el objeto en caché
            db_fetch_func: Función asíncrona que obtiene los datos de la BD
            model_class: Clase del modelo Pydantic que se debe devolver
            expiry_seconds: Tiempo de expiración en segundos
            is_list: Si es True, se espera/devuelve una lista de objetos

        Returns:
            El objeto o lista de objetos solicitados
        """
        if not redis_client:
            logger.debug("Cliente Redis no disponible, ejecutando consulta sin caché")
            return await db_fetch_func()

        try:
            cached_data = await redis_client.get(cache_key)
            if cached_data:
                logger.debug(f"Cache hit para clave: {cache_key}")
                try:
                    data = json.loads(cached_data)
                    if is_list:
                        return [model_class.model_validate(item) for item in data]
                    return model_class.model_validate(data)
                except (ValueError, TypeError) as e:
                    logger.warning(f"Ignorando datos en caché corruptos para {cache_key}: {e}")
                    await redis_client.delete(cache_key)
        except Exception as e:
            logger.error(f"Error al leer del caché: {str(e)}", exc_info=True)

        logger.debug(f"Cache miss para clave: {cache_key}")
        data = await db_fetch_func()

        if data is None:
            return data

        try:
            if is_list:
                json_data = [model_class.model_validate(item).model_dump() for item in data]
            else:
                json_data = model_class.model_validate(data).model_dump()
            serialized = json.dumps(json_data, default=json_serializer)
            await redis_client.set(cache_key, serialized, ex=expiry_seconds)
            logger.debug(f"Datos guardados en caché con clave: {cache_key}, TTL: {expiry_seconds}s")
        except Exception as e:
            logger.error(f"Error al guardar en caché {cache_key}: {e}", exc_info=True)

        return data

    @staticmethod
    async def delete_pattern(redis_client: Optional[Redis], pattern: str) -> int:
        """
        Elimina todas las claves que coinciden con un patrón.

        Returns:
            int: Número de claves eliminadas
        """
        if not redis_client:
            return 0

        try:
            keys = []
            async for key in redis_client.scan_iter(match=pattern):
                keys.append(key)

            if keys:
                count = await redis_client.delete(*keys)
                logger.info(f"Eliminadas {count} claves con patrón: {pattern}")
                return count
            return 0
        except Exception as e:
            logger.error(f"Error al eliminar claves con patrón {pattern}: {str(e)}", exc_info=True)
            return 0

    @staticmethod
    async def invalidate_entity(redis_client: Optional[Redis], entity: str, user_id: Optional[int] = None) -> int:
        """
        Invalida la caché de una entidad: solo la clave del usuario indicado, o
        todas las de la entidad si no se pasa usuario.
        """
        if not redis_client:
            return 0

        if user_id is None:
            return await CacheService.delete_pattern(redis_client, f"{KEY_PREFIX}:{entity}:*")

        cache_key = entity_cache_key(entity, user_id)
        try:
            count = await redis_client.delete(cache_key)
            logger.debug(f"Caché invalidada: {cache_key}")
            return count
        except Exception as e:
            logger.error(f"Error invalidando caché {cache_key}: {e}", exc_info=True)
            return 0
