"""
Cliente Redis con connection pooling (redis.asyncio).

Redis es opcional: si REDIS_URL está vacía la dependencia entrega None y los
servicios trabajan sin caché (CacheService) o con un almacén de temas no
persistente (MoodThemeSelector).

Para usar en endpoints:
```python
@router.get("/items")
async def read_items(redis_client: Optional[Redis] = Depends(get_redis_client)):
    ...
```
"""

import logging
from typing import Optional

from redis.asyncio import ConnectionPool, Redis

from judotrack.core.config import get_settings

logger = logging.getLogger(__name__)

# Declaración global del pool de conexiones
REDIS_POOL: Optional[ConnectionPool] = None


async def initialize_redis_pool():
    """
    Inicializa el pool de conexiones a Redis.
    Debe llamarse una sola vez al iniciar la aplicación.
    """
    global REDIS_POOL
    if REDIS_POOL is not None:
        return

    settings = get_settings()
    redis_url = settings.REDIS_URL
    if not redis_url:
        logger.warning("REDIS_URL está vacía o no configurada. Se trabajará sin caché.")
        return

    try:
        logger.info("Inicializando connection pool para Redis...")
        REDIS_POOL = ConnectionPool.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            max_connections=settings.REDIS_POOL_MAX_CONNECTIONS,
            socket_timeout=settings.REDIS_POOL_SOCKET_TIMEOUT,
        )
        logger.info(f"Connection pool de Redis inicializado (max_connections={settings.REDIS_POOL_MAX_CONNECTIONS}).")
    except Exception as e:
        logger.error(f"Error al inicializar connection pool de Redis: {e}", exc_info=True)
        REDIS_POOL = None


async def get_redis_client():
    """
    Dependencia FastAPI que entrega un cliente Redis nuevo por request usando el
    pool compartido, o None si Redis no está configurado.
    """
    if REDIS_POOL is None:
        await initialize_redis_pool()

    if REDIS_POOL is None:
        yield None
        return

    client = Redis(connection_pool=REDIS_POOL)
    try:
        yield client
    finally:
        # Cerrar cliente para devolver la conexión al pool
        try:
            await client.aclose()
        except Exception as e:
            logger.warning(f"Error cerrando cliente Redis: {e}")


async def close_redis_client():
    """
    Cierra el pool de conexiones Redis al finalizar la aplicación.
    """
    global REDIS_POOL

    if REDIS_POOL:
        logger.info("Cerrando connection pool de Redis...")
        await REDIS_POOL.disconnect()
        REDIS_POOL = None
        logger.info("Connection pool de Redis cerrado.")
