import os
from typing import Any, List, Optional, Union
from functools import lru_cache
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Configurar el logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Permitir campos extra en .env
    )

    # Configuración básica
    API_V1_STR: str = "/api/v1"

    # Información del proyecto
    PROJECT_NAME: str = "JudoTrack"
    PROJECT_DESCRIPTION: str = "API con FastAPI para el seguimiento de entrenamientos de judo"
    VERSION: str = "0.1.0"

    # Debug mode
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "False").lower() in ("true", "1", "t")

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    DATABASE_URL: str = "sqlite:///./judotrack.db"

    @field_validator("DATABASE_URL", mode="before")
    def ensure_proper_url_format(cls, v: Optional[str]) -> str:
        """Asegura que DATABASE_URL use el esquema postgresql:// que espera SQLAlchemy."""
        if not v:
            return "sqlite:///./judotrack.db"
        if v.startswith('postgres://'):
            logger.info("Corrigiendo formato de postgres:// a postgresql://")
            return 'postgresql://' + v[len('postgres://'):]
        return v

    # Configuración de Redis (vacío = sin caché)
    REDIS_URL: str = ""
    REDIS_POOL_MAX_CONNECTIONS: int = int(os.getenv("REDIS_POOL_MAX_CONNECTIONS", "50"))
    REDIS_POOL_SOCKET_TIMEOUT: int = int(os.getenv("REDIS_POOL_SOCKET_TIMEOUT", "5"))
    CACHE_TTL_SECONDS: int = 300

    @field_validator("REDIS_URL", mode="before")
    def assemble_redis_connection(cls, v: Any) -> str:
        if not isinstance(v, str):
            return ""
        # Eliminar comentarios (todo lo que sigue a #)
        if '#' in v:
            v = v.split('#')[0]
        return v.strip()

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "200 per minute"

    # Reglas de negocio
    ACTIVITY_WINDOW_DAYS: int = 7
    ACTIVE_SESSIONS_THRESHOLD: int = 3
    THEME_HISTORY_LIMIT: int = 10
    SEED_DEFAULT_BADGES: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Obtiene la instancia cacheada de configuración."""
    return Settings()


settings = get_settings()
