import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from judotrack.core.logging_config import setup_logging

# Configurar logging ANTES de importar/crear otros elementos
setup_logging()

from judotrack.api.v1.api import api_router
from judotrack.core.config import get_settings
from judotrack.core.exceptions import JudoTrackError
from judotrack.db import base  # noqa: F401  registra todos los modelos en Base.metadata
from judotrack.db.base_class import Base
from judotrack.db.redis_client import close_redis_client, initialize_redis_pool
from judotrack.db.session import SessionLocal, engine
from judotrack.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from judotrack.middleware.timing import TimingMiddleware
from judotrack.services.achievement import achievement_service
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

logger = logging.getLogger(__name__)

settings_instance = get_settings()


def init_db() -> None:
    """Crea las tablas que falten y siembra el catálogo de logros si está vacío."""
    Base.metadata.create_all(bind=engine)
    if not settings_instance.SEED_DEFAULT_BADGES:
        return
    db = SessionLocal()
    try:
        achievement_service.seed_default_badges(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan: Startup iniciado...")

    init_db()
    logger.info("Lifespan: Base de datos lista.")

    try:
        await initialize_redis_pool()
    except Exception as e:
        logger.error(f"Lifespan: Error al inicializar Redis connection pool: {e}", exc_info=True)

    yield  # Aplicación en ejecución

    logger.info("Lifespan: Shutdown iniciado...")
    try:
        await close_redis_client()
    except Exception as e:
        logger.error(f"Lifespan: Error cerrando Redis connection pool: {e}", exc_info=True)


app = FastAPI(
    title=settings_instance.PROJECT_NAME,
    description=settings_instance.PROJECT_DESCRIPTION,
    version=settings_instance.VERSION,
    openapi_url=f"{settings_instance.API_V1_STR}/openapi.json",
    docs_url=f"{settings_instance.API_V1_STR}/docs",
    redoc_url=f"{settings_instance.API_V1_STR}/redoc",
    lifespan=lifespan,
)


@app.exception_handler(JudoTrackError)
async def judotrack_error_handler(request: Request, exc: JudoTrackError):
    logger.info(f"{type(exc).__name__} en {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(TimingMiddleware)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Middleware: Recibida petición: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Middleware: Respuesta enviada: {response.status_code} para {request.method} {request.url.path}")
    return response


# CORS: orígenes desde la configuración
if settings_instance.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings_instance.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Message", "X-Process-Time"],
    )

app.include_router(api_router, prefix=settings_instance.API_V1_STR)


@app.get("/")
def root():
    return {
        "message": "Bienvenido a la API de JudoTrack",
        "docs": f"{settings_instance.API_V1_STR}/docs",
    }


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings_instance.DEBUG_MODE)
