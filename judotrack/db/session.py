from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError
import logging

from judotrack.core.config import get_settings

logger = logging.getLogger(__name__)

settings_instance = get_settings()

db_url = settings_instance.DATABASE_URL

# Ocultar credenciales en el log
display_url = db_url.split('@')[-1] if '@' in db_url else db_url
logger.info(f"URL utilizada para crear el engine: {display_url}")

connect_args = {}
if db_url.startswith("sqlite"):
    # SQLite necesita compartir la conexión entre hilos del servidor
    connect_args = {"check_same_thread": False}

engine = create_engine(
    db_url,
    echo=False,
    pool_pre_ping=not db_url.startswith("sqlite"),
    connect_args=connect_args,
)

if db_url.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        """SQLite no aplica ON DELETE CASCADE sin activar las claves foráneas por conexión."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de SQLAlchemy en la sesión: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()
