import os

# La configuración se lee al importar la app: fijar el entorno de pruebas antes
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_DEFAULT_BADGES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from judotrack.db import base  # noqa: F401
from judotrack.db.base_class import Base
from judotrack.db.redis_client import get_redis_client
from judotrack.db.session import get_db
from judotrack.models.user import AppRole
from main import app


# Usar una base de datos en memoria para pruebas
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _sqlite_connect(dbapi_connection, connection_record):
    # pysqlite: el BEGIN lo emite SQLAlchemy para que los savepoints funcionen
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@event.listens_for(engine, "begin")
def _sqlite_begin(conn):
    conn.exec_driver_sql("BEGIN")


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False)


@pytest.fixture(scope="session")
def db_engine():
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db(db_engine):
    """
    Sesión por test dentro de una transacción externa que se deshace al final.
    Los commit/rollback de los servicios operan sobre savepoints.
    """
    connection = db_engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection, join_transaction_mode="create_savepoint")

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db):
    """
    Cliente de prueba con la sesión del test y sin Redis.
    """
    def override_get_db():
        yield db

    async def override_get_redis_client():
        yield None

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis_client] = override_get_redis_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _create_user(db, email, full_name, role):
    from judotrack.repositories.user import user_repository
    from judotrack.schemas.user import UserCreate

    user = user_repository.create(db, obj_in=UserCreate(email=email, full_name=full_name))
    user_repository.set_role(db, user_id=user.id, role=role)
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def admin_user(db):
    return _create_user(db, "admin@test.com", "Admin Test", AppRole.ADMIN)


@pytest.fixture(scope="function")
def trainer_user(db):
    return _create_user(db, "trainer@test.com", "Trainer Test", AppRole.TRAINER)


@pytest.fixture(scope="function")
def athlete_user(db):
    return _create_user(db, "athlete@test.com", "Athlete Test", AppRole.ATHLETE)


@pytest.fixture(scope="function")
def other_athlete(db):
    return _create_user(db, "other@test.com", "Other Athlete", AppRole.ATHLETE)
