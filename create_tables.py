"""
Crea las tablas que falten y siembra el catálogo de logros por defecto.

Uso:
    python create_tables.py
"""

import logging

from sqlalchemy import inspect

from judotrack.core.logging_config import setup_logging
from judotrack.db import base  # noqa: F401  registra todos los modelos en Base.metadata
from judotrack.db.base_class import Base
from judotrack.db.session import SessionLocal, engine
from judotrack.services.achievement import achievement_service

setup_logging()
logger = logging.getLogger("create_tables")


def main() -> None:
    existing_tables = set(inspect(engine).get_table_names())
    missing = [table.name for table in Base.metadata.sorted_tables if table.name not in existing_tables]

    if missing:
        logger.info(f"Creando tablas: {', '.join(missing)}")
    else:
        logger.info("Todas las tablas ya existen")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        created = achievement_service.seed_default_badges(db)
        logger.info(f"Insignias creadas: {created}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
