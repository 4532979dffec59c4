import logging
import sys

from judotrack.core.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(filename)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Librerías que solo interesan a nivel INFO o superior
QUIET_LOGGERS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "slowapi": logging.WARNING,
}


def setup_logging():
    """
    Configura el logger raíz de JudoTrack: salida por stdout, nivel DEBUG con
    DEBUG_MODE y INFO en otro caso. Se llama una vez, antes de crear la app.
    """
    debug = get_settings().DEBUG_MODE
    level = logging.DEBUG if debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    # Uvicorn puede haber instalado sus handlers antes
    root.handlers.clear()
    root.addHandler(handler)

    for name, logger_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(logger_level)

    root.info("Logging de JudoTrack configurado con nivel %s", logging.getLevelName(level))
