"""
Configuración centralizada de logging.

Escribe a consola (stdout por defecto). Si LOG_TO_FILE está activo, además
escribe a logs/<servicio>.log con rotación a medianoche:
- logs/bugreports.log → Cliente / CLI de bug reports

Los archivos rotados se eliminan después de LOG_RETENTION_DAYS días.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
from logging.handlers import TimedRotatingFileHandler

from config.constants import LogLevel
from config.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level_name: str) -> int:
    """Nivel numérico a partir del nombre; INFO si el nombre no es válido."""
    try:
        return getattr(logging, LogLevel(level_name.upper()).value)
    except ValueError:
        return logging.INFO


def get_logs_directory() -> Path:
    """Retorna el directorio de logs."""
    return Path(settings.logging.LOG_DIR)


def get_log_file_path(service_name: str = "bugreports") -> Path:
    """Retorna la ruta al archivo de log de un servicio."""
    return get_logs_directory() / f"{service_name}.log"


def setup_logging(
    service_name: str = "bugreports",
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configura el logger raíz para un servicio específico.

    Args:
        service_name: Nombre del servicio. Define el archivo de log
                      cuando LOG_TO_FILE está activo (logs/<service_name>.log)
        stream: Stream del handler de consola (stdout por defecto)

    Returns:
        Logger raíz configurado
    """
    log_level = _resolve_level(settings.general.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Limpiar handlers existentes (evita duplicados si se llama dos veces)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: Consola (stdout salvo que se indique otro stream)
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Handler 2: Archivo con rotación diaria (opcional)
    if settings.logging.LOG_TO_FILE:
        log_file = get_log_file_path(service_name)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=settings.logging.LOG_RETENTION_DAYS,
            encoding="utf-8",
            utc=False
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)

        # Sufijo para archivos rotados: bugreports.log.2026-01-23
        file_handler.suffix = "%Y-%m-%d"

        root_logger.addHandler(file_handler)

    # httpx loguea cada request en INFO; solo interesa en modo debug
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if settings.general.DEBUG else logging.WARNING
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging iniciado [{service_name}]")

    return root_logger
