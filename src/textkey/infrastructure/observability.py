"""
Configuración centralizada de Logging.

El núcleo solo emite eventos DEBUG (fijado de texto estático en el pool) en
loggers hijos de 'textkey'. Aquí se decide a dónde van.
"""

import logging
import os
import sys

logger = logging.getLogger("textkey")

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)


def configure_logging(level=None, log_file=None) -> logging.Logger:
    """
    Configura el logger 'textkey' con consola y, opcionalmente, archivo.

    level: por defecto TEXTKEY_LOG_LEVEL o INFO.
    log_file: por defecto TEXTKEY_LOG_FILE; sin valor no se escribe a disco.
    """
    if level is None:
        level = os.getenv("TEXTKEY_LOG_LEVEL", "INFO").upper()
    if log_file is None:
        log_file = os.getenv("TEXTKEY_LOG_FILE")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    console_handler.setLevel(level)

    # Reconfigurar no debe duplicar handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(logging.DEBUG)  # En disco se captura todo
        logger.addHandler(file_handler)
        logger.info(f"🔭 Logs persistentes en: {log_file}")

    return logger
