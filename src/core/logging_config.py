"""Configuración de logging (stdlib `logging.config`).

Los logs van a stderr para no mezclarse con la salida Rich de los comandos.
Nunca se registran secretos ni tokens: solo URLs, status y rutas.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any

LOGGER_NAMESPACES = ("adapters", "cli", "core", "httpx")


def get_logging_config(level: str = "WARNING") -> dict[str, Any]:
    """Diccionario para `logging.config.dictConfig`."""

    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in LOGGER_NAMESPACES
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"],
        },
    }


def configure_logging(level: str = "WARNING") -> None:
    if logging.getLevelName(level.upper()) == f"Level {level.upper()}":
        level = "WARNING"
    logging.config.dictConfig(get_logging_config(level))
