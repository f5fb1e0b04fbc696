"""
Servicio de Observabilidad: Logs estructurados y Latencia.

Principios SRE:
1. Logs estructurados para máquinas (JSON por línea).
2. Logs legibles para humanos (Consola, o JSON vertical con LOG_FORMAT=PRETTY).
3. Contexto (correlation_id) en cada evento.

Configuración (variables de entorno, leídas al importar):
- LOG_FORMAT: "PRETTY" activa la vista vertical.
- TIME_SERIES_LOG_LEVEL: nivel de consola (default INFO).
- TIME_SERIES_LOG_FILE: si existe, se añade un handler de archivo.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable, Optional

from time_series.modules.windows.domain.value_objects import TimeWindow

logger = logging.getLogger("time_series")

LOG_LEVEL = os.getenv("TIME_SERIES_LOG_LEVEL", "INFO").upper()
LOG_FILE: Optional[str] = os.getenv("TIME_SERIES_LOG_FILE") or None


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = LOG_FILE):
    """
    Configura el logging raíz con consola y, opcionalmente, archivo.
    Es idempotente: limpia los handlers previos antes de instalar los nuevos.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level or LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    if log_file:
        # En disco siempre capturamos todo
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    logger.debug("Observabilidad iniciada (nivel=%s, archivo=%s)", level or LOG_LEVEL, log_file)


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""
        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def describe_target(args: tuple) -> str:
        """Texto de la primera TimeWindow entre los argumentos, o 'unknown'."""
        for arg in args:
            if isinstance(arg, TimeWindow):
                start = "-inf" if arg.start is None else arg.start.isoformat()
                end = "+inf" if arg.end is None else arg.end.isoformat()
                return f"[{start}, {end})"
        return "unknown"

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                correlation_id = ObservabilityService.get_correlation_id()
                target = ObservabilityService.describe_target(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.perf_counter() - start_time, 6),
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 6),
                        "target": target,
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator
