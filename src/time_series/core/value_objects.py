"""
Instantes validados.

Un instante es un ``datetime`` con zona horaria: dos instantes son iguales si
denotan el mismo punto de la línea temporal, aunque su offset sea distinto.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


def is_instant(value: Any) -> bool:
    """Indica si el valor es un datetime 'aware' (comparable como instante)."""
    return (
        isinstance(value, datetime)
        and value.tzinfo is not None
        and value.utcoffset() is not None
    )


def require_instant(value: Any, field_name: str) -> datetime:
    """
    Valida que el valor sea un instante.

    Lanza TypeError si es un datetime 'naive' o de otro tipo: comparar
    naive con aware no está definido.
    """
    if not is_instant(value):
        raise TypeError(
            f"{field_name} debe ser un datetime con zona horaria, no {value!r}"
        )
    return value
