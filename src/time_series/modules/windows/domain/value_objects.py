"""
TimeWindow y TimeBoundedValue Value Objects.

Arquitectura: Modular Monolith
Componente: Value Object (Domain)
Responsabilidad: Representar un intervalo temporal semiabierto [start, end),
con límites opcionales, y su álgebra relacional (orden, solape, intersección
y partición).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from functools import total_ordering
from typing import Any, List, Optional

from time_series.core.value_objects import require_instant
from time_series.modules.windows.domain.exceptions import (
    ConstructionError,
    InvalidArgumentError,
)

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: Solo depende de core/ y de la librería estándar.
# 🔒 Inmutabilidad: frozen=True.
# ♾️ Límite ausente (None) = sin restricción en esa dirección. Nunca usar
#    datetime.min / datetime.max como centinelas.


def _compare(left: datetime, right: datetime) -> int:
    """Comparación de tres vías entre instantes."""
    return (left > right) - (left < right)


@total_ordering
@dataclass(frozen=True)
class TimeWindow:
    """
    Ventana temporal semiabierta: ``start`` inclusivo, ``end`` exclusivo.

    - ``start`` None: la ventana se extiende infinitamente hacia el pasado.
    - ``end`` None: la ventana se extiende infinitamente hacia el futuro.
    - Ambos None: la ventana cubre todo el tiempo.

    Invariantes:
    1. Cada límite presente es un datetime con zona horaria.
    2. Si ambos están presentes, end > start (estrictamente).

    La igualdad y el hash comparan instantes, no la representación: el mismo
    momento expresado con offsets distintos es el mismo límite.
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __post_init__(self):
        """Validación de invariantes al instanciar."""
        for field_name in ("start", "end"):
            bound = getattr(self, field_name)
            if bound is None:
                continue
            try:
                require_instant(bound, field_name)
            except TypeError as exc:
                raise InvalidArgumentError(str(exc)) from exc

        if self.start is not None and self.end is not None and self.end <= self.start:
            raise ConstructionError(
                f"El inicio ({self.start.isoformat()}) debe ser anterior "
                f"al fin ({self.end.isoformat()})"
            )

    # --- Propiedades ---

    @property
    def has_start(self) -> bool:
        return self.start is not None

    @property
    def has_end(self) -> bool:
        return self.end is not None

    @property
    def is_unbounded(self) -> bool:
        """True si la ventana cubre todo el tiempo (ambos límites ausentes)."""
        return self.start is None and self.end is None

    # --- Predicados relacionales ---

    def is_after(self, other: TimeWindow) -> bool:
        """
        True solo si ``start`` es posterior o igual al ``end`` de ``other``.
        Un límite necesario ausente devuelve False.
        """
        _require_window(other, "is_after")
        return self.start is not None and other.end is not None and self.start >= other.end

    def is_before(self, other: TimeWindow) -> bool:
        """True solo si ``end`` es anterior o igual al ``start`` de ``other``."""
        _require_window(other, "is_before")
        return self.end is not None and other.start is not None and self.end <= other.start

    def is_equal(self, other: TimeWindow) -> bool:
        """True si ambos límites coinciden (ambos ausentes o el mismo instante)."""
        _require_window(other, "is_equal")
        return _same_bound(self.start, other.start) and _same_bound(self.end, other.end)

    def is_overlapping(self, other: TimeWindow) -> bool:
        """
        Determina si las dos ventanas comparten al menos un instante.

        Una ventana sin límites se solapa con todo. En el resto de casos, el
        límite ausente de un lado se sustituye por el del otro lado, de modo
        que solo un par de límites presentes puede descartar el solape.
        """
        _require_window(other, "is_overlapping")
        if self.is_unbounded or other.is_unbounded:
            return True

        this_start = self.start if self.start is not None else other.start
        this_end = self.end if self.end is not None else other.end
        other_start = other.start if other.start is not None else self.start
        other_end = other.end if other.end is not None else self.end

        return (
            this_start is None or other_end is None or this_start < other_end
        ) and (this_end is None or other_start is None or this_end > other_start)

    # --- Orden ---

    def compare_to(self, other: TimeWindow) -> int:
        """
        Orden total: ``start`` manda, ``end`` desempata.

        Un ``start`` ausente es menor que cualquier valor presente; un ``end``
        ausente es mayor que cualquier valor presente.
        """
        _require_window(other, "compare_to")

        if self.start is not None and other.start is not None:
            start_comparison = _compare(self.start, other.start)
            if start_comparison != 0:
                return start_comparison
        elif self.start is None and other.start is not None:
            return -1
        elif self.start is not None:
            return 1

        if self.end is not None and other.end is not None:
            return _compare(self.end, other.end)
        if self.end is None and other.end is not None:
            return 1
        if self.end is not None:
            return -1
        return 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, TimeWindow):
            return NotImplemented
        return self.compare_to(other) < 0

    # --- Combinadores ---

    def get_overlap(self, other: TimeWindow) -> Optional[TimeWindow]:
        """
        Calcula la intersección de ambas ventanas.

        Returns:
            La ventana común, o None si no comparten ningún instante.
            Dos ventanas que solo se tocan ([a, b) y [b, c)) no tienen
            intersección.
        """
        _require_window(other, "get_overlap")

        if self.start is None:
            overlap_start = other.start
        elif other.start is None:
            overlap_start = self.start
        else:
            overlap_start = max(self.start, other.start)

        if self.end is None:
            overlap_end = other.end
        elif other.end is None:
            overlap_end = self.end
        else:
            overlap_end = min(self.end, other.end)

        if (
            overlap_start is not None
            and overlap_end is not None
            and overlap_start >= overlap_end
        ):
            return None

        return TimeWindow(overlap_start, overlap_end)

    def split_by_overlap(self, other: TimeWindow) -> List[TimeWindow]:
        """
        Parte la unión de ambas ventanas en los restos que quedan fuera de
        su intersección.

        Orden fijo: resto previo de self, resto posterior de self, resto
        previo de other, resto posterior de other. La intersección no se
        incluye (usar ``get_overlap``). Sin solape devuelve ``[self, other]``.
        """
        _require_window(other, "split_by_overlap")
        overlap = self.get_overlap(other)
        if overlap is None:
            return [self, other]

        # Un límite ausente de la ventana cuenta como infinito: su resto
        # también es infinito en esa dirección.
        pieces: List[TimeWindow] = []
        for window in (self, other):
            if overlap.start is not None and (
                window.start is None or window.start < overlap.start
            ):
                pieces.append(TimeWindow(window.start, overlap.start))
            if overlap.end is not None and (
                window.end is None or window.end > overlap.end
            ):
                pieces.append(TimeWindow(overlap.end, window.end))
        return pieces


@dataclass(frozen=True)
class TimeBoundedValue:
    """Par inmutable (ventana, valor decimal) para código de agregación."""

    time_window: TimeWindow
    value: Decimal


def _same_bound(left: Optional[datetime], right: Optional[datetime]) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return left == right


def _require_window(other: Any, operation: str) -> None:
    if not isinstance(other, TimeWindow):
        raise InvalidArgumentError(
            f"{operation} requiere una TimeWindow, se recibió {other!r}"
        )
