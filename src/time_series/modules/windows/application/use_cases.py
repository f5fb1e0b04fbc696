"""
Casos de Uso para la comparación de Ventanas Temporales.

Arquitectura: Application Layer
Responsabilidad: Evaluar todas las relaciones entre dos ventanas en una sola
llamada instrumentada, y ordenar colecciones de ventanas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from time_series.modules.windows.domain.exceptions import InvalidArgumentError
from time_series.modules.windows.domain.value_objects import TimeWindow
from time_series.modules.windows.infrastructure.observability import (
    ObservabilityService,
)

logger = logging.getLogger("time_series.app")


@dataclass(frozen=True)
class WindowComparison:
    """Informe inmutable con las relaciones entre ``first`` y ``second``."""

    first: TimeWindow
    second: TimeWindow
    is_before: bool
    is_after: bool
    is_equal: bool
    is_overlapping: bool
    order: int
    overlap: Optional[TimeWindow]
    remainders: Tuple[TimeWindow, ...]


class CompareTimeWindows:
    """
    Caso de Uso: Comparar dos ventanas temporales.

    No agrega nada al dominio: delega cada relación en TimeWindow y deja que
    sus errores (ConstructionError, InvalidArgumentError) suban al caller.
    """

    @ObservabilityService.measure_latency(operation_name="compare_time_windows")
    def execute(self, first: TimeWindow, second: TimeWindow) -> WindowComparison:
        """
        Args:
            first: Ventana de referencia.
            second: Ventana con la que se compara.

        Returns:
            WindowComparison con predicados, orden, intersección y restos.

        Raises:
            InvalidArgumentError: Si alguno de los argumentos no es una TimeWindow.
        """
        if not isinstance(first, TimeWindow):
            raise InvalidArgumentError(
                f"compare_time_windows requiere una TimeWindow, se recibió {first!r}"
            )

        overlap = first.get_overlap(second)
        comparison = WindowComparison(
            first=first,
            second=second,
            is_before=first.is_before(second),
            is_after=first.is_after(second),
            is_equal=first.is_equal(second),
            is_overlapping=first.is_overlapping(second),
            order=first.compare_to(second),
            overlap=overlap,
            remainders=tuple(first.split_by_overlap(second)),
        )

        logger.debug(
            "Comparación: overlapping=%s order=%s restos=%d",
            comparison.is_overlapping,
            comparison.order,
            len(comparison.remainders),
        )
        return comparison

    @staticmethod
    def sort(windows: Iterable[TimeWindow]) -> List[TimeWindow]:
        """Devuelve una lista nueva ordenada por ``TimeWindow.compare_to``."""
        items = list(windows)
        for item in items:
            if not isinstance(item, TimeWindow):
                raise InvalidArgumentError(
                    f"sort solo acepta TimeWindow, se recibió {item!r}"
                )
        return sorted(items)
