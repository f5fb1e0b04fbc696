"""
Renderizado de informes de comparación en terminal.

Arquitectura: Presentation Layer
Responsabilidad: Mostrar un WindowComparison con tablas de rich.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from time_series.modules.windows.application.use_cases import WindowComparison
from time_series.modules.windows.domain.value_objects import TimeWindow

ORDER_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def format_bound(value: Optional[datetime], side: str) -> str:
    """Límite ausente como infinito; presente con su isoformat() tal cual."""
    if value is None:
        return "-∞" if side == "start" else "+∞"
    return value.isoformat()


def format_window(window: Optional[TimeWindow]) -> str:
    if window is None:
        return "∅"
    return f"[{format_bound(window.start, 'start')}, {format_bound(window.end, 'end')})"


class WindowReportRenderer:
    """Dibuja las relaciones y los restos de una comparación."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, comparison: WindowComparison, title: str = "Comparación") -> None:
        self.console.rule(f"[bold cyan]{title}[/]", align="center")

        relations = Table(show_header=True, header_style="bold", box=box.ROUNDED)
        relations.add_column("Relación")
        relations.add_column("Resultado", justify="center")

        relations.add_row("A", escape(format_window(comparison.first)))
        relations.add_row("B", escape(format_window(comparison.second)))
        relations.add_row("A antes de B", _flag(comparison.is_before))
        relations.add_row("A después de B", _flag(comparison.is_after))
        relations.add_row("A igual a B", _flag(comparison.is_equal))
        relations.add_row("Solape", _flag(comparison.is_overlapping))
        relations.add_row("Orden", f"A {ORDER_SYMBOLS[comparison.order]} B")
        relations.add_row("Intersección", escape(format_window(comparison.overlap)))
        self.console.print(relations)

        remainders = Table(title="Restos", show_header=True, header_style="bold", box=None)
        remainders.add_column("#", justify="right")
        remainders.add_column("Ventana")
        for index, window in enumerate(comparison.remainders, 1):
            remainders.add_row(str(index), escape(format_window(window)))
        self.console.print(remainders)


def _flag(value: bool) -> str:
    return "[green]sí[/]" if value else "[red]no[/]"
