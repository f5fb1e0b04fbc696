# time-series/demo_windows.py
"""
Demo: Álgebra de Ventanas Temporales.

Arquitectura: Composition Root (Consumer)
Responsabilidad: Cablear el caso de uso con el renderizador y recorrer los
escenarios de referencia (solape, disjuntas, ventanas sin límites).
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# === Configuración de Path para Imports ===
PROJECT_ROOT = Path(__file__).parent
sys.path.append(str(PROJECT_ROOT / "src"))

from time_series.modules.windows import (  # noqa: E402
    CompareTimeWindows,
    TimeWindow,
    TimeWindowError,
    WindowReportRenderer,
    configure_logging,
)

BERLIN_WINTER = timezone(timedelta(hours=1))


def instant(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=BERLIN_WINTER)


SCENARIOS = [
    (
        "1. Ventanas solapadas",
        TimeWindow(instant(2024, 1, 1), instant(2025, 1, 1)),
        TimeWindow(instant(2024, 6, 1), instant(2025, 6, 1)),
    ),
    (
        "2. Ventanas disjuntas",
        TimeWindow(instant(2024, 1, 1), instant(2025, 1, 1)),
        TimeWindow(instant(2026, 1, 1), instant(2027, 1, 1)),
    ),
    (
        "3. Pasado infinito vs acotada",
        TimeWindow(None, instant(2025, 1, 1)),
        TimeWindow(instant(2026, 1, 1), instant(2027, 1, 1)),
    ),
    (
        "4. Todo el tiempo vs acotada",
        TimeWindow(),
        TimeWindow(instant(2024, 6, 1), instant(2025, 6, 1)),
    ),
    (
        "5. Todo el tiempo vs todo el tiempo",
        TimeWindow(),
        TimeWindow(),
    ),
    (
        "6. Acotada vs futuro infinito (sin solape)",
        TimeWindow(instant(2024, 1, 1), instant(2025, 1, 1)),
        TimeWindow(instant(2026, 1, 1), None),
    ),
]


def main() -> int:
    configure_logging(level="WARNING")

    use_case = CompareTimeWindows()
    renderer = WindowReportRenderer()

    try:
        for title, first, second in SCENARIOS:
            renderer.render(use_case.execute(first, second), title=title)
    except TimeWindowError as e:
        print(f"❌ Error de Ventana: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"❌ Error Crítico: {e}", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
