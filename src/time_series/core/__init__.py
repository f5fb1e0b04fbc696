"""📦 core/: Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Primitivas temporales validadas reusables en CUALQUIER dominio:
     - Instantes (datetime con zona horaria)
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Value Objects del dominio de ventanas (TimeWindow, TimeBoundedValue)
   • Reglas de solapamiento, orden o partición de intervalos

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/
"""

from .value_objects import is_instant, require_instant

__all__ = ["is_instant", "require_instant"]
