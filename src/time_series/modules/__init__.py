"""📦 modules/: Bounded contexts específicos del negocio

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Value Objects y reglas del subdominio
   • application/    → Casos de uso
   • infrastructure/ → Observabilidad y adaptadores concretos
   • presentation/   → Salida para humanos

✨ Módulos actuales:
   • windows/ → Ventanas temporales semiabiertas y valores acotados en el tiempo
"""
