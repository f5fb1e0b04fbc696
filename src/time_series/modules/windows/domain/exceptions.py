"""
Excepciones del dominio de Ventanas Temporales.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class TimeWindowError(Exception):
    """Clase base para errores en el módulo de ventanas."""

    pass


class ConstructionError(TimeWindowError, ValueError):
    """Ambos límites presentes y el fin no es estrictamente posterior al inicio."""

    pass


class InvalidArgumentError(TimeWindowError, TypeError):
    """Se esperaba una TimeWindow (o un instante) y se recibió otra cosa o None."""

    pass
