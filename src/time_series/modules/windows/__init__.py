# src/time_series/modules/windows/__init__.py
"""
Módulo de Ventanas Temporales.
"""

from __future__ import annotations

# Application
from .application.use_cases import CompareTimeWindows, WindowComparison

# Domain
from .domain.exceptions import ConstructionError, InvalidArgumentError, TimeWindowError
from .domain.value_objects import TimeBoundedValue, TimeWindow

# Infrastructure
from .infrastructure.observability import ObservabilityService, configure_logging

# Presentation
from .presentation.report import WindowReportRenderer

__all__ = [
    "TimeWindow",
    "TimeBoundedValue",
    "TimeWindowError",
    "ConstructionError",
    "InvalidArgumentError",
    "CompareTimeWindows",
    "WindowComparison",
    "ObservabilityService",
    "configure_logging",
    "WindowReportRenderer",
]
