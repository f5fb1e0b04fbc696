# tests/conftest.py
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def at():
    """
    Factory de instantes a medianoche con offset +01:00 (Europe/Berlin en invierno).
    """

    def _instant(year: int, month: int = 1, day: int = 1, offset_hours: int = 1) -> datetime:
        return datetime(year, month, day, tzinfo=timezone(timedelta(hours=offset_hours)))

    return _instant
