"""Adapters for external services.

- DailyAdapter: Create rooms and send participant actions via the Daily API
"""

from src.adapters.daily_adapter import DailyAdapter

__all__ = [
    "DailyAdapter",
]
