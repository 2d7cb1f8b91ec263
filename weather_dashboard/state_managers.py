"""State managers for handling application-wide mutable state.

State is guarded by asyncio.Lock; all state managers inherit from the
StateManager ABC so the lifespan can initialize and clean them up uniformly.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass

from weather_dashboard.models.weather import WeatherRecord


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide lock-protected access to mutable application state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


@dataclass(frozen=True)
class DashboardSnapshot:
    """Read-only view of the dashboard handed to views and routes."""

    records: tuple[WeatherRecord, ...]
    loading: bool
    message: str


class DashboardStateManager(StateManager):
    """Owns the ordered list of city cards, the loading flag and the message.

    The list only changes through add_if_absent and remove. Records are
    frozen, so snapshots can share them safely.
    """

    def __init__(self):
        """Initialize an empty dashboard."""
        self._records: list[WeatherRecord] = []
        self._loading: bool = False
        self._message: str = ""
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Initialize the dashboard state."""
        # Nothing is persisted; every start begins empty
        pass

    async def cleanup(self) -> None:
        """Drop all cards and reset flags on shutdown."""
        async with self._lock:
            self._records.clear()
            self._loading = False
            self._message = ""

    async def snapshot(self) -> DashboardSnapshot:
        """Get a consistent read-only view of the dashboard."""
        async with self._lock:
            return DashboardSnapshot(
                records=tuple(self._records),
                loading=self._loading,
                message=self._message,
            )

    async def get_records(self) -> tuple[WeatherRecord, ...]:
        """Get the cards in display order."""
        async with self._lock:
            return tuple(self._records)

    async def is_loading(self) -> bool:
        async with self._lock:
            return self._loading

    async def get_message(self) -> str:
        async with self._lock:
            return self._message

    async def set_message(self, message: str) -> None:
        """Replace the current user-facing message."""
        async with self._lock:
            self._message = message

    async def try_begin_fetch(self) -> bool:
        """Mark a lookup as in flight.

        Clears the previous message, like starting a fresh lookup in the page.

        Returns:
            False if another lookup is already in flight (nothing changes)
        """
        async with self._lock:
            if self._loading:
                return False
            self._loading = True
            self._message = ""
            return True

    async def end_fetch(self) -> None:
        """Clear the in-flight flag."""
        async with self._lock:
            self._loading = False

    async def add_if_absent(self, record: WeatherRecord) -> bool:
        """Append a card unless the city is already shown (case-insensitive).

        Returns:
            True if the record was appended
        """
        async with self._lock:
            if any(existing.dedup_key == record.dedup_key for existing in self._records):
                return False
            self._records.append(record)
            return True

    async def remove(self, city: str) -> bool:
        """Remove the card whose city matches exactly (case-sensitive).

        Returns:
            True if a card was removed
        """
        async with self._lock:
            remaining = [record for record in self._records if record.city != city]
            removed = len(remaining) != len(self._records)
            self._records = remaining
            return removed
