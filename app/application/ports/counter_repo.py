"""Port interface for the likes counter store."""

from abc import ABC, abstractmethod


class CounterRepository(ABC):
    @abstractmethod
    async def get(self) -> int:
        """Return the current persisted value. Creates the counter at 0 if missing.

        Raises:
            StorageUnavailable: storage cannot be read.
            MalformedStoredValue: stored content is not a non-negative integer.
        """
        ...

    @abstractmethod
    async def increment(self) -> int:
        """Add one to the counter and return the NEW (persisted) value.

        Must not lose updates when called concurrently from the same process.
        """
        ...

    @abstractmethod
    async def set(self, value: int) -> int:
        """Overwrite the counter and return the stored value. Used by maintenance tooling."""
        ...

    @abstractmethod
    async def check_available(self) -> None:
        """Verify the store can be used, without creating or changing anything.

        Raises:
            CounterStoreError: the store is unreadable, unwritable or malformed.
        """
        ...
