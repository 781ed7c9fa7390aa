"""Counter Repository Interface

Defines the contract for named sequence counters.
"""

from abc import ABC, abstractmethod


class CounterRepository(ABC):
    """
    Repository interface for Counter persistence

    increment() must be a single atomic increment-and-return. Reading the
    current value and writing value + 1 back in two steps races and is
    not an acceptable implementation.
    """

    @abstractmethod
    async def increment(self, key: str) -> int:
        """
        Atomically increment the counter for key and return the new value

        A missing counter is created starting from 0, so the first call
        for a key returns 1.

        Args:
            key: Sequence key (e.g., 'invoice-2025')

        Returns:
            The incremented value
        """
        pass

    @abstractmethod
    async def current(self, key: str) -> int:
        """
        Return the last value handed out for key (0 if never used)

        Args:
            key: Sequence key

        Returns:
            Current counter value
        """
        pass
