"""Protocol for the key-value store backing the note collection."""

from typing import Any, Protocol


class KeyValueStoreProtocol(Protocol):
    """Async get/set store; the last successful set is the truth."""

    async def get(self, key: str) -> Any | None:
        """Return the value stored under key, or None if absent."""
        ...

    async def set(self, key: str, value: Any) -> None:
        """Replace the value stored under key."""
        ...

    async def close(self) -> None:
        """Release any held connections."""
        ...
