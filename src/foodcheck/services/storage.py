"""Key-value persistence contract shared by history and user lists."""

from typing import Protocol


class KeyValueStore(Protocol):
    """String-keyed storage without transactional guarantees."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if any."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store used for the memory backend and tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if any."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        self._values[key] = value

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        self._values.pop(key, None)
