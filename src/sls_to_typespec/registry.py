"""Write-once name registry shared by the IR builder passes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from sls_to_typespec.errors import DuplicateKeyError

T = TypeVar("T")


class Registry(Generic[T]):
    """Mapping from lookup key to a named value, where every key is registered once.

    Usage:
        registry = Registry[ModelIR]()
        registry.register("user", model)
        registry.get("user")  # -> model
        registry.get("other")  # -> None
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._store: dict[str, T] = {}

    def register(self, key: str, value: T) -> None:
        """Register a value under key.

        Raises
        ------
            DuplicateKeyError: If key is already registered.

        """
        if key in self._store:
            raise DuplicateKeyError(key)
        self._store[key] = value

    def get(self, key: str) -> T | None:
        """Return the value registered under key, or None."""
        return self._store.get(key)

    def has(self, key: str) -> bool:
        """Check whether key is registered."""
        return key in self._store

    def values(self) -> Iterator[T]:
        """Iterate registered values in registration order."""
        return iter(self._store.values())
