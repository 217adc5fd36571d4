"""A name-keyed registry of shared resources."""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_log = logging.getLogger(__name__)


class ResourceManager(Generic[T]):
    """Stores resources by name; adding an existing name replaces it with a warning."""

    def __init__(self) -> None:
        self._resources: Dict[str, T] = {}

    def add(self, name: str, resource: T) -> None:
        if self.exists(name):
            _log.warning("%s already exist, it has been overridden", name)
        self._resources[name] = resource

    def get(self, name: str) -> Optional[T]:
        """Return the resource, or None when nothing is stored under ``name``."""
        return self._resources.get(name)

    def exists(self, name: str) -> bool:
        return name in self._resources

    def __contains__(self, name: object) -> bool:
        return name in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)