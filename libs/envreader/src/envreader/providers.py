"""Read-only sources of environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvProvider(Protocol):
    """A read-only name -> value table."""

    def get(self, name: str) -> str | None: ...

    def __contains__(self, name: object) -> bool: ...


class OsEnvironProvider:
    """Reads the live process environment on every call."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def __contains__(self, name: object) -> bool:
        return name in os.environ


class MappingProvider:
    """Reads from a caller-supplied mapping."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = mapping

    def get(self, name: str) -> str | None:
        return self._mapping.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._mapping
