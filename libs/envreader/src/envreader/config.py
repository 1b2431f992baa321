"""Typed environment variable lookups with default fallback."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .errors import MissingConfigError
from .logging import get_logger
from .providers import EnvProvider, MappingProvider, OsEnvironProvider

log = get_logger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Unicode White_Space; the \x1c-\x1f separators are not stripped
_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_int(value: str) -> int | None:
    """Parse a signed 64-bit base-10 integer; ``None`` if malformed."""
    if not _INT_RE.fullmatch(value):
        return None
    try:
        parsed = int(value)
    except ValueError:
        # exceeds the interpreter's int string conversion limit
        return None
    if not _INT64_MIN <= parsed <= _INT64_MAX:
        return None
    return parsed


def parse_bool(value: str) -> bool | None:
    """Parse a boolean token such as ``1``, ``t`` or ``FALSE``; ``None`` if unrecognized."""
    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False
    return None


def split_value(value: str, sep: str) -> list[str]:
    """Split on the literal ``sep``; an empty separator splits into characters."""
    if sep == "":
        return list(value)
    return value.split(sep)


class EnvironmentReader:
    """Reads configuration values from an environment source.

    ``source`` may be an ``EnvProvider``, a plain mapping, or ``None`` for the
    live process environment.
    """

    def __init__(self, source: EnvProvider | Mapping[str, str] | None = None) -> None:
        if source is None:
            source = OsEnvironProvider()
        elif isinstance(source, Mapping):
            source = MappingProvider(source)
        self.source: EnvProvider = source

    def is_set(self, name: str) -> bool:
        return name in self.source

    def get_env(self, name: str, default: str = "") -> str:
        """Get a variable with surrounding whitespace stripped.

        An empty ``default`` marks the variable as required: if it is not
        set, ``MissingConfigError`` is raised. A non-empty default is
        returned unchanged.
        """
        value = self.source.get(name)
        if value is not None:
            return value.strip(_WHITESPACE)

        if not default:
            raise MissingConfigError(name)

        return default

    def get_env_int(self, name: str, default: int = 0) -> int:
        """Get a base-10 integer, or ``default`` if unset or unparseable."""
        value = self.source.get(name)
        if value is not None:
            parsed = parse_int(value)
            if parsed is not None:
                return parsed
            log.debug("env_int_fallback", variable=name, value=value, default=default)

        return default

    def get_env_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean, or ``default`` if the value is blank or unrecognized.

        An unset variable reads as ``"0"`` and so yields ``False`` whatever
        ``default`` is.
        """
        value = self.get_env(name, "0")
        if value:
            parsed = parse_bool(value)
            if parsed is not None:
                return parsed
            log.debug("env_bool_fallback", variable=name, value=value, default=default)
        return default

    def get_env_list(self, name: str, default: list[str] | None = None, sep: str = ",") -> list[str]:
        """Split a variable on ``sep``; a blank value yields ``default``.

        The variable is required: an unset variable raises
        ``MissingConfigError`` rather than falling back.
        """
        value = self.get_env(name, "")

        if value == "":
            return default if default is not None else []

        return split_value(value, sep)


_default_reader = EnvironmentReader()


def get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return _default_reader.get_env(key, default)


def get_env_int(key: str, default: int = 0) -> int:
    """Get environment variable as integer."""
    return _default_reader.get_env_int(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    return _default_reader.get_env_bool(key, default)


def get_env_list(key: str, default: list[str] | None = None, sep: str = ",") -> list[str]:
    """Get environment variable as a list of strings."""
    return _default_reader.get_env_list(key, default, sep)
