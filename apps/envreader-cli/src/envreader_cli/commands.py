"""Implementation of the envreader CLI subcommands."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from envreader.config import EnvironmentReader, parse_bool, parse_int, split_value
from envreader.errors import MissingConfigError, error_report
from envreader.logging import get_logger
from envreader.models import LookupResult, ValueKind

log = get_logger(__name__)

console = Console(emoji=False, markup=False, highlight=False, soft_wrap=True)
err_console = Console(stderr=True, emoji=False, markup=False, highlight=False, soft_wrap=True)

Default = str | int | bool | list[str]


class InvalidDefaultError(ValueError):
    """A ``--default`` value does not convert to the requested type."""


def convert_default(kind: ValueKind, default: str | None, sep: str = ",") -> Default:
    """Convert command-line ``default`` text to the type of ``kind``."""
    if kind == "int":
        if default is None:
            return 0
        parsed = parse_int(default)
        if parsed is None:
            raise InvalidDefaultError(f"--default {default!r} is not an integer")
        return parsed
    if kind == "bool":
        if default is None:
            return False
        parsed_bool = parse_bool(default)
        if parsed_bool is None:
            raise InvalidDefaultError(f"--default {default!r} is not a boolean")
        return parsed_bool
    if kind == "list":
        return split_value(default, sep) if default else []
    return default or ""


def _write(target: Console, line: str) -> None:
    # written as-is: no tab expansion or emoji codes
    target.file.write(line + "\n")
    target.file.flush()


def lookup(
    reader: EnvironmentReader,
    name: str,
    kind: ValueKind = "str",
    default: Default | None = None,
    sep: str = ",",
) -> LookupResult:
    """Run the lookup matching ``kind``; ``default`` is already converted."""
    if default is None:
        default = convert_default(kind, None, sep)
    is_set = reader.is_set(name)

    if kind == "int":
        value = reader.get_env_int(name, default)
    elif kind == "bool":
        value = reader.get_env_bool(name, default)
    elif kind == "list":
        value = reader.get_env_list(name, default, sep)
    else:
        value = reader.get_env(name, default)

    return LookupResult(name=name, kind=kind, value=value, is_set=is_set)


def _format_value(result: LookupResult) -> list[str]:
    if isinstance(result.value, bool):
        return [str(result.value).lower()]
    if isinstance(result.value, list):
        return list(result.value)
    return [str(result.value)]


def run_get(
    reader: EnvironmentReader,
    name: str,
    kind: ValueKind = "str",
    default: Default | None = None,
    sep: str = ",",
    as_json: bool = False,
) -> int:
    """Print one variable. Returns the process exit status."""
    try:
        result = lookup(reader, name, kind, default, sep)
    except MissingConfigError as e:
        log.error("missing_config", variable=e.name)
        if as_json:
            _write(err_console, error_report(e).model_dump_json())
        else:
            _write(err_console, f"error: {e}")
        return 1

    if as_json:
        _write(console, result.model_dump_json())
    else:
        for line in _format_value(result):
            _write(console, line)
    return 0


def run_check(reader: EnvironmentReader, names: Sequence[str]) -> int:
    """Verify that every variable in ``names`` is set."""
    missing = [name for name in names if not reader.is_set(name)]
    if not missing:
        log.debug("check_ok", variables=list(names))
        return 0

    log.error("check_failed", missing=missing)
    for name in missing:
        _write(err_console, f"missing: {name}")
    return 1
