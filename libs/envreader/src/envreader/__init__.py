"""Environment variable reading with typed lookups and defaults."""

from .config import (
    EnvironmentReader,
    get_env,
    get_env_bool,
    get_env_int,
    get_env_list,
)
from .errors import MissingConfigError
from .providers import EnvProvider, MappingProvider, OsEnvironProvider

__all__ = [
    "EnvProvider",
    "EnvironmentReader",
    "MappingProvider",
    "MissingConfigError",
    "OsEnvironProvider",
    "get_env",
    "get_env_bool",
    "get_env_int",
    "get_env_list",
]
