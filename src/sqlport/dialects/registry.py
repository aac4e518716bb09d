"""
Lookup of dialect singletons by backend name.
"""

from __future__ import annotations

import os
from typing import Callable, Final

from ..utils import get_logger
from .base import Dialect
from .db2 import get_db2_dialect
from .default import get_default_dialect
from .errors import DialectConfigurationError
from .mysql import get_mysql_dialect
from .oracle import get_oracle_dialect
from .postgres import get_postgres_dialect
from .sqlite import get_sqlite_dialect
from .tidb import get_tidb_dialect

DEFAULT_ENV_VAR: Final[str] = "SQLPORT_DIALECT"

_FACTORIES: dict[str, Callable[[], Dialect]] = {
    "default": get_default_dialect,
    "mysql": get_mysql_dialect,
    "tidb": get_tidb_dialect,
    "postgresql": get_postgres_dialect,
    "oracle": get_oracle_dialect,
    "db2": get_db2_dialect,
    "sqlite": get_sqlite_dialect,
}

_ALIASES: dict[str, str] = {
    "mariadb": "mysql",
    "postgres": "postgresql",
    "pgsql": "postgresql",
    "sqlite3": "sqlite",
}

# Dialects hold no mutable state, so one instance per backend is shared.
_INSTANCES: dict[str, Dialect] = {name: factory() for name, factory in _FACTORIES.items()}

logger = get_logger("dialects.registry")


def _canonical_name(value: str) -> str:
    normalized = value.strip().lower()
    if "://" in normalized:
        normalized = normalized.split("://", 1)[0]
    # Driver suffixes such as ``mysql+pymysql``.
    normalized = normalized.split("+", 1)[0]
    return _ALIASES.get(normalized, normalized)


def available_dialects() -> list[str]:
    return sorted(_FACTORIES)


def get_dialect(name: str) -> Dialect:
    """
    Return the shared dialect for a backend name, alias, or DSN scheme.
    """

    canonical = _canonical_name(name)
    try:
        return _INSTANCES[canonical]
    except KeyError:
        raise DialectConfigurationError(
            f"Unknown dialect {name!r}; expected one of {', '.join(available_dialects())}"
        ) from None


def dialect_from_env(env_var: str = DEFAULT_ENV_VAR) -> Dialect:
    """
    Resolve the dialect named by an environment variable.
    """

    value = os.getenv(env_var)
    if not value:
        raise DialectConfigurationError(f"Environment variable {env_var} is not set")
    dialect = get_dialect(value)
    logger.info("Using %s dialect from %s", dialect.name, env_var, extra={"dialect": dialect.name})
    return dialect
