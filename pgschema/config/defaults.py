# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for rendering and logging
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for SQL/TypeScript rendering and logging.
These can be overridden via environment variables or by passing a
GeneratorDefaults instance to SchemaRegistry.

Environment overrides (PGSCHEMA_*, LOG_LEVEL, LOG_FORMAT) are read
once by get_defaults() and cached until reset_defaults().
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from pgschema.contracts import NullableStyle


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class GeneratorDefaults:
    """
    Defaults for the SQL and TypeScript generators.

    Controls layout, banner comments, identifier quoting and the
    nullable field style.
    """
    # Layout
    sql_indent: int = 2
    typescript_indent: int = 2

    # BEGIN/END AUTO GENERATED banner comments
    include_banner: bool = True
    banner_label: str = "pgschema"

    # SQL rendering
    quote_identifiers: bool = False  # "users" instead of users
    guard_enum_types: bool = False   # CREATE TYPE inside DO $$ IF NOT EXISTS

    # TypeScript rendering
    nullable_style: NullableStyle = NullableStyle.OPTIONAL

    def __post_init__(self):
        if self.sql_indent < 0 or self.typescript_indent < 0:
            raise ValueError("Indent widths must be non-negative")

    @property
    def sql_indent_str(self) -> str:
        return " " * self.sql_indent

    @property
    def typescript_indent_str(self) -> str:
        return " " * self.typescript_indent

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create from environment variables."""
        return cls(
            sql_indent=_env_int("PGSCHEMA_SQL_INDENT", 2),
            typescript_indent=_env_int("PGSCHEMA_TS_INDENT", 2),
            include_banner=_env_flag("PGSCHEMA_BANNER", True),
            quote_identifiers=_env_flag("PGSCHEMA_QUOTE_IDENTIFIERS", False),
            guard_enum_types=_env_flag("PGSCHEMA_GUARD_ENUMS", False),
            nullable_style=NullableStyle(
                os.getenv("PGSCHEMA_NULLABLE_STYLE", NullableStyle.OPTIONAL.value).lower()
            ),
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "INFO"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Generator and logging defaults, read together."""
    generator: GeneratorDefaults = field(default_factory=GeneratorDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Read both sections from the environment."""
        return cls(
            generator=GeneratorDefaults.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Process-wide defaults, read from the environment on first use."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Forget cached defaults so the next get_defaults() re-reads the environment."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GeneratorDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
