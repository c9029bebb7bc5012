# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Component loggers with schema context
# PURPOSE: Tag log records with the table and operation being processed
# CREATED: 18 OCT 2026
# EXPORTS: get_logger, log_context, configure_logging, formatters
# ============================================================================
"""
Structured Logging

Every pgschema module logs through a ContextLogger bound to a component.
While a log_context block is active, records carry the table and
operation being processed:

    logger = get_logger(__name__, ComponentType.REGISTRY)

    with log_context(table="orders", operation="add_table"):
        logger.error('1 error found for table "orders": ...')

    # 2026-10-18 09:12:44 ERROR    pgschema.schema.registry [table=orders, op=add_table]: ...

Library modules never install handlers. configure_logging() does, for
the CLI, writing to stderr so generated output can go to stdout.
"""

import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union


class ComponentType(str, Enum):
    """Which part of pgschema emitted a record."""
    REGISTRY = "registry"
    VALIDATOR = "validator"
    SQL_GENERATOR = "sql_generator"
    TYPE_GENERATOR = "type_generator"
    LOADER = "loader"
    CLI = "cli"


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class LogContext:
    """Fields attached to every record logged inside a log_context block."""
    table: Optional[str] = None
    operation: Optional[str] = None
    component: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        fields = {
            "table": self.table,
            "operation": self.operation,
            "component": self.component,
        }
        data = {k: v for k, v in fields.items() if v is not None}
        data.update(self.extra)
        return data


class _ContextFrames(threading.local):
    def __init__(self):
        self.frames: List[LogContext] = []


_frames = _ContextFrames()


def get_current_context() -> LogContext:
    """Innermost active context (empty outside any log_context block)."""
    return _frames.frames[-1] if _frames.frames else LogContext()


@contextmanager
def log_context(
    table: Optional[str] = None,
    operation: Optional[str] = None,
    component: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Iterator[LogContext]:
    """
    Push context fields for the duration of a block.

    Fields not given are inherited from the enclosing block; extra
    dicts are merged.
    """
    outer = get_current_context()
    frame = replace(
        outer,
        table=table if table is not None else outer.table,
        operation=operation if operation is not None else outer.operation,
        component=component if component is not None else outer.component,
        extra={**outer.extra, **(extra or {})},
    )
    _frames.frames.append(frame)
    try:
        yield frame
    finally:
        _frames.frames.pop()


# ============================================================================
# FORMATTERS
# ============================================================================

class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation."""

    def __init__(self, include_context: bool = True, include_source: bool = True):
        super().__init__()
        self.include_context = include_context
        self.include_source = include_source

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = get_current_context().to_dict() if self.include_context else {}
        if context:
            payload["context"] = context

        data = getattr(record, "extra", None)
        if data:
            payload["data"] = data

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        if self.include_source:
            payload["source"] = f"{record.filename}:{record.lineno} ({record.funcName})"

        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line text with the active table/operation in brackets."""

    FORMAT = "%(asctime)s %(levelname)-8s %(name)s%(schema_context)s: %(message)s"

    def __init__(self):
        super().__init__(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        context = get_current_context()
        tags = [
            f"{label}={value}"
            for label, value in (("table", context.table), ("op", context.operation))
            if value
        ]
        record.schema_context = f" [{', '.join(tags)}]" if tags else ""
        return super().format(record)


# ============================================================================
# LOGGERS
# ============================================================================

class ContextLogger(logging.LoggerAdapter):
    """
    Adapter that copies the component and the active log_context into
    the record's `extra` attribute.
    """

    def process(self, msg, kwargs):
        data = dict(kwargs.get("extra") or {})
        component = self.extra.get("component") if self.extra else None
        if component is not None:
            data.setdefault("component", getattr(component, "value", component))
        data.update(get_current_context().to_dict())
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str, component: Optional[ComponentType] = None) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name, normally __name__
        component: Component recorded on every record
    """
    return ContextLogger(logging.getLogger(name), {"component": component})


def configure_logging(level: Union[str, int] = "INFO", json_output: bool = False) -> None:
    """
    Install a single stderr handler on the root logger.

    Replaces any handlers already installed. JSON output is also
    selected by LOG_FORMAT=json.

    Args:
        level: Level name or number
        json_output: Emit StructuredFormatter JSON instead of text
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    use_json = json_output or os.getenv("LOG_FORMAT", "").lower() == "json"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter() if use_json else HumanFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]
