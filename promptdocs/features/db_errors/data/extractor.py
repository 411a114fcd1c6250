from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from sqlalchemy.exc import StatementError

from ..domain.models import DbErrorInfo

# Field name -> names used by psycopg2/psycopg (diag), asyncpg and node-style payloads
FIELD_ALIASES = {
    "code": ("code", "pgcode", "sqlstate"),
    "constraint_name": ("constraint_name", "constraint"),
    "detail": ("detail", "message_detail"),
    "table_name": ("table_name", "table"),
    "message": ("message", "message_primary"),
}


def _lookup(source: Any, name: str) -> Any:
    # Attribute access on driver objects can raise (closed cursors, lazy diag)
    try:
        if isinstance(source, Mapping):
            return source.get(name)
        return getattr(source, name, None)
    except Exception:
        return None


def _first(sources: Iterable[Any], names: Tuple[str, ...]) -> Any:
    for source in sources:
        if source is None:
            continue
        for name in names:
            value = _lookup(source, name)
            if value is not None:
                return value
    return None


def safe_str(value: Any) -> Optional[str]:
    try:
        return str(value)
    except Exception:
        return None


def unwrap_driver_error(error: Any) -> Any:
    """
    SQLAlchemy wraps DBAPI exceptions; the SQLSTATE lives on `.orig`.
    The wrapper's own `code` is a SQLAlchemy docs code, not a SQLSTATE.
    """
    if isinstance(error, StatementError) and error.orig is not None:
        return error.orig
    return error


def extract_error_info(error: Any) -> DbErrorInfo:
    """
    Collects code/constraint/detail/table/message from any error shape.
    Never raises; missing fields stay None.
    """
    driver_error = unwrap_driver_error(error)
    diag = None if isinstance(driver_error, Mapping) else _lookup(driver_error, "diag")
    sources = (driver_error, diag)

    code = _first(sources, FIELD_ALIASES["code"])
    message = _first(sources, FIELD_ALIASES["message"])
    if message is None and isinstance(driver_error, BaseException):
        message = safe_str(driver_error)

    return DbErrorInfo(
        code=safe_str(code) if code is not None else None,
        constraint_name=_first(sources, FIELD_ALIASES["constraint_name"]),
        detail=_first(sources, FIELD_ALIASES["detail"]),
        table_name=_first(sources, FIELD_ALIASES["table_name"]),
        message=message,
    )
