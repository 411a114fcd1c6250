from typing import Any, Optional

from promptdocs.core.logging.channels import TraceChannels, get_channels
from ..data.extractor import extract_error_info, safe_str

MISSING = "unknown"


def _display(value: Any) -> str:
    if value is None:
        return MISSING
    text = safe_str(value)
    return MISSING if text is None else text


def describe_db_error(error: Any, trace: Optional[TraceChannels] = None) -> str:
    """
    Turns a database failure into a message fit for an API response.

    Foreign-key violations (SQLSTATE 23503) report the driver's detail line;
    everything else reports the error message. Accepts SQLAlchemy wrappers,
    raw driver exceptions, or plain dicts. Never raises.
    """
    trace = trace or get_channels()
    info = extract_error_info(error)

    if info.is_foreign_key_violation:
        trace.db("Foreign key violation detected:", {
            "constraint": info.constraint_name,
            "detail": info.detail,
            "table": info.table_name,
        })
        return f"Database constraint error: {_display(info.detail)}"

    trace.db("Unknown database error:", info.as_payload())
    return f"Unknown database error: {_display(info.message)}"
