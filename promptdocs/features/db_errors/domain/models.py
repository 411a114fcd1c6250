from dataclasses import dataclass, fields
from enum import Enum, unique
from typing import Any, Dict, Optional


@unique
class PgErrorCode(str, Enum):
    """SQLSTATE codes the classifier knows by name."""
    FOREIGN_KEY_VIOLATION = "23503"


@dataclass(frozen=True)
class DbErrorInfo:
    """
    The driver-independent view of a database failure.
    Every field is optional; drivers fill in whatever they have.
    """
    code: Optional[str] = None
    constraint_name: Optional[Any] = None
    detail: Optional[Any] = None
    table_name: Optional[Any] = None
    message: Optional[Any] = None

    @property
    def is_foreign_key_violation(self) -> bool:
        return self.code == PgErrorCode.FOREIGN_KEY_VIOLATION.value

    def as_payload(self) -> Dict[str, Any]:
        # Shallow on purpose: driver values need not be copyable
        return {f.name: getattr(self, f.name) for f in fields(self)}
