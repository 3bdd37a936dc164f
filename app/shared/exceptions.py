# app/shared/exceptions.py
"""
Data-access errors.

Constraint violations raised by the database are translated into one of the
ClinicDataError subclasses so callers can tell a duplicate key from a blocked
delete from a failed CHECK without parsing driver messages themselves.
"""
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError


class ClinicDataError(Exception):
    """Base class for every error raised by the data-access layer."""

    code = "data_error"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RecordNotFound(ClinicDataError):
    code = "not_found"

    def __init__(self, entity: str, identifier: Any) -> None:
        super().__init__(f"{entity} not found: {identifier}", {"entity": entity, "id": identifier})


class ConstraintViolation(ClinicDataError):
    """A write was rejected by a database constraint."""

    code = "constraint_violation"


class UniqueViolation(ConstraintViolation):
    code = "unique_violation"


class ForeignKeyViolation(ConstraintViolation):
    code = "foreign_key_violation"


class CheckViolation(ConstraintViolation):
    code = "check_violation"


class NotNullViolation(ConstraintViolation):
    code = "not_null_violation"


# PostgreSQL SQLSTATE class 23 codes
_PG_SQLSTATES = {
    "23505": UniqueViolation,
    "23503": ForeignKeyViolation,
    "23001": ForeignKeyViolation,  # restrict_violation
    "23514": CheckViolation,
    "23502": NotNullViolation,
}

# MySQL / MariaDB error numbers
_MYSQL_ERRNOS = {
    1062: UniqueViolation,
    1451: ForeignKeyViolation,
    1452: ForeignKeyViolation,
    1216: ForeignKeyViolation,
    1217: ForeignKeyViolation,
    3819: CheckViolation,
    4025: CheckViolation,
    1048: NotNullViolation,
}

# SQLite only reports a message
_SQLITE_PREFIXES = (
    ("UNIQUE constraint failed", UniqueViolation),
    ("FOREIGN KEY constraint failed", ForeignKeyViolation),
    ("CHECK constraint failed", CheckViolation),
    ("NOT NULL constraint failed", NotNullViolation),
)


def _driver_error_class(orig: Any) -> type[ConstraintViolation]:
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _PG_SQLSTATES:
        return _PG_SQLSTATES[sqlstate]

    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and args[0] in _MYSQL_ERRNOS:
        return _MYSQL_ERRNOS[args[0]]

    message = str(orig)
    for prefix, error_cls in _SQLITE_PREFIXES:
        if prefix in message:
            return error_cls

    return ConstraintViolation


def classify_integrity_error(exc: IntegrityError, entity: Optional[str] = None) -> ConstraintViolation:
    """Map a SQLAlchemy IntegrityError onto the matching ConstraintViolation."""
    error_cls = _driver_error_class(exc.orig)
    driver_message = str(exc.orig).strip()
    subject = entity or "record"
    messages = {
        UniqueViolation: f"A {subject} with the same unique value already exists",
        ForeignKeyViolation: f"The {subject} references, or is referenced by, other records",
        CheckViolation: f"The {subject} violates a check constraint",
        NotNullViolation: f"A required {subject} field is missing",
    }
    message = messages.get(error_cls, f"The {subject} violates a database constraint")
    return error_cls(message, {"entity": subject, "reason": driver_message})
