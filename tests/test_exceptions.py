import pytest
from sqlalchemy.exc import IntegrityError

from app.shared.error_handlers import status_for
from app.shared.exceptions import (
    CheckViolation,
    ConstraintViolation,
    ForeignKeyViolation,
    NotNullViolation,
    RecordNotFound,
    UniqueViolation,
    classify_integrity_error,
)


class _PgError(Exception):
    def __init__(self, sqlstate, message="constraint failed"):
        super().__init__(message)
        self.sqlstate = sqlstate


class _MySQLError(Exception):
    pass


def _integrity_error(orig):
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize(
    "orig, expected",
    [
        (_PgError("23505"), UniqueViolation),
        (_PgError("23503"), ForeignKeyViolation),
        (_PgError("23001"), ForeignKeyViolation),
        (_PgError("23514"), CheckViolation),
        (_PgError("23502"), NotNullViolation),
        (_MySQLError(1062, "Duplicate entry 'LIC-1' for key 'license_number'"), UniqueViolation),
        (_MySQLError(1451, "Cannot delete or update a parent row"), ForeignKeyViolation),
        (_MySQLError(3819, "Check constraint 'chk_times' is violated."), CheckViolation),
        (Exception("UNIQUE constraint failed: rooms.room_name"), UniqueViolation),
        (Exception("FOREIGN KEY constraint failed"), ForeignKeyViolation),
        (Exception("CHECK constraint failed: chk_patients_first_name"), CheckViolation),
        (Exception("NOT NULL constraint failed: services.code"), NotNullViolation),
        (Exception("something unexpected"), ConstraintViolation),
    ],
)
def test_classify_integrity_error(orig, expected):
    error = classify_integrity_error(_integrity_error(orig), "room")
    assert type(error) is expected
    assert error.details["entity"] == "room"
    assert error.details["reason"] == str(orig)


def test_http_status_for_each_error():
    assert status_for(RecordNotFound("patient", 7)) == 404
    assert status_for(UniqueViolation("dup")) == 409
    assert status_for(ForeignKeyViolation("in use")) == 409
    assert status_for(CheckViolation("bad")) == 422
    assert status_for(NotNullViolation("missing")) == 422
    assert status_for(ConstraintViolation("other")) == 400


def test_not_found_message():
    error = RecordNotFound("invoice", 12)
    assert error.message == "invoice not found: 12"
    assert error.code == "not_found"
    assert error.details == {"entity": "invoice", "id": 12}
