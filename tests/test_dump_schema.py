import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "dump_schema.py"


@pytest.fixture(scope="module")
def dump_schema():
    module_spec = importlib.util.spec_from_file_location("dump_schema", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_sqlite_ddl(dump_schema):
    ddl = dump_schema.render_schema("sqlite")
    for table in ("users", "patients", "appointments", "invoice_items", "inventory"):
        assert f"CREATE TABLE {table} (" in ddl
    assert "GENERATED ALWAYS AS (quantity * unit_price)" in ddl
    assert "CONSTRAINT chk_times CHECK (scheduled_end > scheduled_start)" in ddl
    assert "CREATE INDEX idx_patients_name ON patients (last_name, first_name)" in ddl
    assert "ON DELETE RESTRICT" in ddl
    assert "ON DELETE SET NULL" in ddl
    # parents come before the tables that reference them
    assert ddl.index("CREATE TABLE patients (") < ddl.index("CREATE TABLE appointments (")
    assert ddl.index("CREATE TABLE invoices (") < ddl.index("CREATE TABLE invoice_items (")


def test_postgresql_generated_column_is_stored(dump_schema):
    ddl = dump_schema.render_schema("postgresql")
    assert "GENERATED ALWAYS AS (quantity * unit_price) STORED" in ddl


def test_mysql_date_defaults_are_parenthesized(dump_schema):
    ddl = dump_schema.render_schema("mysql")
    assert "assigned_date DATE NOT NULL DEFAULT (CURRENT_DATE)" in ddl
    assert "invoice_date DATE NOT NULL DEFAULT (CURRENT_DATE)" in ddl
    assert "DEFAULT CURRENT_DATE," not in ddl
    # virtual on mysql
    assert "GENERATED ALWAYS AS (quantity * unit_price)," in ddl


def test_main_prints_ddl(dump_schema, capsys):
    assert dump_schema.main(["--dialect", "mysql"]) == 0
    assert "CREATE TABLE doctor_specialties" in capsys.readouterr().out
