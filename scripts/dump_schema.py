# scripts/dump_schema.py
#  to run the script, run the following command:
#  python scripts/dump_schema.py --dialect postgresql > schema.sql

"""
Schema Dump Script
Prints the CREATE TABLE / CREATE INDEX statements for every clinic table
without connecting to a database
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import create_mock_engine

import app.model_registry  # noqa: F401
from app.database.connection import Base

DIALECT_URLS = {
    "mysql": "mysql://",
    "postgresql": "postgresql://",
    "sqlite": "sqlite://",
}


def render_schema(dialect: str) -> str:
    """Return the DDL for all registered models, in dependency order."""
    statements = []

    def collect(sql, *multiparams, **params):
        statements.append(str(sql.compile(dialect=engine.dialect)).strip() + ";")

    engine = create_mock_engine(DIALECT_URLS[dialect], collect)
    Base.metadata.create_all(engine, checkfirst=False)
    return "\n\n".join(statements) + "\n"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the clinic schema DDL")
    parser.add_argument("--dialect", choices=sorted(DIALECT_URLS), default="postgresql")
    args = parser.parse_args(argv)

    sys.stdout.write(render_schema(args.dialect))
    return 0


if __name__ == "__main__":
    sys.exit(main())
