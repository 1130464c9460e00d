"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import get_connection, release_connection
from db.exceptions import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Role table: monthly pay attached to each role grade
CREATE TABLE IF NOT EXISTS role (
    rank            VARCHAR(2) PRIMARY KEY CHECK (char_length(rank) = 2),
    name            VARCHAR(50) NOT NULL,
    amount          INTEGER NOT NULL DEFAULT 0
);

-- Capability table: monthly pay attached to each capability grade
CREATE TABLE IF NOT EXISTS capability (
    rank            VARCHAR(2) PRIMARY KEY CHECK (char_length(rank) = 2),
    name            VARCHAR(50) NOT NULL,
    amount          INTEGER NOT NULL DEFAULT 0
);

-- Employee table: master record with allowances and monthly deductions
CREATE TABLE IF NOT EXISTS employee (
    no                          VARCHAR(10) PRIMARY KEY,
    name                        VARCHAR(100) NOT NULL,
    birthday                    DATE,
    join_date                   DATE NOT NULL,
    role_rank                   VARCHAR(2) NOT NULL REFERENCES role(rank),
    capability_rank             VARCHAR(2) NOT NULL REFERENCES capability(rank),
    commute_amount              INTEGER NOT NULL DEFAULT 0,
    rent_amount                 INTEGER NOT NULL DEFAULT 0,
    health_insurance_amount     INTEGER NOT NULL DEFAULT 0,
    employee_pension_amount     INTEGER NOT NULL DEFAULT 0,
    income_tax_amount           INTEGER NOT NULL DEFAULT 0,
    inhabitant_tax_amount       INTEGER NOT NULL DEFAULT 0
);

-- Work table: monthly time record used for overtime pay
CREATE TABLE IF NOT EXISTS work (
    employee_no                 VARCHAR(10) NOT NULL REFERENCES employee(no) ON DELETE CASCADE,
    year_month                  INTEGER NOT NULL,
    overtime_hours              NUMERIC(6,2) NOT NULL DEFAULT 0,
    late_night_overtime_hours   NUMERIC(6,2) NOT NULL DEFAULT 0,
    holiday_work_hours          NUMERIC(6,2) NOT NULL DEFAULT 0,
    PRIMARY KEY (employee_no, year_month)
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        conn = get_connection()
    except psycopg2.Error as e:
        logger.error(f"Failed to acquire a database connection: {e}")
        raise QueryError("Connection Failure", e) from e

    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        try:
            conn.rollback()
        except psycopg2.Error as rollback_error:
            logger.warning(f"Rollback failed after schema failure: {rollback_error}")
        logger.error(f"Failed to initialize schema: {e}")
        raise QueryError("Schema Failure", e) from e
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
