"""
Employee Data Repository
Handles all employee database operations.

Every function issues one parameterized statement against the connection it
is given; connections come from `get_connection`, one per operation.
"""
import csv
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List
from employee_app.config.settings import EMPLOYEE_CSV_PATH, EMPLOYEE_DB_PATH
from employee_app.models.employee_models import EmployeeCreate
from employee_app.models.employee_schema import (
    EMPLOYEE_TABLE,
    Employee_Columns,
    Employee_Input_Columns,
    INSERT_EMPLOYEE_SQL,
    SELECT_EMPLOYEES_SQL,
    UPDATE_SALARY_SQL,
    DELETE_EMPLOYEE_SQL,
)

logger = logging.getLogger(__name__)


def _table_exists(conn: sqlite3.Connection) -> bool:
    cur = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name = ?;",
        (EMPLOYEE_TABLE,),
    )
    return cur.fetchone() is not None


def ensure_employee_db(
    csv_path: str = EMPLOYEE_CSV_PATH, db_path: str = EMPLOYEE_DB_PATH
) -> str:
    """
    Ensure the SQLite DB holds an employees table. If the table is missing,
    create it and, when a CSV path is given, seed it from the CSV.
    An existing table is left exactly as it is.
    Returns the db_path.
    """
    conn = sqlite3.connect(db_path)
    try:
        if _table_exists(conn):
            return db_path

        if csv_path and not os.path.exists(csv_path):
            raise FileNotFoundError(f"Employee CSV not found: {csv_path}")

        cur = conn.cursor()
        columns_sql = ", ".join([f"{name} {ctype}" for name, ctype in Employee_Columns])
        cur.execute(f"CREATE TABLE {EMPLOYEE_TABLE} ({columns_sql});")
        logger.info("Created table %s in %s", EMPLOYEE_TABLE, db_path)

        if csv_path:
            with open(csv_path, "r", encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                rows = [
                    tuple((row.get(col) or "").strip() or None for col in Employee_Input_Columns)
                    for row in reader
                ]
            cur.executemany(INSERT_EMPLOYEE_SQL, rows)
            logger.info("Seeded %d employees from %s", len(rows), csv_path)

        conn.commit()
    finally:
        conn.close()
    return db_path


@contextmanager
def get_connection(db_path: str = EMPLOYEE_DB_PATH) -> Iterator[sqlite3.Connection]:
    """
    Open a connection for a single operation.
    Commits when the block succeeds, rolls back when it raises, and always closes.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def insert_employee(conn: sqlite3.Connection, employee: EmployeeCreate) -> int:
    """Insert one employee and return the id the database assigned."""
    cur = conn.execute(
        INSERT_EMPLOYEE_SQL,
        (employee.name, employee.department, employee.salary),
    )
    return cur.lastrowid


def fetch_employees(conn: sqlite3.Connection) -> List[sqlite3.Row]:
    """Return every employee row in the order the database yields them."""
    return conn.execute(SELECT_EMPLOYEES_SQL).fetchall()


def update_salary(conn: sqlite3.Connection, employee_id: int, salary: float) -> int:
    """Set the salary for an id. Returns the number of rows matched."""
    cur = conn.execute(UPDATE_SALARY_SQL, (salary, employee_id))
    return cur.rowcount


def delete_employee(conn: sqlite3.Connection, employee_id: int) -> int:
    """Delete the row for an id. Returns the number of rows removed."""
    cur = conn.execute(DELETE_EMPLOYEE_SQL, (employee_id,))
    return cur.rowcount
