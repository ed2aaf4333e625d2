"""
Employee Service
Add, view, update and delete operations over the employee repository.

Each operation is one round trip on its own connection. Database failures are
logged here and turned into a FAILED result so the caller can keep going.
"""
import logging
import sqlite3
from pydantic import ValidationError
from employee_app.config.settings import EMPLOYEE_DB_PATH
from employee_app.models.employee_models import (
    Employee,
    EmployeeCreate,
    OperationResult,
    OperationStatus,
)
from employee_app.repositories import employee_repository

logger = logging.getLogger(__name__)


def _failed(action: str, e: Exception) -> OperationResult:
    logger.exception("Failed to %s", action)
    return OperationResult(status=OperationStatus.FAILED, error=str(e))


def _matched(rows: int) -> OperationResult:
    status = OperationStatus.SUCCESS if rows > 0 else OperationStatus.NOT_FOUND
    return OperationResult(status=status, rows_affected=rows)


def add_employee(employee: EmployeeCreate, db_path: str = EMPLOYEE_DB_PATH) -> OperationResult:
    """
    Insert a new employee record.

    Args:
        employee: Name, department and salary to store
        db_path: SQLite database file

    Returns:
        SUCCESS with rows_affected=1, or FAILED with the database error
    """
    try:
        with employee_repository.get_connection(db_path) as conn:
            new_id = employee_repository.insert_employee(conn, employee)
    except sqlite3.Error as e:
        return _failed("add employee", e)

    logger.info("Added employee id=%s", new_id)
    return OperationResult(status=OperationStatus.SUCCESS, rows_affected=1)


def view_employees(db_path: str = EMPLOYEE_DB_PATH) -> OperationResult:
    """
    Read every employee record.

    Returns:
        SUCCESS carrying the employees (possibly none), or FAILED
    """
    try:
        with employee_repository.get_connection(db_path) as conn:
            rows = employee_repository.fetch_employees(conn)
            employees = [Employee(**dict(row)) for row in rows]
    except (sqlite3.Error, ValidationError) as e:
        return _failed("view employees", e)

    return OperationResult(
        status=OperationStatus.SUCCESS,
        rows_affected=len(employees),
        employees=employees,
    )


def update_employee_salary(
    employee_id: int, salary: float, db_path: str = EMPLOYEE_DB_PATH
) -> OperationResult:
    """
    Change the salary of the employee with the given id.

    Returns:
        SUCCESS if a row matched, NOT_FOUND if none did, or FAILED
    """
    try:
        with employee_repository.get_connection(db_path) as conn:
            rows = employee_repository.update_salary(conn, employee_id, salary)
    except sqlite3.Error as e:
        return _failed(f"update employee id={employee_id}", e)

    return _matched(rows)


def delete_employee(employee_id: int, db_path: str = EMPLOYEE_DB_PATH) -> OperationResult:
    """
    Remove the employee with the given id.

    Returns:
        SUCCESS if a row was removed, NOT_FOUND if none matched, or FAILED
    """
    try:
        with employee_repository.get_connection(db_path) as conn:
            rows = employee_repository.delete_employee(conn, employee_id)
    except sqlite3.Error as e:
        return _failed(f"delete employee id={employee_id}", e)

    return _matched(rows)
