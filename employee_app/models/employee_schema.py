"""
Employee Data Schema Definition
Single source of truth for the employees table and the SQL issued against it.
"""
from typing import List, Tuple

EMPLOYEE_TABLE = "employees"

Employee_Columns: List[Tuple[str, str]] = [
    ("id", "INTEGER PRIMARY KEY AUTOINCREMENT"),
    ("name", "TEXT"),
    ("department", "TEXT"),
    ("salary", "REAL"),
]

# Columns supplied by the user; id is assigned by the database.
Employee_Input_Columns: List[str] = ["name", "department", "salary"]

INSERT_EMPLOYEE_SQL = "INSERT INTO employees (name, department, salary) VALUES (?, ?, ?)"
SELECT_EMPLOYEES_SQL = "SELECT * FROM employees"
UPDATE_SALARY_SQL = "UPDATE employees SET salary = ? WHERE id = ?"
DELETE_EMPLOYEE_SQL = "DELETE FROM employees WHERE id = ?"
