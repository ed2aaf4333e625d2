"""
Menu Controller
Console menu loop for the employee records app.
Reads choices, dispatches to the employee service and prints the outcome.
"""
from typing import List
from employee_app.config.settings import EMPLOYEE_DB_PATH
from employee_app.models.employee_models import (
    Employee,
    EmployeeCreate,
    OperationResult,
    OperationStatus,
)
from employee_app.services import employee_service
from employee_app.utils.input_reader import read_float, read_int, read_text

MENU = """
--- Employee Database ---
1. Add Employee
2. View Employees
3. Update Employee
4. Delete Employee
5. Exit"""

EXIT_CHOICE = 5
TABLE_HEADER = "ID\tName\tDepartment\tSalary"
GOODBYE_MESSAGE = "Thankyou for using Employee App. Goodbye!"


def _text(value) -> str:
    return "null" if value is None else value


def format_employee_table(employees: List[Employee]) -> str:
    """
    Render employees as a tab-separated table, header first.
    NULL text columns print as "null" and a NULL salary as 0.0.
    """
    lines = [TABLE_HEADER]
    for emp in employees:
        salary = 0.0 if emp.salary is None else emp.salary
        lines.append(f"{emp.id}\t{_text(emp.name)}\t{_text(emp.department)}\t{salary}")
    return "\n".join(lines)


def _report_failure(result: OperationResult) -> None:
    print(f"Operation failed: {result.error}")


def _report_match(result: OperationResult, done_message: str) -> None:
    if result.status == OperationStatus.SUCCESS:
        print(done_message)
    elif result.status == OperationStatus.NOT_FOUND:
        print("Employee not found!")
    else:
        _report_failure(result)


def add_employee_cli(db_path: str = EMPLOYEE_DB_PATH) -> None:
    name = read_text("Enter name: ")
    department = read_text("Enter department: ")
    salary = read_float("Enter salary: ")

    result = employee_service.add_employee(
        EmployeeCreate(name=name, department=department, salary=salary),
        db_path=db_path,
    )
    if result.ok:
        print("Employee added successfully!")
    else:
        _report_failure(result)


def view_employees_cli(db_path: str = EMPLOYEE_DB_PATH) -> None:
    result = employee_service.view_employees(db_path=db_path)
    if result.ok:
        print()
        print(format_employee_table(result.employees))
    else:
        _report_failure(result)


def update_employee_cli(db_path: str = EMPLOYEE_DB_PATH) -> None:
    employee_id = read_int("Enter Employee ID to update: ")
    salary = read_float("Enter new salary: ")

    result = employee_service.update_employee_salary(employee_id, salary, db_path=db_path)
    _report_match(result, "Employee updated!")


def delete_employee_cli(db_path: str = EMPLOYEE_DB_PATH) -> None:
    employee_id = read_int("Enter Employee ID to delete: ")

    result = employee_service.delete_employee(employee_id, db_path=db_path)
    _report_match(result, "Employee deleted!")


ACTIONS = {
    1: add_employee_cli,
    2: view_employees_cli,
    3: update_employee_cli,
    4: delete_employee_cli,
}


def _read_choice() -> int:
    raw = input("Enter choice: ").strip()
    try:
        return int(raw)
    except ValueError:
        return -1


def menu_loop(db_path: str = EMPLOYEE_DB_PATH) -> None:
    """
    Show the menu until the user picks Exit.
    End of input or Ctrl+C is treated the same as Exit.
    """
    while True:
        print(MENU)
        try:
            choice = _read_choice()
            if choice == EXIT_CHOICE:
                break

            action = ACTIONS.get(choice)
            if action is None:
                print("Invalid choice!")
                continue

            action(db_path)
        except (EOFError, KeyboardInterrupt):
            print()
            break

    print(GOODBYE_MESSAGE)
