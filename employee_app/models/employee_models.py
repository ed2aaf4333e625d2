"""
Employee record models and operation results.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class EmployeeCreate(BaseModel):
    """Fields entered by the user when adding an employee."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    department: str
    salary: float


class Employee(BaseModel):
    """
    One row of the employees table.
    Columns other than id may be NULL in an externally provisioned table.
    """
    id: int
    name: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None


class OperationStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class OperationResult(BaseModel):
    """Outcome of a single database round trip."""
    status: OperationStatus
    rows_affected: int = 0
    employees: List[Employee] = []
    error: Optional[str] = None  # set when status is FAILED

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.SUCCESS
