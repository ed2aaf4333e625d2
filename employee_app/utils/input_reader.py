# Typed console prompts
import math
from typing import Callable, TypeVar

T = TypeVar("T")

INVALID_NUMBER_MESSAGE = "Please enter a valid number."


def read_text(label: str) -> str:
    """Prompt once and return the stripped line."""
    return input(label).strip()


def _read_number(label: str, parse: Callable[[str], T]) -> T:
    while True:
        raw = input(label).strip()
        try:
            value = parse(raw)
        except ValueError:
            print(INVALID_NUMBER_MESSAGE)
            continue
        # nan and inf parse as floats but cannot be stored as a salary
        if isinstance(value, float) and not math.isfinite(value):
            print(INVALID_NUMBER_MESSAGE)
            continue
        return value


def read_int(label: str) -> int:
    """Prompt until the user gives an integer."""
    return _read_number(label, int)


def read_float(label: str) -> float:
    """Prompt until the user gives a finite number."""
    return _read_number(label, float)
