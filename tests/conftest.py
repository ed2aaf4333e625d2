"""
pytest fixtures for the employee records test suite
"""
import pytest

from employee_app.repositories.employee_repository import ensure_employee_db


@pytest.fixture
def db_path(tmp_path):
    """A fresh SQLite database with an empty employees table."""
    return ensure_employee_db(None, str(tmp_path / "employees.db"))


@pytest.fixture
def unreachable_db_path(tmp_path):
    """A database path whose directory does not exist, so connecting fails."""
    return str(tmp_path / "missing_dir" / "employees.db")


@pytest.fixture
def feed_input(monkeypatch):
    """Script the lines returned by input(); EOF once they run out."""
    def _feed(*lines):
        answers = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
