"""
Main Application
Entry point for the Employee Records console app.
"""
import logging
from employee_app.config.settings import ENV, EMPLOYEE_CSV_PATH, EMPLOYEE_DB_PATH, LOG_LEVEL
from employee_app.controllers.menu_controller import menu_loop
from employee_app.repositories.employee_repository import ensure_employee_db

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Environment: %s, database: %s", ENV, EMPLOYEE_DB_PATH)

    # UAT / PROD: the employees table is pre-provisioned
    if ENV == "dev":
        ensure_employee_db(EMPLOYEE_CSV_PATH, EMPLOYEE_DB_PATH)

    menu_loop(EMPLOYEE_DB_PATH)


if __name__ == "__main__":
    main()
