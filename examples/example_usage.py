"""Example: use the service layer without Flask.

Looks up (or registers) an employee, then prints the formatted history.
"""

import importlib

from config import get_settings_module

from src.attendance_portal.attendance_portal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    employee = container.identity_resolver.resolve("E1001", "Alice Nguyen", "Engineering")
    records = container.history_presenter.load_history(employee.id)
    for row in container.history_presenter.to_ui(records):
        print(row.date, row.status)


if __name__ == "__main__":
    main()
