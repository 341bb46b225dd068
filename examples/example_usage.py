"""Example: use the service layer without Flask.

Controllers are a thin layer; the consolidation runs in the services.
"""

import importlib

from config import get_settings_module

from src.absence_system.absence_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    data = container.monthly_report_service.build_monthly_report(month=2, year=2024)
    print(data.report.label, data.report.global_totals)
    for row in data.summary:
        print(row)


if __name__ == "__main__":
    main()
