from __future__ import annotations

from dataclasses import dataclass

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.service import AbsenceService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import MonthlyReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    absences_repo: MySQLAbsenceRepository

    absence_service: AbsenceService
    monthly_report_service: MonthlyReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    absences_repo = MySQLAbsenceRepository(conn)

    absence_service = AbsenceService(absences_repo)
    monthly_report_service = MonthlyReportService(absence_service)

    return Container(
        conn=conn,
        absences_repo=absences_repo,
        absence_service=absence_service,
        monthly_report_service=monthly_report_service,
    )
