from __future__ import annotations

from datetime import date

from src.absence_system.absence_system.absences.service import AbsenceService
from src.absence_system.absence_system.reports.service import MonthlyReportService


def test_report_rows_follow_records_in_month(march_records, make_record, absences_repo):
    april = make_record(date(2024, 4, 2), hours=4)
    svc = MonthlyReportService(AbsenceService(absences_repo(march_records + [april])))

    data = svc.build_monthly_report(month=2, year=2024)

    assert [row["date"] for row in data.rows] == ["2024-03-10", "2024-03-05"]
    assert data.rows[0]["coverage_type"] == "Hora contabilizada pero no hecha"
    assert data.report.global_totals.total_hours == 5


def test_summary_rows_sorted_by_name_per_kind(march_records, absences_repo):
    svc = MonthlyReportService(AbsenceService(absences_repo(march_records)))

    summary = svc.build_monthly_report(month=2, year=2024).summary

    assert [(s["kind"], s["name"]) for s in summary] == [
        ("teacher", "Luis Soto"),
        ("teacher", "María Rojas"),
        ("subject", "Historia"),
        ("subject", "Matemática"),
    ]
    assert summary[1]["total_hours"] == 3
