from __future__ import annotations

from dataclasses import dataclass

from ..absences.service import AbsenceService
from ..common.datetime_utils import format_iso_date
from .model import CoverageHours, MonthlyConsolidatedData


@dataclass(frozen=True)
class ReportData:
    report: MonthlyConsolidatedData
    rows: list[dict]
    summary: list[dict]


def report_rows(report: MonthlyConsolidatedData) -> list[dict]:
    return [
        {
            "date": format_iso_date(r.absence_date),
            "absent_teacher": r.absent_teacher,
            "absent_subject": r.absent_teacher_subject.value,
            "replacement_teacher": r.replacement_teacher,
            "replacement_subject": r.replacement_teacher_subject.value,
            "hours": r.hours_covered,
            "coverage_type": r.coverage_type.value,
        }
        for r in report.records_in_month
    ]


def summary_rows(report: MonthlyConsolidatedData) -> list[dict]:
    """Per replacement teacher and per original subject hour splits, sorted by name."""

    def _rows(kind: str, source: dict[str, CoverageHours]) -> list[dict]:
        return [
            {
                "kind": kind,
                "name": name,
                "covered_hours": hours.covered_hours,
                "accounted_hours": hours.accounted_hours,
                "total_hours": hours.covered_hours + hours.accounted_hours,
            }
            for name, hours in sorted(source.items())
        ]

    return _rows("teacher", report.replacements_by_teacher) + _rows("subject", report.coverage_by_original_subject)


class MonthlyReportService:
    def __init__(self, absences: AbsenceService):
        self._absences = absences

    def build_monthly_report(self, *, month: int, year: int) -> ReportData:
        report = self._absences.consolidate(month=month, year=year)
        return ReportData(report=report, rows=report_rows(report), summary=summary_rows(report))
