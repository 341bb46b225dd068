from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..absences.model import AbsenceRecord
from ..core.constants import MONTH_NAMES


@dataclass(frozen=True)
class CoverageHours:
    covered_hours: int = 0
    accounted_hours: int = 0

    def add(self, hours: int, *, covered: bool) -> "CoverageHours":
        if covered:
            return replace(self, covered_hours=self.covered_hours + hours)
        return replace(self, accounted_hours=self.accounted_hours + hours)

    def to_dict(self) -> dict[str, int]:
        return {"coveredHours": self.covered_hours, "accountedHours": self.accounted_hours}


@dataclass(frozen=True)
class GlobalTotals:
    total_absence_events: int = 0
    total_hours: int = 0
    total_covered_hours: int = 0
    total_accounted_hours: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalAbsencesEvents": self.total_absence_events,
            "totalHours": self.total_hours,
            "totalCoveredHours": self.total_covered_hours,
            "totalAccountedHours": self.total_accounted_hours,
        }


@dataclass(frozen=True)
class MonthlyConsolidatedData:
    """Consolidado mensual for one zero-based (month, year)."""

    month: int
    year: int
    absences_by_teacher: dict[str, int]
    absences_by_subject: dict[str, int]
    replacements_by_teacher: dict[str, CoverageHours]
    coverage_by_original_subject: dict[str, CoverageHours]
    global_totals: GlobalTotals
    records_in_month: tuple[AbsenceRecord, ...]

    @property
    def label(self) -> str:
        return f"{MONTH_NAMES[self.month]} {self.year}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "year": self.year,
            "label": self.label,
            "absencesByTeacher": dict(self.absences_by_teacher),
            "absencesBySubject": dict(self.absences_by_subject),
            "replacementsByTeacher": {k: v.to_dict() for k, v in self.replacements_by_teacher.items()},
            "coverageByOriginalSubject": {k: v.to_dict() for k, v in self.coverage_by_original_subject.items()},
            "globalTotals": self.global_totals.to_dict(),
            "recordsInMonth": [r.to_dict() for r in self.records_in_month],
        }
