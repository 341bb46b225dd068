from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import require_enum
from ..core.enums import CoverageType, Subject


@dataclass(frozen=True)
class NewAbsence:
    """Draft submitted by the registration form, before id and coverage exist."""

    absence_date: date
    absent_teacher: str
    absent_teacher_subject: Subject
    replacement_teacher: str
    replacement_teacher_subject: Subject
    hours_covered: int


@dataclass(frozen=True)
class AbsenceRecord:
    """Domain entity: one logged absence and its substitution.

    ``coverage_type`` is stored as given at construction. It is never
    recomputed from the subjects, so historical records keep the
    classification they were saved with.
    """

    record_id: int
    absence_date: date
    absent_teacher: str
    absent_teacher_subject: Subject
    replacement_teacher: str
    replacement_teacher_subject: Subject
    hours_covered: int
    coverage_type: CoverageType

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "date": format_iso_date(self.absence_date),
            "absentTeacher": self.absent_teacher,
            "absentTeacherSubject": self.absent_teacher_subject.value,
            "replacementTeacher": self.replacement_teacher,
            "replacementTeacherSubject": self.replacement_teacher_subject.value,
            "hoursCovered": self.hours_covered,
            "coverageType": self.coverage_type.value,
        }


@dataclass(frozen=True)
class AbsenceFilters:
    """Transient query state for the records list. ``None``/"" means no constraint."""

    search_term: str = ""
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    absent_teacher_subject: Optional[Subject] = None
    replacement_teacher_subject: Optional[Subject] = None

    @classmethod
    def from_mapping(cls, args: Mapping[str, Any]) -> "AbsenceFilters":
        """Build filters from raw string input (query args, form fields)."""

        def _text(key: str) -> str:
            return str(args.get(key) or "").strip()

        date_from_s = _text("date_from")
        date_to_s = _text("date_to")
        absent_s = _text("absent_subject")
        replacement_s = _text("replacement_subject")

        return cls(
            search_term=_text("search"),
            date_from=parse_iso_date(date_from_s) if date_from_s else None,
            date_to=parse_iso_date(date_to_s) if date_to_s else None,
            absent_teacher_subject=require_enum(absent_s, Subject, "Asignatura ausente") if absent_s else None,
            replacement_teacher_subject=(
                require_enum(replacement_s, Subject, "Asignatura reemplazante") if replacement_s else None
            ),
        )
