from __future__ import annotations

from ..core.enums import CoverageType, Subject
from .model import AbsenceRecord, NewAbsence


def classify_coverage(absent_subject: Subject, replacement_subject: Subject) -> CoverageType:
    """Same subject taught by the replacement counts as covered hours."""
    if absent_subject == replacement_subject:
        return CoverageType.COVERED
    return CoverageType.ACCOUNTED_NOT_DONE


def build_record(record_id: int, draft: NewAbsence, coverage_type: CoverageType) -> AbsenceRecord:
    return AbsenceRecord(
        record_id=record_id,
        absence_date=draft.absence_date,
        absent_teacher=draft.absent_teacher,
        absent_teacher_subject=draft.absent_teacher_subject,
        replacement_teacher=draft.replacement_teacher,
        replacement_teacher_subject=draft.replacement_teacher_subject,
        hours_covered=draft.hours_covered,
        coverage_type=coverage_type,
    )
