from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_enum, require_non_empty, require_non_negative_int
from ..core.enums import Subject
from ..core.exceptions import PersistenceError, ValidationError
from ..reports.consolidation import consolidate_month
from ..reports.model import MonthlyConsolidatedData
from .classifier import classify_coverage
from .filters import filter_all
from .model import AbsenceFilters, AbsenceRecord, NewAbsence
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


def _newest_first(records: Sequence[AbsenceRecord]) -> tuple[AbsenceRecord, ...]:
    return tuple(sorted(records, key=lambda r: (r.absence_date, r.record_id), reverse=True))


class AbsenceService:
    """Holds the current records and applies create/delete through the repository.

    The snapshot is an immutable tuple that is only replaced after the
    repository call succeeded, so a failed save or delete leaves it as it was.
    """

    def __init__(self, absences: AbsenceRepository):
        self._absences = absences
        self._records: tuple[AbsenceRecord, ...] = ()
        self._loaded = False

    @property
    def records(self) -> tuple[AbsenceRecord, ...]:
        if not self._loaded:
            self.reload()
        return self._records

    def reload(self) -> tuple[AbsenceRecord, ...]:
        records = self._absences.list_all()
        self._records = _newest_first(records)
        self._loaded = True
        logger.info("Loaded %d absence records", len(self._records))
        return self._records

    def build_draft(self, data: Mapping[str, Any]) -> NewAbsence:
        """Validate raw form/JSON input (camelCase or snake_case keys) into a draft."""

        def _get(*keys: str):
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return None

        raw_date = _get("date", "absence_date")
        if isinstance(raw_date, date):
            absence_date = raw_date
        else:
            absence_date = parse_iso_date(require_non_empty(raw_date, "Fecha"))

        return NewAbsence(
            absence_date=absence_date,
            absent_teacher=require_non_empty(_get("absentTeacher", "absent_teacher"), "Docente ausente"),
            absent_teacher_subject=require_enum(
                _get("absentTeacherSubject", "absent_teacher_subject"), Subject, "Asignatura del docente ausente"
            ),
            replacement_teacher=require_non_empty(
                _get("replacementTeacher", "replacement_teacher"), "Docente reemplazante"
            ),
            replacement_teacher_subject=require_enum(
                _get("replacementTeacherSubject", "replacement_teacher_subject"),
                Subject,
                "Asignatura del docente reemplazante",
            ),
            hours_covered=require_non_negative_int(_get("hoursCovered", "hours_covered"), "Horas"),
        )

    def register(self, draft: NewAbsence) -> AbsenceRecord:
        current = self.records
        coverage_type = classify_coverage(draft.absent_teacher_subject, draft.replacement_teacher_subject)

        try:
            record = self._absences.create(draft=draft, coverage_type=coverage_type)
        except PersistenceError:
            logger.exception("Failed to save absence of %s on %s", draft.absent_teacher, draft.absence_date)
            raise

        self._records = _newest_first((record, *current))
        logger.info("Registered absence %s (%s)", record.record_id, record.coverage_type.name)
        return record

    def delete(self, record_id: int) -> None:
        current = self.records

        try:
            deleted = self._absences.delete(record_id=int(record_id))
        except PersistenceError:
            logger.exception("Failed to delete absence %s", record_id)
            raise

        if not deleted:
            raise ValidationError("Registro no encontrado")

        self._records = tuple(r for r in current if r.record_id != int(record_id))
        logger.info("Deleted absence %s", record_id)

    def search(self, filters: AbsenceFilters) -> list[AbsenceRecord]:
        return filter_all(self.records, filters)

    def consolidate(self, *, month: int, year: int) -> MonthlyConsolidatedData:
        return consolidate_month(self.records, month, year)
