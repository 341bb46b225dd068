from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.enums import CoverageType, Subject
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .classifier import build_record
from .model import AbsenceRecord, NewAbsence
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


def _row_to_record(r: dict[str, Any]) -> AbsenceRecord:
    return AbsenceRecord(
        record_id=int(r["record_id"]),
        absence_date=r["absence_date"],
        absent_teacher=r["absent_teacher"],
        absent_teacher_subject=Subject(r["absent_teacher_subject"]),
        replacement_teacher=r["replacement_teacher"],
        replacement_teacher_subject=Subject(r["replacement_teacher_subject"]),
        hours_covered=int(r["hours_covered"]),
        coverage_type=CoverageType(r["coverage_type"]),
    )


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AbsenceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, absence_date, absent_teacher, absent_teacher_subject,
                       replacement_teacher, replacement_teacher_subject, hours_covered, coverage_type
                FROM absence_records
                ORDER BY absence_date DESC, record_id DESC
                """
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def create(self, *, draft: NewAbsence, coverage_type: CoverageType) -> AbsenceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO absence_records(
                    absence_date, absent_teacher, absent_teacher_subject,
                    replacement_teacher, replacement_teacher_subject, hours_covered, coverage_type
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    draft.absence_date,
                    draft.absent_teacher,
                    draft.absent_teacher_subject.value,
                    draft.replacement_teacher,
                    draft.replacement_teacher_subject.value,
                    int(draft.hours_covered),
                    coverage_type.value,
                ),
            )
            record_id = int(cur.lastrowid)

        logger.debug("Inserted absence_records row %s", record_id)
        return build_record(record_id, draft, coverage_type)

    def delete(self, *, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM absence_records WHERE record_id=%s", (int(record_id),))
            return cur.rowcount > 0
