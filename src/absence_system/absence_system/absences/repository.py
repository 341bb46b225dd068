from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import CoverageType
from .model import AbsenceRecord, NewAbsence


class AbsenceRepository(Protocol):
    def list_all(self) -> Sequence[AbsenceRecord]:
        raise NotImplementedError

    def create(self, *, draft: NewAbsence, coverage_type: CoverageType) -> AbsenceRecord:
        """Persist an already classified draft and return it with its id."""

        raise NotImplementedError

    def delete(self, *, record_id: int) -> bool:
        raise NotImplementedError
