from __future__ import annotations

import dataclasses
import random
from datetime import date

import pytest

from src.absence_system.absence_system.core.enums import CoverageType, Subject
from src.absence_system.absence_system.core.exceptions import ValidationError
from src.absence_system.absence_system.reports.consolidation import consolidate_month
from src.absence_system.absence_system.reports.model import CoverageHours


def test_march_example_totals(march_records):
    report = consolidate_month(march_records, 2, 2024)
    totals = report.global_totals

    assert totals.total_covered_hours == 2
    assert totals.total_accounted_hours == 3
    assert totals.total_absence_events == 2
    assert totals.total_hours == 5
    assert report.label == "Marzo 2024"


def test_breakdowns_by_teacher_and_subject(march_records, make_record):
    records = march_records + [
        make_record(
            date(2024, 3, 18),
            absent_subject=Subject.MATEMATICA,
            replacement_teacher="María Rojas",
            replacement_subject=Subject.INGLES,
            hours=1,
        )
    ]

    report = consolidate_month(records, 2, 2024)

    assert report.absences_by_teacher == {"Ana Pérez": 2, "Carlos Díaz": 1}
    assert report.absences_by_subject == {"Matemática": 2, "Historia": 1}
    assert report.replacements_by_teacher == {
        "Luis Soto": CoverageHours(covered_hours=2, accounted_hours=0),
        "María Rojas": CoverageHours(covered_hours=0, accounted_hours=4),
    }
    assert report.coverage_by_original_subject == {
        "Matemática": CoverageHours(covered_hours=2, accounted_hours=1),
        "Historia": CoverageHours(covered_hours=0, accounted_hours=3),
    }


def test_only_records_of_the_requested_month_and_year(make_record):
    inside = make_record(date(2024, 3, 31))
    records = [
        make_record(date(2024, 2, 29)),
        inside,
        make_record(date(2024, 4, 1)),
        make_record(date(2023, 3, 15)),
    ]

    report = consolidate_month(records, 2, 2024)

    assert report.records_in_month == (inside,)
    assert report.global_totals.total_absence_events == 1


def test_month_is_zero_based(make_record):
    january = make_record(date(2025, 1, 10))
    december = make_record(date(2025, 12, 10))

    assert consolidate_month([january, december], 0, 2025).records_in_month == (january,)
    assert consolidate_month([january, december], 11, 2025).records_in_month == (december,)


def test_empty_collection_yields_zero_report():
    report = consolidate_month([], 5, 2024)

    assert report.absences_by_teacher == {}
    assert report.absences_by_subject == {}
    assert report.replacements_by_teacher == {}
    assert report.coverage_by_original_subject == {}
    assert report.records_in_month == ()
    assert report.global_totals.to_dict() == {
        "totalAbsencesEvents": 0,
        "totalHours": 0,
        "totalCoveredHours": 0,
        "totalAccountedHours": 0,
    }


def test_uses_stored_coverage_type_not_subjects(make_record):
    # Same subjects, but saved as accounted under an older rule.
    record = make_record(date(2024, 3, 5), hours=4, coverage_type=CoverageType.ACCOUNTED_NOT_DONE)

    report = consolidate_month([record], 2, 2024)

    assert report.global_totals.total_covered_hours == 0
    assert report.global_totals.total_accounted_hours == 4


def test_totals_invariants_and_order_independence(make_record):
    rng = random.Random(20240301)
    subjects = list(Subject)
    records = [
        make_record(
            date(2024, rng.randint(2, 4), rng.randint(1, 28)),
            absent_teacher=rng.choice(["Ana", "Beto", "Carla"]),
            absent_subject=rng.choice(subjects[:4]),
            replacement_teacher=rng.choice(["Dani", "Eli"]),
            replacement_subject=rng.choice(subjects[:4]),
            hours=rng.randint(0, 6),
        )
        for _ in range(60)
    ]

    report = consolidate_month(records, 2, 2024)
    totals = report.global_totals
    assert totals.total_hours == totals.total_covered_hours + totals.total_accounted_hours
    assert totals.total_absence_events == len(report.records_in_month)

    shuffled = records[:]
    rng.shuffle(shuffled)
    other = consolidate_month(shuffled, 2, 2024)

    assert other.absences_by_teacher == report.absences_by_teacher
    assert other.absences_by_subject == report.absences_by_subject
    assert other.replacements_by_teacher == report.replacements_by_teacher
    assert other.coverage_by_original_subject == report.coverage_by_original_subject
    assert other.global_totals == report.global_totals
    assert sorted(r.record_id for r in other.records_in_month) == sorted(r.record_id for r in report.records_in_month)


def test_does_not_mutate_input(march_records):
    before = list(march_records)
    consolidate_month(march_records, 2, 2024)
    assert march_records == before


@pytest.mark.parametrize("month", [-1, 12])
def test_rejects_month_out_of_range(month):
    with pytest.raises(ValidationError):
        consolidate_month([], month, 2024)


def test_to_dict_is_json_ready(march_records):
    payload = consolidate_month(march_records, 2, 2024).to_dict()

    assert payload["replacementsByTeacher"]["María Rojas"] == {"coveredHours": 0, "accountedHours": 3}
    assert payload["recordsInMonth"][0]["date"] == "2024-03-05"
    assert payload["globalTotals"]["totalHours"] == 5


def test_hour_splits_are_read_only(march_records):
    report = consolidate_month(march_records, 2, 2024)

    with pytest.raises(dataclasses.FrozenInstanceError):
        report.replacements_by_teacher["Luis Soto"].covered_hours = 99

    assert consolidate_month(march_records, 2, 2024).replacements_by_teacher["Luis Soto"].covered_hours == 2
