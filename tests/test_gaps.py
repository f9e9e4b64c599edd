"""Golden tests for the gap analysis."""

from __future__ import annotations

from conftest import make_round
from loto_stats.analysis.gaps import (
    draw_sequence,
    number_gaps,
    overdue_numbers,
    steadiest_numbers,
)


def _gap(gaps, number):
    return gaps[number - 1]


def test_single_round_first_occurrence_and_absent_number() -> None:
    """First appearance counts the draws before it; absent numbers wait the whole sequence."""

    gaps = number_gaps([make_round([5, 23, 77, 12, 90], quine_at=3)])

    five = _gap(gaps, 5)
    assert (five.appearances, five.current_gap, five.average_gap, five.max_gap) == (1, 4, 0.0, 4)

    ninety = _gap(gaps, 90)
    assert (ninety.appearances, ninety.current_gap, ninety.average_gap, ninety.max_gap) == (1, 0, 4.0, 4)

    absent = _gap(gaps, 46)
    assert (absent.appearances, absent.current_gap, absent.average_gap, absent.max_gap) == (0, 5, 5.0, 5)


def test_rounds_are_concatenated_across_the_session() -> None:
    """Back-to-back occurrences in consecutive rounds have a gap of zero."""

    rounds = [
        make_round([1, 2], number=1, start_offset=0),
        make_round([2, 3], number=2, start_offset=600),
    ]
    gaps = number_gaps(rounds)

    two = _gap(gaps, 2)
    assert (two.appearances, two.current_gap, two.average_gap, two.max_gap) == (2, 1, 0.5, 1)
    assert _gap(gaps, 3).current_gap == 0
    assert _gap(gaps, 1).current_gap == 3


def test_sequence_follows_start_time_not_storage_order() -> None:
    """A round stored first but started later goes last."""

    late = make_round([7, 8], number=2, start_offset=900)
    early = make_round([9], number=1, start_offset=0)
    assert draw_sequence([late, early]) == [9, 7, 8]

    gaps = number_gaps([late, early])
    assert _gap(gaps, 9).current_gap == 2
    assert _gap(gaps, 8).current_gap == 0


def test_max_gap_includes_current_drought() -> None:
    """A number absent since long ago reports that absence as its max."""

    gaps = number_gaps([make_round([4, 1, 4, 2, 3, 5, 6, 7])])
    four = _gap(gaps, 4)
    assert four.appearances == 2
    assert four.average_gap == 0.5  # gaps 0 and 1
    assert four.current_gap == 5
    assert four.max_gap == 5


def test_gaps_are_well_formed() -> None:
    """Current gaps are never negative and absent numbers agree on every field."""

    rounds = [
        make_round([10, 20, 30], number=1, start_offset=0),
        make_round([30, 40], number=2, start_offset=300),
    ]
    gaps = number_gaps(rounds)
    length = len(draw_sequence(rounds))

    assert len(gaps) == 90
    for g in gaps:
        assert g.current_gap >= 0
        if g.appearances == 0:
            assert g.current_gap == g.average_gap == g.max_gap == length


def test_empty_session_reports_zero_waits() -> None:
    """With no draws every number has a zero current gap."""

    gaps = number_gaps([make_round([], duration=None)])
    assert all(g.current_gap == 0 and g.appearances == 0 for g in gaps)
    assert overdue_numbers(gaps) == []
    assert steadiest_numbers(gaps) == []


def test_overdue_and_steadiest_highlights() -> None:
    """Longest current waits first; steadiest are drawn numbers with the shortest max gap."""

    gaps = number_gaps([make_round([1, 2, 1, 3, 2, 1])])

    overdue = overdue_numbers(gaps, 3)
    assert [g.number for g in overdue] == [4, 5, 6]  # absent for all 6 draws

    steadiest = steadiest_numbers(gaps, 3)
    assert [(g.number, g.max_gap) for g in steadiest] == [(1, 2), (2, 2), (3, 3)]


def test_out_of_range_draws_do_not_lengthen_the_sequence() -> None:
    """Invalid numbers are left out of the sequence, matching the frequency table."""

    rounds = [make_round([0, 5, 91])]
    assert draw_sequence(rounds) == [5]
    assert _gap(number_gaps(rounds), 46).current_gap == 1
