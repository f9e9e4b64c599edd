"""Gap analysis: how long each number has been waiting.

All rounds of a session are laid end to end in start-time order, giving one
chronological draw sequence. A gap is the number of draws between two
occurrences of the same number. The first occurrence counts every draw before
it as its gap, and a number that never appeared has been absent for the whole
sequence.
"""

from collections.abc import Iterable, Sequence

from loto_stats.analysis.frequency import MAX_NUMBER, MIN_NUMBER
from loto_stats.schemas.session import Round
from loto_stats.schemas.statistics import NumberGap

GAP_HIGHLIGHT_COUNT = 8


def draw_sequence(rounds: Iterable[Round]) -> list[int]:
    """Concatenate the valid draws of all rounds, ordered by round start time."""
    sequence = []
    for r in sorted(rounds, key=lambda r: r.start_time):
        sequence.extend(n for n in r.draws if MIN_NUMBER <= n <= MAX_NUMBER)
    return sequence


def number_gaps(rounds: Iterable[Round]) -> list[NumberGap]:
    """Get gap statistics for every number, 1 to 90 in ascending order."""
    sequence = draw_sequence(rounds)
    total = len(sequence)

    positions: dict[int, list[int]] = {n: [] for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
    for i, num in enumerate(sequence):
        positions[num].append(i)

    result = []
    for num in range(MIN_NUMBER, MAX_NUMBER + 1):
        seen = positions[num]
        if not seen:
            result.append(NumberGap(
                number=num,
                current_gap=total,
                average_gap=float(total),
                max_gap=total,
                appearances=0,
            ))
            continue

        gaps = [seen[0]]
        for prev, cur in zip(seen, seen[1:]):
            gaps.append(cur - prev - 1)

        current_gap = total - 1 - seen[-1]
        result.append(NumberGap(
            number=num,
            current_gap=current_gap,
            average_gap=sum(gaps) / len(gaps),
            max_gap=max(max(gaps), current_gap),
            appearances=len(seen),
        ))

    return result


def overdue_numbers(
    gaps: Sequence[NumberGap], k: int = GAP_HIGHLIGHT_COUNT
) -> list[NumberGap]:
    """Numbers absent for the most draws, longest wait first."""
    if not any(g.appearances > 0 for g in gaps):
        return []
    return sorted(gaps, key=lambda g: -g.current_gap)[:max(k, 0)]


def steadiest_numbers(
    gaps: Sequence[NumberGap], k: int = GAP_HIGHLIGHT_COUNT
) -> list[NumberGap]:
    """Drawn numbers whose longest absence is the shortest."""
    drawn = [g for g in gaps if g.appearances > 0]
    return sorted(drawn, key=lambda g: g.max_gap)[:max(k, 0)]
