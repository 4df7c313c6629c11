"""
Display grading scale.

This is the fine letter-grade scale shown next to individual grades and used
for the per-student transcript GPA. The dashboard GPA uses its own coarse
four-step mapping in ``gradebook.services.stats_service``; the two scales give
different numbers and are kept apart on purpose.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

# (minimum score, letter), evaluated top-down
LETTER_GRADE_THRESHOLDS = (
    (93.0, "A"),
    (90.0, "A-"),
    (87.0, "B+"),
    (83.0, "B"),
    (80.0, "B-"),
    (77.0, "C+"),
    (73.0, "C"),
    (70.0, "C-"),
    (67.0, "D+"),
    (60.0, "D"),
)

LETTER_GRADE_POINTS = {
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "F": 0.0,
}


def round_half_up(value: float, places: int = 2) -> float:
    """Round like JavaScript's toFixed: ties go away from zero"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def letter_grade_from_score(score: Optional[float]) -> Optional[str]:
    """Letter grade for a 0-100 score, or None while ungraded."""
    if score is None:
        return None
    for threshold, letter in LETTER_GRADE_THRESHOLDS:
        if score >= threshold:
            return letter
    return "F"


def transcript_gpa(letters: Iterable[Optional[str]]) -> float:
    """
    Unweighted mean of letter-grade points over every listed entry.

    Ungraded entries (None) count as 0 points. Returns 0.0 for an empty list.
    """
    points = [LETTER_GRADE_POINTS.get(letter, 0.0) for letter in letters]
    if not points:
        return 0.0
    return round_half_up(sum(points) / len(points))
