"""Overall score aggregation."""

import math
from typing import Iterable

from analyzers.base import FactorResult


def calculate_overall_score(factors: Iterable[FactorResult]) -> int:
    """
    Confidence-weighted, weight-normalised mean of factor scores.

    overall = round(sum(score * confidence/100 * weight) / sum(weight))

    A low-confidence zero pulls the aggregate down less than a
    high-confidence zero. Returns 0 for an empty list.
    """
    total_score = 0.0
    total_weight = 0.0

    for factor in factors:
        total_score += factor.score * (factor.confidence / 100) * factor.weight
        total_weight += factor.weight

    if total_weight <= 0:
        return 0

    # Round half up, not to even
    overall = math.floor(total_score / total_weight + 0.5)
    return max(0, min(int(overall), 100))
