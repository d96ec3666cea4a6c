"""
Bigram similarity scoring.

Sørensen–Dice coefficient over character bigrams, the metric behind most
"did you mean" alias lookups. Whitespace is ignored when building bigrams.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class BestMatch:
    """Highest scoring candidate for a query."""
    target: str
    rating: float
    index: int


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def dice_coefficient(first: str, second: str) -> float:
    """
    Similarity of two strings in [0, 1].

    Identical strings score 1.0. Strings shorter than two characters
    (after removing whitespace) have no bigrams and score 0.0 unless equal.
    """
    if first == second:
        return 1.0
    a = "".join(first.split())
    b = "".join(second.split())
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    a_grams = _bigrams(a)
    b_grams = _bigrams(b)
    overlap = sum((a_grams & b_grams).values())
    return 2.0 * overlap / (len(a) - 1 + len(b) - 1)


def find_best_match(query: str, candidates: Sequence[str]) -> BestMatch | None:
    """
    Score `query` against every candidate and return the best one.

    Ties go to the earliest candidate. Returns None for an empty pool.
    """
    best: BestMatch | None = None
    for i, candidate in enumerate(candidates):
        rating = dice_coefficient(query, candidate)
        if best is None or rating > best.rating:
            best = BestMatch(target=candidate, rating=rating, index=i)
            if rating == 1.0:
                break
    return best
