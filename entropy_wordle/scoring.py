"""
Entropy Scoring
===============

How much does guessing a word tell us? Split the remaining candidates by the
pattern they would show, weight each part by its prior mass, and take the
Shannon entropy of that split. Combined with the guessed word's own chance of
being the answer this gives an expected number of turns to finish.
"""

import math

import numpy as np
from numba import jit

from .cache import FeedbackCache
from .candidates import CandidateSet
from .config import N_PATTERNS, STEPS_INTERCEPT, STEPS_SLOPE
from .feedback import all_patterns, matches


# ============================================================================
# NUMBA FUNCTIONS
# ============================================================================

@jit(nopython=True, cache=True)
def accumulate_weights(patterns: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Sum candidate weights into one bucket per pattern."""
    totals = np.zeros(N_PATTERNS, dtype=np.float64)
    for k in range(patterns.shape[0]):
        totals[patterns[k]] += weights[k]
    return totals


@jit(nopython=True, cache=True)
def partition_entropy(totals: np.ndarray, total_weight: float) -> float:
    """Shannon entropy of the bucket distribution. Empty buckets are skipped."""
    if total_weight <= 0.0:
        return 0.0

    entropy = 0.0
    for t in totals:
        if t > 0.0:
            p = t / total_weight
            entropy -= p * np.log2(p)

    return entropy


# ============================================================================
# EXPECTED TURNS
# ============================================================================

def est_steps_left(entropy: float) -> float:
    """
    Turns still needed once `entropy` bits of uncertainty remain.

    Logarithmic fit against played games; stands in for a full search.
    """
    return math.log(entropy * STEPS_SLOPE + STEPS_INTERCEPT)


def expected_score(p_word: float, info: float, remaining_entropy: float, turns: int) -> float:
    """
    Expected final turn count if the word is guessed now.

    With probability p_word it is the answer and the game ends next turn;
    otherwise the information it gains shortens what's left.
    """
    return (p_word * (turns + 1)
            + (1.0 - p_word) * (turns + est_steps_left(remaining_entropy - info)))


# ============================================================================
# SCORER
# ============================================================================

class EntropyScorer:
    """Partition entropy of candidate guesses against a CandidateSet."""

    def __init__(self, cache: FeedbackCache):
        self.cache = cache

    def distribution(self, guess_idx: int, candidates: CandidateSet) -> np.ndarray:
        """Probability of each of the 243 patterns if `guess_idx` is played."""
        totals = self._totals(guess_idx, candidates)
        return totals / candidates.total_weight

    def entropy(self, guess_idx: int, candidates: CandidateSet) -> float:
        totals = self._totals(guess_idx, candidates)
        return float(partition_entropy(totals, candidates.total_weight))

    def entropy_by_enumeration(self, guess: str, candidates: CandidateSet) -> float:
        """
        Same value as `entropy`, walking every pattern explicitly.

        Much slower; useful for checking the accumulated version.
        """
        total = candidates.total_weight
        entropy = 0.0
        entries = list(candidates)
        for mask in all_patterns():
            mass = sum(e.weight for e in entries if matches(e.word, guess, mask))
            if mass > 0.0:
                p = mass / total
                entropy -= p * math.log2(p)
        return entropy

    def _totals(self, guess_idx: int, candidates: CandidateSet) -> np.ndarray:
        patterns = self.cache.patterns(guess_idx, candidates.indices)
        return accumulate_weights(patterns, candidates.weights)
