"""
Solver configuration and fitted constants.
"""

import math
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
N_PATTERNS = 243  # 3^5 possible feedback patterns
CORRECT_PATTERN = 0  # all CORRECT, every base-3 digit is 0

DEFAULT_OPENER = "tares"
MAX_TURNS = 32  # well past Wordle's six so the score distribution isn't chopped

# Prior transform: L / (1 + exp(-K * (p - X0)))
SIGMOID_L = 1.0
SIGMOID_K = 30000000.0  # steepness of the cut-off
SIGMOID_X0 = 0.00000497  # location of the cut-off

# Steps-left regression: ln(STEPS_SLOPE * bits + STEPS_INTERCEPT)
STEPS_SLOPE = 3.870
STEPS_INTERCEPT = 3.679

WEIGHTINGS = ("sigmoid", "raw")


@dataclass(frozen=True)
class SolverConfig:
    """
    Tunables shared by every solver built from one context.

    Args:
        opener: First guess. Derived from the dictionary if it isn't in it.
        weighting: "sigmoid" squashes frequencies, "raw" uses them as-is.
        evaluation_threshold: Candidate count above which only a prefix of
            the set is scored. None scores everything.
        evaluation_fraction: Share of the set scored once over threshold.
        evaluation_floor: Never score fewer than this many words.
        precompute: Fill the whole feedback matrix up front.
        verbose: Print progress while building the context.
    """
    opener: str = DEFAULT_OPENER
    weighting: str = "sigmoid"
    evaluation_threshold: Optional[int] = 500
    evaluation_fraction: float = 0.25
    evaluation_floor: int = 20
    precompute: bool = False
    verbose: bool = False

    def validate(self) -> "SolverConfig":
        if self.weighting not in WEIGHTINGS:
            raise ValueError(f"Unknown weighting '{self.weighting}', expected one of {WEIGHTINGS}")
        if self.evaluation_threshold is not None and self.evaluation_threshold < 1:
            raise ValueError("evaluation_threshold must be positive")
        if not 0.0 < self.evaluation_fraction <= 1.0:
            raise ValueError("evaluation_fraction must be in (0, 1]")
        if self.evaluation_floor < 1:
            raise ValueError("evaluation_floor must be positive")
        if len(self.opener) != WORD_LENGTH:
            raise ValueError(f"Opener '{self.opener}' is not {WORD_LENGTH} letters")
        return self

    def pool_size(self, n_candidates: int) -> int:
        """Number of top-ranked candidates to score for a set of this size."""
        if self.evaluation_threshold is None or n_candidates <= self.evaluation_threshold:
            return n_candidates
        share = math.ceil(n_candidates * self.evaluation_fraction)
        return min(n_candidates, max(self.evaluation_floor, share))
