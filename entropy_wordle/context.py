"""
Process-wide solver context.

Everything here is built once per dictionary and shared read-only by every
Solver: the dictionary snapshot, the pairwise feedback cache and the opener.
"""

import threading
import time
from typing import Iterable, Optional, Tuple

from .cache import FeedbackCache
from .config import SolverConfig
from .dictionary import Dictionary


class SolverContext:
    """
    Shared state for any number of concurrent games on one dictionary.

    Args:
        dictionary: Word snapshot. Its weighting must match config.weighting.
        config: Solver tunables (defaults if None)
    """

    def __init__(self, dictionary: Dictionary, config: Optional[SolverConfig] = None):
        self.config = (config or SolverConfig()).validate()
        if dictionary.weighting != self.config.weighting:
            raise ValueError(f"Dictionary uses '{dictionary.weighting}' weights, "
                             f"config asks for '{self.config.weighting}'")
        self.dictionary = dictionary
        self.verbose = self.config.verbose

        if self.verbose:
            print(f"Dictionary: {len(dictionary)} words ({dictionary.weighting} weights)")

        self.cache = FeedbackCache(dictionary.chars)
        if self.config.precompute:
            self.cache.precompute(verbose=self.verbose)

        self._opener: Optional[str] = None
        self._opener_lock = threading.Lock()

    @classmethod
    def from_frequencies(cls, entries: Iterable[Tuple[str, int]],
                         config: Optional[SolverConfig] = None) -> "SolverContext":
        config = config or SolverConfig()
        return cls(Dictionary(entries, weighting=config.weighting), config)

    @property
    def opener(self) -> str:
        """First guess, resolved once per context."""
        if self._opener is None:
            with self._opener_lock:
                if self._opener is None:
                    self._opener = self._resolve_opener()
        return self._opener

    def _resolve_opener(self) -> str:
        first_guess = self.config.opener
        if first_guess in self.dictionary:
            if self.verbose:
                print(f"Using first guess: {first_guess}")
            return first_guess

        from .solver import Solver

        if self.verbose:
            print(f"Warning: '{first_guess}' not in dictionary, computing best...")
        t0 = time.time()
        best = Solver(self).best_guess(turns=0)
        if self.verbose:
            print(f"Best first guess: {best} ({time.time() - t0:.1f}s)")
        return best
