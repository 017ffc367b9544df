"""
Pairwise Feedback Cache
=======================

Feedback between two fixed words never changes, so the pattern for every
(guess, answer) pair is stored in one N x N uint8 matrix shared by all games
on the same dictionary. Cells start as UNSET and are filled the first time a
scorer asks for them.
"""

import threading
import time

import numpy as np
from numba import jit, prange

from .feedback import compute_pattern

UNSET = 255  # absent marker, real patterns are 0-242
N_STRIPES = 64


# ============================================================================
# NUMBA FUNCTIONS
# ============================================================================

@jit(nopython=True, cache=True)
def fill_row(matrix: np.ndarray, chars: np.ndarray, guess_idx: int,
             answers: np.ndarray) -> np.ndarray:
    """
    Read matrix[guess_idx, answers], computing any UNSET cells on the way.

    Returns:
        uint8 array of patterns, one per entry of `answers`
    """
    row = matrix[guess_idx]
    guess = chars[guess_idx]
    out = np.empty(answers.shape[0], dtype=np.uint8)
    for k in range(answers.shape[0]):
        a = answers[k]
        v = row[a]
        if v == UNSET:
            v = compute_pattern(chars[a], guess)
            row[a] = v
        out[k] = v
    return out


@jit(nopython=True, parallel=True, cache=True)
def fill_matrix(matrix: np.ndarray, chars: np.ndarray) -> None:
    """Fill every UNSET cell in parallel."""
    n = chars.shape[0]
    for g in prange(n):
        for a in range(n):
            if matrix[g, a] == UNSET:
                matrix[g, a] = compute_pattern(chars[a], chars[g])


# ============================================================================
# CACHE
# ============================================================================

class FeedbackCache:
    """
    Lazily filled pattern matrix.

    matrix[g, a] is the pattern index of guessing word g when word a is the
    answer. Rows are guarded by striped locks so a cell is computed once even
    with several solvers on different threads.
    """

    def __init__(self, chars: np.ndarray):
        self.chars = chars
        self.n_words = chars.shape[0]
        self.matrix = np.full((self.n_words, self.n_words), UNSET, dtype=np.uint8)
        self._locks = [threading.Lock() for _ in range(N_STRIPES)]
        self._complete = False

    def patterns(self, guess_idx: int, answers: np.ndarray) -> np.ndarray:
        """Patterns of `guess_idx` against every index in `answers`."""
        answers = np.ascontiguousarray(answers, dtype=np.int32)
        if self._complete:
            return self.matrix[guess_idx, answers]
        with self._locks[guess_idx % N_STRIPES]:
            return fill_row(self.matrix, self.chars, guess_idx, answers)

    def lookup(self, guess_idx: int, answer_idx: int) -> int:
        return int(self.patterns(guess_idx, np.array([answer_idx], dtype=np.int32))[0])

    def precompute(self, verbose: bool = False) -> None:
        """Fill the whole matrix up front."""
        if self._complete:
            return
        if verbose:
            print(f"Computing feedback matrix ({self.n_words} x {self.n_words})...")
        t0 = time.time()
        for lock in self._locks:
            lock.acquire()
        try:
            fill_matrix(self.matrix, self.chars)
            self._complete = True
        finally:
            for lock in self._locks:
                lock.release()
        if verbose:
            elapsed = time.time() - t0
            pairs = self.n_words * self.n_words
            rate = pairs / elapsed / 1e6 if elapsed > 0 else float('inf')
            print(f"Done in {elapsed:.1f}s ({rate:.1f}M pairs/sec)")

    def filled(self) -> int:
        """Number of cells computed so far."""
        return int(np.count_nonzero(self.matrix != UNSET))
