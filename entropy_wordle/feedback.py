"""
Wordle Feedback
===============

Feedback masks, their base-3 pattern index and the consistency check used to
prune candidates.

Pattern index encoding:
- CORRECT = 0, MISPLACED = 1, WRONG = 2
- Position 0 is the most significant digit, so CCCCC = 0 and WWWWW = 242
"""

import itertools
from collections import Counter
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Sequence, Tuple

import numpy as np
from numba import jit

from .config import N_PATTERNS, WORD_LENGTH


class Correctness(IntEnum):
    """Per-letter verdict."""
    CORRECT = 0  # green
    MISPLACED = 1  # yellow
    WRONG = 2  # gray


Mask = Tuple[Correctness, ...]

ALL_CORRECT: Mask = (Correctness.CORRECT,) * WORD_LENGTH

_EMOJI = {
    Correctness.CORRECT: '🟩',
    Correctness.MISPLACED: '🟨',
    Correctness.WRONG: '⬛',
}


def _check_word(word: str, role: str) -> None:
    if len(word) != WORD_LENGTH:
        raise ValueError(f"{role} '{word}' must be {WORD_LENGTH} letters, got {len(word)}")


def _check_mask(mask: Sequence[Correctness]) -> None:
    if len(mask) != WORD_LENGTH:
        raise ValueError(f"Mask must have {WORD_LENGTH} symbols, got {len(mask)}")


# ============================================================================
# FEEDBACK
# ============================================================================

def compute(answer: str, guess: str) -> Mask:
    """
    Compute the mask Wordle shows for `guess` when the hidden word is `answer`.

    A letter repeated in the guess is only credited as many times as it
    occurs in the answer: exact hits first, then misplaced hits left to right.
    """
    _check_word(answer, "Answer")
    _check_word(guess, "Guess")

    mask = [Correctness.WRONG] * WORD_LENGTH
    unmatched = Counter()

    # First pass: greens, tally the answer letters left over
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            mask[i] = Correctness.CORRECT
        else:
            unmatched[answer[i]] += 1

    # Second pass: yellows out of the leftovers
    for i in range(WORD_LENGTH):
        if mask[i] == Correctness.WRONG and unmatched[guess[i]] > 0:
            mask[i] = Correctness.MISPLACED
            unmatched[guess[i]] -= 1

    return tuple(mask)


def feedback_to_string(mask: Sequence[Correctness]) -> str:
    """Convert a mask to an emoji string."""
    return ''.join(_EMOJI[Correctness(c)] for c in mask)


# ============================================================================
# PATTERN INDEX
# ============================================================================

def to_index(mask: Sequence[Correctness]) -> int:
    """Encode a mask as an integer in [0, 243)."""
    _check_mask(mask)
    index = 0
    for c in mask:
        index = index * 3 + int(c)
    return index


def from_index(index: int) -> Mask:
    """Decode an integer in [0, 243) back to its mask."""
    if not 0 <= index < N_PATTERNS:
        raise ValueError(f"Pattern index {index} out of range [0, {N_PATTERNS})")
    digits = []
    for _ in range(WORD_LENGTH):
        digits.append(Correctness(index % 3))
        index //= 3
    return tuple(reversed(digits))


def all_patterns() -> Iterator[Mask]:
    """Yield every mask in pattern index order."""
    return itertools.product(Correctness, repeat=WORD_LENGTH)


# ============================================================================
# CONSISTENCY
# ============================================================================

def _claim(letter: str, word: str, used: List[bool]) -> bool:
    # Take the first unused occurrence of letter in word
    for i, c in enumerate(word):
        if c == letter and not used[i]:
            used[i] = True
            return True
    return False


def matches(word: str, guess: str, mask: Sequence[Correctness]) -> bool:
    """
    Could `mask` have been observed for `guess` if `word` were the answer?

    Equivalent to ``compute(word, guess) == tuple(mask)`` but bails out on the
    first position that disagrees.
    """
    _check_word(word, "Word")
    _check_word(guess, "Guess")
    _check_mask(mask)

    used = [False] * WORD_LENGTH

    # Exact hits must line up with CORRECT marks
    for i in range(WORD_LENGTH):
        if word[i] == guess[i]:
            if mask[i] != Correctness.CORRECT:
                return False
            used[i] = True
        elif mask[i] == Correctness.CORRECT:
            return False

    # Everything else is MISPLACED iff an unused copy is left to claim
    for i in range(WORD_LENGTH):
        if mask[i] == Correctness.CORRECT:
            continue
        if _claim(guess[i], word, used) != (mask[i] == Correctness.MISPLACED):
            return False

    return True


class Guess(NamedTuple):
    """One turn: the word played and the mask it got back."""
    word: str
    mask: Mask

    @classmethod
    def scored(cls, answer: str, guess: str) -> "Guess":
        return cls(guess, compute(answer, guess))

    def matches(self, word: str) -> bool:
        return matches(word, self.word, self.mask)

    @property
    def solved(self) -> bool:
        return tuple(self.mask) == ALL_CORRECT

    @property
    def pattern(self) -> int:
        return to_index(self.mask)


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK
# ============================================================================

def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to an (n, 5) array of char codes 0-25."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


@jit(nopython=True, cache=True)
def compute_pattern(answer: np.ndarray, guess: np.ndarray) -> int:
    """
    Pattern index of `guess` against `answer`.

    Args:
        answer: shape (5,) array of char codes (0-25 for a-z)
        guess: shape (5,) array of char codes

    Returns:
        Integer pattern (0-242), 0 when every letter is correct
    """
    feedback = np.full(5, 2, dtype=np.int32)
    unmatched = np.zeros(26, dtype=np.int32)

    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = 0
        else:
            unmatched[answer[i]] += 1

    for i in range(5):
        if feedback[i] == 2:
            c = guess[i]
            if unmatched[c] > 0:
                feedback[i] = 1
                unmatched[c] -= 1

    return 81*feedback[0] + 27*feedback[1] + 9*feedback[2] + 3*feedback[3] + feedback[4]
