"""
The shrinking set of words still consistent with every observed mask.
"""

from typing import Iterator, List, Sequence

import numpy as np

from .dictionary import CandidateEntry, Dictionary
from .feedback import Correctness, Guess, feedback_to_string


class CandidateSet:
    """
    Weighted candidates in dictionary rank order.

    Starts out pointing at the dictionary's own read-only arrays; the first
    filter swaps in owned copies, which only ever shrink afterwards.
    """

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary
        self.indices: np.ndarray = dictionary.indices
        self.weights: np.ndarray = dictionary.weights
        self.total_weight = float(self.weights.sum())

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[CandidateEntry]:
        words = self.dictionary.words
        for idx, w in zip(self.indices, self.weights):
            yield CandidateEntry(words[idx], float(w), int(idx))

    def __contains__(self, word: str) -> bool:
        idx = self.dictionary.word_to_idx.get(word)
        if idx is None:
            return False
        # indices stay sorted, they are a filtered arange
        pos = np.searchsorted(self.indices, idx)
        return pos < len(self.indices) and self.indices[pos] == idx

    @property
    def owned(self) -> bool:
        return self.indices is not self.dictionary.indices

    def words(self) -> List[str]:
        words = self.dictionary.words
        return [words[i] for i in self.indices]

    def prefix(self, n: int) -> List[CandidateEntry]:
        """The n highest ranked entries."""
        words = self.dictionary.words
        return [CandidateEntry(words[i], float(w), int(i))
                for i, w in zip(self.indices[:n], self.weights[:n])]

    def probability(self, entry: CandidateEntry) -> float:
        return entry.weight / self.total_weight

    def entropy(self) -> float:
        """Shannon entropy (bits) of the normalized weights."""
        p = self.weights / self.total_weight
        p = p[p > 0]
        return float(-np.sum(p * np.log2(p)))

    def filter(self, guess: str, mask: Sequence[Correctness]) -> int:
        """
        Drop every word that couldn't have produced `mask` for `guess`.

        Returns:
            Number of candidates left

        Raises:
            RuntimeError: nothing is left, so the history is inconsistent
        """
        record = Guess(guess, tuple(mask))
        words = self.dictionary.words
        keep = np.fromiter((record.matches(words[i]) for i in self.indices),
                           dtype=np.bool_, count=len(self.indices))
        if not keep.any():
            raise RuntimeError(
                f"No candidates remaining after {guess} {feedback_to_string(record.mask)} "
                f"- feedback is inconsistent with earlier turns")
        self.indices = self.indices[keep]
        self.weights = self.weights[keep]
        self.total_weight = float(self.weights.sum())
        return len(self.indices)
