"""
Word dictionary: frequencies, prior weights and stable indices.
"""

import re
import sys
from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

import numpy as np

from .config import SIGMOID_K, SIGMOID_L, SIGMOID_X0, WEIGHTINGS
from .feedback import words_to_chars

WORD_RE = re.compile(r'^[a-z]{5}$')


class CandidateEntry(NamedTuple):
    word: str
    weight: float
    index: int


def sigmoid(p):
    """Squash a normalized frequency so rare words keep a floor and common ones a cap."""
    return SIGMOID_L / (1.0 + np.exp(-SIGMOID_K * (np.asarray(p, dtype=np.float64) - SIGMOID_X0)))


class Dictionary:
    """
    Immutable snapshot of (word, frequency) pairs.

    Words are sorted by descending frequency (ties keep input order) and the
    position in that order is the word's stable index for the lifetime of the
    snapshot. Weight and char arrays are read-only and shared by every
    candidate set built from it.
    """

    def __init__(self, entries: Iterable[Tuple[str, int]], weighting: str = "sigmoid"):
        if weighting not in WEIGHTINGS:
            raise ValueError(f"Unknown weighting '{weighting}'")

        pairs = []
        seen = set()
        for word, count in entries:
            if not isinstance(word, str) or not WORD_RE.match(word):
                raise ValueError(f"Invalid dictionary word: {word!r}")
            if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count <= 0:
                raise ValueError(f"Frequency for '{word}' must be a positive integer, got {count!r}")
            if word in seen:
                raise ValueError(f"Duplicate dictionary word: '{word}'")
            seen.add(word)
            pairs.append((sys.intern(word), int(count)))

        if not pairs:
            raise ValueError("Dictionary is empty")

        # sorted() is stable, so equal counts keep their input order
        pairs = sorted(pairs, key=lambda wc: -wc[1])

        self.words: List[str] = [w for w, _ in pairs]
        self.counts = np.array([c for _, c in pairs], dtype=np.int64)
        self.weighting = weighting
        self.word_to_idx: Dict[str, int] = {w: i for i, w in enumerate(self.words)}

        p = self.counts / self.counts.sum()
        self.weights = sigmoid(p) if weighting == "sigmoid" else p
        self.indices = np.arange(len(self.words), dtype=np.int32)
        self.chars = words_to_chars(self.words)

        for arr in (self.counts, self.weights, self.indices, self.chars):
            arr.setflags(write=False)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.word_to_idx

    def __iter__(self) -> Iterator[CandidateEntry]:
        for i, w in enumerate(self.words):
            yield CandidateEntry(w, float(self.weights[i]), i)

    def index_of(self, word: str) -> int:
        try:
            return self.word_to_idx[word]
        except KeyError:
            raise ValueError(f"'{word}' not in dictionary") from None

    def entry(self, index: int) -> CandidateEntry:
        return CandidateEntry(self.words[index], float(self.weights[index]), index)


# ============================================================================
# LOADING
# ============================================================================

def read_frequencies(filepath: str) -> List[Tuple[str, int]]:
    """Read a `word count` per line file."""
    pairs = []
    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            parts = line.split()
            if len(parts) != 2:
                raise ValueError(f"{filepath}:{lineno}: expected 'word count', got {line!r}")
            word, count = parts
            try:
                count = int(count)
            except ValueError:
                raise ValueError(f"{filepath}:{lineno}: count {count!r} is not an integer") from None
            if not WORD_RE.match(word) or count <= 0:
                raise ValueError(f"{filepath}:{lineno}: invalid entry {line!r}")
            pairs.append((word, count))
    return pairs


def load_dictionary(filepath: str, weighting: str = "sigmoid") -> Dictionary:
    """Load a frequency file into a Dictionary."""
    return Dictionary(read_frequencies(filepath), weighting=weighting)


def load_words(filepath: str) -> List[str]:
    """Load word list from file."""
    with open(filepath, 'r') as f:
        return [line.strip().lower() for line in f if line.strip()]
