import math

import numpy as np
import pytest

from entropy_wordle.candidates import CandidateSet
from entropy_wordle.feedback import ALL_CORRECT, compute, to_index
from entropy_wordle.scoring import (
    EntropyScorer, accumulate_weights, est_steps_left, expected_score, partition_entropy,
)

from conftest import WORDS


def test_accumulate_weights():
    patterns = np.array([0, 5, 5, 242], dtype=np.uint8)
    weights = np.array([1.0, 2.0, 0.5, 0.25])
    totals = accumulate_weights(patterns, weights)
    assert totals.shape == (243,)
    assert totals[0] == 1.0
    assert totals[5] == 2.5
    assert totals[242] == 0.25
    assert totals.sum() == pytest.approx(3.75)


def test_partition_entropy_skips_empty_buckets():
    totals = np.zeros(243)
    totals[[3, 17, 100, 200]] = 1.0
    assert partition_entropy(totals, 4.0) == pytest.approx(2.0)
    totals = np.zeros(243)
    totals[9] = 7.0
    assert partition_entropy(totals, 7.0) == 0.0
    assert partition_entropy(np.zeros(243), 0.0) == 0.0


def test_entropy_matches_enumeration(context, raw_context):
    for ctx in (context, raw_context):
        candidates = CandidateSet(ctx.dictionary)
        scorer = EntropyScorer(ctx.cache)
        for word in ("tares", "eerie", "abcde", "ccaac"):
            idx = ctx.dictionary.index_of(word)
            assert scorer.entropy(idx, candidates) == pytest.approx(
                scorer.entropy_by_enumeration(word, candidates))

        candidates.filter("slate", compute("crate", "slate"))
        for entry in candidates:
            assert scorer.entropy(entry.index, candidates) == pytest.approx(
                scorer.entropy_by_enumeration(entry.word, candidates))


def test_entropy_by_hand(context):
    candidates = CandidateSet(context.dictionary)
    scorer = EntropyScorer(context.cache)
    guess = "crane"
    counts = {}
    for w in WORDS:
        key = compute(w, guess)
        counts[key] = counts.get(key, 0) + 1
    n = len(WORDS)
    expected = -sum(c / n * math.log2(c / n) for c in counts.values())
    assert scorer.entropy(context.dictionary.index_of(guess), candidates) == pytest.approx(expected)


def test_distribution(raw_context):
    candidates = CandidateSet(raw_context.dictionary)
    scorer = EntropyScorer(raw_context.cache)
    idx = raw_context.dictionary.index_of("crate")
    dist = scorer.distribution(idx, candidates)
    assert dist.sum() == pytest.approx(1.0)
    # crate is the only word giving all-correct
    assert dist[to_index(ALL_CORRECT)] == pytest.approx(
        raw_context.dictionary.weights[idx] / candidates.total_weight)


def test_singleton_entropy_is_zero(context):
    candidates = CandidateSet(context.dictionary)
    candidates.filter("geese", ALL_CORRECT)
    scorer = EntropyScorer(context.cache)
    for word in WORDS:
        assert scorer.entropy(context.dictionary.index_of(word), candidates) == 0.0


def test_est_steps_left():
    assert est_steps_left(0.0) == pytest.approx(math.log(3.679))
    assert est_steps_left(10.0) == pytest.approx(math.log(38.7 + 3.679))
    assert est_steps_left(1.0) < est_steps_left(2.0) < est_steps_left(5.0)


def test_expected_score():
    # a certain answer finishes next turn
    assert expected_score(1.0, 0.0, 0.0, 3) == 4.0
    # no chance of a hit: all remaining uncertainty is left after guessing
    assert expected_score(0.0, 0.0, 4.0, 2) == pytest.approx(2 + math.log(4 * 3.870 + 3.679))
    # more information is better
    assert expected_score(0.1, 3.0, 4.0, 1) < expected_score(0.1, 1.0, 4.0, 1)
