import numpy as np
import pytest

from entropy_wordle.config import SIGMOID_X0
from entropy_wordle.dictionary import (
    CandidateEntry, Dictionary, load_dictionary, load_words, read_frequencies, sigmoid,
)


def test_sorted_by_frequency_with_stable_ties(dictionary):
    assert dictionary.words[0] == "tares"
    assert list(dictionary.counts) == sorted(dictionary.counts, reverse=True)
    # abcde and bcdea share a count, input order is kept
    assert dictionary.index_of("abcde") + 1 == dictionary.index_of("bcdea")


def test_stable_indices(dictionary):
    for i, entry in enumerate(dictionary):
        assert isinstance(entry, CandidateEntry)
        assert entry.index == i
        assert dictionary.entry(i) == entry
        assert dictionary.index_of(entry.word) == i


def test_arrays_are_read_only(dictionary):
    with pytest.raises(ValueError):
        dictionary.weights[0] = 0.0
    with pytest.raises(ValueError):
        dictionary.indices[0] = 5


def test_sigmoid_weights_bounded(dictionary):
    assert np.all(dictionary.weights > 0.0)
    assert np.all(dictionary.weights <= 1.0)


def test_raw_weights_sum_to_one(raw_dictionary):
    assert raw_dictionary.weights.sum() == pytest.approx(1.0)
    assert raw_dictionary.weights[0] == pytest.approx(5000 / raw_dictionary.counts.sum())


def test_sigmoid_shape():
    assert sigmoid(SIGMOID_X0) == pytest.approx(0.5)
    assert sigmoid(0.01) == pytest.approx(1.0)
    assert 0.0 < sigmoid(0.0) < 1e-30


def test_rare_words_keep_a_floor():
    entries = [("aaaaa", 10_000_000), ("bbbbb", 1)]
    d = Dictionary(entries)
    rare = d.weights[d.index_of("bbbbb")]
    assert rare > 0.0
    assert d.weights[d.index_of("aaaaa")] == pytest.approx(1.0)


def test_contains_and_unknown(dictionary):
    assert "crane" in dictionary
    assert "zzzzz" not in dictionary
    with pytest.raises(ValueError):
        dictionary.index_of("zzzzz")


def test_words_are_interned(frequencies):
    d1 = Dictionary(frequencies)
    d2 = Dictionary([("".join(list(w)), c) for w, c in frequencies])
    assert d1.words[0] is d2.words[0]


@pytest.mark.parametrize("entries", [
    [("abcd", 1)],
    [("ABCDE", 1)],
    [("abcd1", 1)],
    [("abcde", 0)],
    [("abcde", -3)],
    [("abcde", 1.5)],
    [("abcde", 1), ("abcde", 2)],
    [],
])
def test_rejects_bad_entries(entries):
    with pytest.raises(ValueError):
        Dictionary(entries)


def test_rejects_unknown_weighting(frequencies):
    with pytest.raises(ValueError):
        Dictionary(frequencies, weighting="log")


def test_load_dictionary(dictionary_file, dictionary):
    loaded = load_dictionary(dictionary_file)
    assert loaded.words == dictionary.words
    assert np.array_equal(loaded.weights, dictionary.weights)


@pytest.mark.parametrize("content,lineno", [
    ("crane 10\ncrane\n", 2),
    ("crane ten\n", 1),
    ("crane 10\n\nCRANE 3\n", 3),
    ("crane 0\n", 1),
])
def test_read_frequencies_reports_line(tmp_path, content, lineno):
    path = tmp_path / "bad.txt"
    path.write_text(content)
    with pytest.raises(ValueError, match=f":{lineno}:"):
        read_frequencies(str(path))


def test_load_words(tmp_path):
    path = tmp_path / "answers.txt"
    path.write_text("Crane\n\n  slate \nabcde\n")
    assert load_words(str(path)) == ["crane", "slate", "abcde"]
