import pytest

from entropy_wordle import Dictionary, SolverConfig, SolverContext

FREQUENCIES = [
    ("tares", 5000),
    ("crate", 4000),
    ("slate", 3500),
    ("crane", 3000),
    ("trace", 2500),
    ("react", 2000),
    ("cater", 1500),
    ("stare", 1200),
    ("rates", 1000),
    ("aster", 800),
    ("taser", 600),
    ("lease", 500),
    ("eerie", 400),
    ("geese", 300),
    ("abbey", 250),
    ("abcde", 100),
    ("bcdea", 100),
    ("aabbb", 50),
    ("aaccc", 40),
    ("ccaac", 30),
]

WORDS = [w for w, _ in FREQUENCIES]


@pytest.fixture
def frequencies():
    return list(FREQUENCIES)


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def dictionary():
    return Dictionary(FREQUENCIES)


@pytest.fixture
def raw_dictionary():
    return Dictionary(FREQUENCIES, weighting="raw")


@pytest.fixture
def context(dictionary):
    return SolverContext(dictionary, SolverConfig())


@pytest.fixture
def raw_context(raw_dictionary):
    return SolverContext(raw_dictionary, SolverConfig(weighting="raw"))


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("".join(f"{w} {c}\n" for w, c in FREQUENCIES))
    return str(path)
