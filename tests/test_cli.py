import pytest

from entropy_wordle.__main__ import build_parser, config_from_args, main


def test_solve(dictionary_file, capsys):
    assert main(["--dictionary", dictionary_file, "solve", "abcde", "tares"]) == 0
    out = capsys.readouterr().out
    assert out.count("Solved in") == 2
    assert "Solved in 1 guesses" in out


def test_solve_unknown_word(dictionary_file, capsys):
    assert main(["--dictionary", dictionary_file, "solve", "zzzzz"]) == 1
    assert "not in dictionary" in capsys.readouterr().out


def test_bench(dictionary_file, tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    answers.write_text("abcde\ngeese\ncrane\n")
    assert main(["--dictionary", dictionary_file, "--weighting", "raw",
                 "bench", "--answers", str(answers), "--limit", "2"]) == 0
    out = capsys.readouterr().out
    assert "Words tested: 2" in out


def test_missing_dictionary(tmp_path, capsys):
    assert main(["--dictionary", str(tmp_path / "nope.txt"), "solve", "abcde"]) == 1
    assert "Error" in capsys.readouterr().out


def test_bad_config(dictionary_file):
    assert main(["--dictionary", dictionary_file, "--fraction", "2", "solve", "abcde"]) == 1


def test_config_from_args():
    args = build_parser().parse_args([
        "--dictionary", "x", "--opener", "CRATE", "--threshold", "0", "--floor", "5",
        "--precompute", "assist",
    ])
    config = config_from_args(args)
    assert config.opener == "crate"
    assert config.evaluation_threshold is None
    assert config.evaluation_floor == 5
    assert config.precompute


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--dictionary", "x"])
