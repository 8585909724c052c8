import pytest

import solve_puzzle
import verify_key
from sample_wordlist import SAMPLE_KEY, SAMPLE_PLAINTEXT, SAMPLE_PUZZLE


def test_solve_puzzle_prints_translation(capsys):
    assert solve_puzzle.main([SAMPLE_PUZZLE]) == 0
    out = capsys.readouterr().out
    assert "Words found in ciphertext:" in out
    assert f"Translation: {SAMPLE_PLAINTEXT}" in out


def test_solve_puzzle_with_wordlist_and_limit(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("cat 1 900000\ndog 2 800000\n", encoding="utf-8")
    assert solve_puzzle.main(["XYZ", "--wordlist", str(path), "--limit", "1"]) == 0
    out = capsys.readouterr().out
    assert "['CAT'] (+1 more)" in out
    assert "Translation: ***" in out


def test_solve_puzzle_no_solution_exit_code(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("to 1 900000\n", encoding="utf-8")
    assert solve_puzzle.main(["XY ZY", "--wordlist", str(path)]) == 1
    assert "NoSolution" in capsys.readouterr().out


def test_solve_puzzle_bad_wordlist(tmp_path, capsys):
    assert solve_puzzle.main(["XYZ", "--wordlist", str(tmp_path / "missing.txt")]) == 1
    assert "Error loading word list" in capsys.readouterr().out


def test_verify_key_sample(capsys):
    assert verify_key.main(["--sample"]) == 0
    out = capsys.readouterr().out
    assert "[FAIL]" not in out
    assert "Overall: PASS" in out


def test_verify_key_expected_mismatch(capsys):
    assert verify_key.main([SAMPLE_PUZZLE, "--key", SAMPLE_KEY, "--expected", "NOPE"]) == 1
    assert "Overall: FAIL" in capsys.readouterr().out


def test_verify_key_invalid_key(capsys):
    assert verify_key.main([SAMPLE_PUZZLE, "--key", "ABC"]) == 1
    assert "InvalidKey" in capsys.readouterr().out


def test_verify_key_requires_key():
    with pytest.raises(SystemExit):
        verify_key.main([SAMPLE_PUZZLE])
