import pytest

from cryptogram import ALLOWED_WORD_MINPOPULARITY
from sample_wordlist import SAMPLE_WORDLIST
from wordlist import (
    load_dictionary, load_wordlist, parse_wordlist, parse_wordlist_line,
)


def write_wordlist(tmp_path, lines) -> str:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_parse_line():
    assert parse_wordlist_line("the 1 53097401461") == ("THE", 1, 53097401461)
    assert parse_wordlist_line("  Hello\t12   345  ") == ("HELLO", 12, 345)


@pytest.mark.parametrize("line", ["", "   ", "# word rank count"])
def test_parse_line_skips_blank_and_comments(line):
    assert parse_wordlist_line(line) is None


@pytest.mark.parametrize("line", ["don't 5 1000", "café 6 1000", "b52 7 1000", "co-op 8 1000"])
def test_parse_line_skips_non_alpha_words(line):
    assert parse_wordlist_line(line) is None


@pytest.mark.parametrize("line", ["the", "the 1", "the one 2", "the 1 many"])
def test_parse_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_wordlist_line(line)


def test_parse_line_error_names_line_number():
    with pytest.raises(ValueError, match="line 7"):
        parse_wordlist_line("the 1", lineno=7)


def test_parse_wordlist_text_and_bytes():
    text = "the 1 900\n\ndon't 2 800\nof 3 700\n"
    assert parse_wordlist(text) == [("THE", 900), ("OF", 700)]
    assert parse_wordlist(text.encode("utf-8")) == [("THE", 900), ("OF", 700)]


def test_parse_wordlist_reports_bad_line():
    with pytest.raises(ValueError, match="line 2"):
        parse_wordlist("the 1 900\nbroken\n")


def test_sample_wordlist_parses():
    pairs = parse_wordlist(SAMPLE_WORDLIST)
    words = [w for w, _ in pairs]
    assert words[0] == "THE"
    assert "YESTERDAY" in words
    assert len(words) == len(set(words))


def test_load_wordlist(tmp_path):
    path = write_wordlist(tmp_path, ["cat 1 900000", "dog 2 800000"])
    assert load_wordlist(path) == [("CAT", 900000), ("DOG", 800000)]


def test_load_wordlist_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_wordlist(tmp_path / "nope.txt")


def test_load_dictionary_from_file(tmp_path):
    path = write_wordlist(tmp_path, ["cat 1 900000", "dog 2 800000", "emu 3 5"])
    d = load_dictionary(path)
    assert len(d) == 2
    assert "EMU" not in d
    assert len(load_dictionary(path, min_popularity=0)) == 3


def test_load_dictionary_defaults_to_sample():
    d = load_dictionary()
    assert "YESTERDAY" in d
    assert "QOPH" not in d
    assert len(load_dictionary(min_popularity=0)) == len(d) + 2
    assert ALLOWED_WORD_MINPOPULARITY == 100000
