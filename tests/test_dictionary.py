import pytest

from cryptogram import Dictionary, PotentialKey, UnsupportedInput


def test_build_groups_by_signature(tiny_dictionary):
    assert tiny_dictionary.bucket("XYZ") == ("CAT", "DOG")
    assert tiny_dictionary.bucket("XYY") == ("BEE", "SEE")
    assert tiny_dictionary.bucket("QRSS") == ("CALL",)
    assert len(tiny_dictionary) == 5
    assert tiny_dictionary.signature_count == 3


def test_build_orders_by_descending_frequency():
    d = Dictionary.build([("cat", 200000), ("dog", 900000), ("pig", 500000)], min_popularity=0)
    assert d.bucket("ABC") == ("DOG", "PIG", "CAT")


def test_build_breaks_ties_by_descending_word():
    d = Dictionary.build([("cat", 500000), ("dog", 500000)], min_popularity=0)
    assert d.bucket("ABC") == ("DOG", "CAT")


def test_build_filters_unpopular_words():
    d = Dictionary.build([("cat", 100000), ("dog", 99999)], min_popularity=100000)
    assert "CAT" in d
    assert "DOG" not in d
    assert len(d) == 1


def test_build_keeps_first_of_duplicates():
    d = Dictionary.build([("the", 900000), ("THE", 100), ("The", 500000)], min_popularity=0)
    assert d.bucket("ABC") == ("THE",)
    assert len(d) == 1


def test_build_rejects_non_alpha_words():
    with pytest.raises(UnsupportedInput):
        Dictionary.build([("don't", 900000)], min_popularity=0)


def test_build_skips_non_alpha_words_below_threshold():
    d = Dictionary.build([("don't", 5), ("cat", 900000)], min_popularity=100000)
    assert len(d) == 1


def test_lookup_filters_by_key(tiny_dictionary):
    key = PotentialKey.full()
    assert tiny_dictionary.lookup("XYZ", key) == ["CAT", "DOG"]
    key = key.merge(PotentialKey.from_possibilities("X", ["D"]))
    assert tiny_dictionary.lookup("XYZ", key) == ["DOG"]


def test_lookup_excludes_self_mapping(tiny_dictionary):
    # C can never decrypt to C
    assert tiny_dictionary.lookup("CYZ", PotentialKey.full()) == ["DOG"]


def test_lookup_unknown_signature_is_empty(tiny_dictionary):
    assert tiny_dictionary.lookup("ABCDEFG", PotentialKey.full()) == []
    assert tiny_dictionary.bucket("ABCDEFG") == ()


def test_lookup_is_pure(tiny_dictionary):
    key = PotentialKey.full()
    before = key.copy()
    tiny_dictionary.lookup("XYZ", key)
    tiny_dictionary.lookup("XYZ", key)
    assert key == before
    assert tiny_dictionary.bucket("XYZ") == ("CAT", "DOG")


def test_lookup_rejects_non_alpha_cipherword(tiny_dictionary):
    with pytest.raises(UnsupportedInput):
        tiny_dictionary.lookup("X-Z", PotentialKey.full())


def test_contains(tiny_dictionary):
    assert "cat" in tiny_dictionary
    assert "COW" not in tiny_dictionary
    assert "" not in tiny_dictionary
    assert "c4t" not in tiny_dictionary
    assert 42 not in tiny_dictionary


def test_sample_dictionary_buckets(sample_dictionary):
    assert "YESTERDAY" in sample_dictionary
    assert "ZYZZYVA" not in sample_dictionary  # below the popularity threshold
    assert sample_dictionary.bucket("WQELQXNKW") == ("YESTERDAY",)
    assert "GOD" in sample_dictionary.bucket("ZUN")
    assert "THE" in sample_dictionary.bucket("ZUN")
