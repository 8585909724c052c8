import pytest

from cryptogram import Dictionary
from wordlist import load_dictionary


@pytest.fixture(scope="session")
def sample_dictionary() -> Dictionary:
    return load_dictionary()


@pytest.fixture
def tiny_dictionary() -> Dictionary:
    return Dictionary.build([
        ("CAT", 900000),
        ("DOG", 800000),
        ("BEE", 700000),
        ("SEE", 650000),
        ("CALL", 600000),
    ], min_popularity=100000)
