import pytest

from bloomcheck.filter.bloom_filter import BloomFilter

_DICTIONARY = [
    "AARC",
    "aardvark",
    "aardvarks",
    "aardwolf",
    "Aarika",
    "Aarhus",
    "aardwolves",
]

_FRUIT = [
    "apple",
    "banana",
    "aardvark",
    "zulu",
    "abcdefghijklmnop",
    "helloworldfoobarbaz",
    "foo",
    "bar",
]


@pytest.fixture
def word_list(tmp_path):
    """Word list with padding and blank lines the reader must drop."""
    path = tmp_path / "words.txt"
    lines = [f"  {w}\t" if i % 2 else w for i, w in enumerate(_DICTIONARY)]
    content = "\n".join(lines[:3] + ["", "   "] + lines[3:]) + "\n"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def fruit_filter():
    bf = BloomFilter(1000, 0.1)
    bf.add_many(_FRUIT)
    return bf


@pytest.fixture
def tiny_filter():
    """size=8, hash_count=1; 'apple' maps to slot 0."""
    bf = BloomFilter(5, 0.5)
    bf.add("apple")
    return bf


@pytest.fixture
def dictionary_words():
    return list(_DICTIONARY)


@pytest.fixture
def fruit_words():
    return list(_FRUIT)
