import sys
from unittest.mock import patch

import pytest

from bloomcheck import (
    BloomFilter,
    FilterBuilder,
    FilterChecker,
    VersionMismatchError,
    load_file,
    save,
)
from bloomcheck.__main__ import main

ABSENT_WORDS = ["zillow", "foo", "zoo", "bar", "baz"]


@pytest.fixture(autouse=True)
def quiet_consoles():
    with patch("bloomcheck.builder.builder.console"), patch(
        "bloomcheck.checker.checker.console"
    ), patch("bloomcheck.__main__.console"), patch(
        "bloomcheck.__main__._configure_logging"
    ):
        yield


@pytest.fixture
def built_filter(word_list, tmp_path):
    out = tmp_path / "test.bf"
    FilterBuilder(str(word_list), str(out), version=42).run()
    return out


def test_build_then_check(built_filter, dictionary_words):
    results = dict(FilterChecker(str(built_filter), version=42).run(
        dictionary_words + ABSENT_WORDS
    ))
    for word in dictionary_words:
        assert results[word] is True
    for word in ABSENT_WORDS:
        assert results[word] is False


def test_loaded_filter_state(built_filter, dictionary_words):
    bf = load_file(built_filter, 42)
    assert bf.size == 135
    assert bf.hash_count == 13
    assert bf.bits_set() == 66
    assert bf.expected_items == 0

    bf.clear()
    assert not bf.probably_contains("aardwolf")
    assert bf.size == 135


def test_rebuild_in_memory_matches_file(built_filter, dictionary_words):
    bf = BloomFilter(len(dictionary_words), 0.0001)
    # Insertion order does not change the final state.
    bf.add_many(reversed(dictionary_words))
    assert bf == load_file(built_filter, 42)


def test_resave_is_byte_identical(built_filter, tmp_path):
    copy = tmp_path / "copy.bf"
    save(load_file(built_filter, 42), copy, 42)
    assert copy.read_bytes() == built_filter.read_bytes()


def test_version_gate(built_filter):
    with pytest.raises(VersionMismatchError):
        load_file(built_filter, 1)


def test_cli_round_trip(word_list, tmp_path, dictionary_words):
    out = tmp_path / "cli.bf"
    with patch.object(
        sys, "argv", ["bloomcheck", "build", str(word_list), str(out), "--version", "42"]
    ):
        main()

    with patch.object(
        sys, "argv", ["bloomcheck", "check", str(out), "aardvark", "zillow", "--version", "42"]
    ), patch("bloomcheck.__main__.FilterChecker.run") as mock_run:
        main()
    mock_run.assert_called_once_with(["aardvark", "zillow"])

    results = FilterChecker(str(out), version=42).run(["aardvark", "zillow"])
    assert results == [("aardvark", True), ("zillow", False)]
