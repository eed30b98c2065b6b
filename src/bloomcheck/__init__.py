"""bloomcheck - Bloom filter construction, persistence and lookup."""

from bloomcheck.builder.builder import BuildReport, FilterBuilder
from bloomcheck.checker.checker import FilterChecker
from bloomcheck.codec.binary import (
    MAGIC,
    FilterHeader,
    dumps,
    load_file,
    loads,
    read_file_header,
    save,
)
from bloomcheck.config.settings import SETTINGS, BloomSettings, load_settings
from bloomcheck.errors import (
    BloomError,
    CodecError,
    ConstructionError,
    FilterFormatError,
    TruncatedInputError,
    VersionMismatchError,
)
from bloomcheck.filter.bloom_filter import BloomFilter, hash_index
from bloomcheck.io.file_reader import WORD_READER, WordListReader

__version__ = "0.1.0"

__all__ = [
    "MAGIC",
    "SETTINGS",
    "WORD_READER",
    "BloomError",
    "BloomFilter",
    "BloomSettings",
    "BuildReport",
    "CodecError",
    "ConstructionError",
    "FilterBuilder",
    "FilterChecker",
    "FilterFormatError",
    "FilterHeader",
    "TruncatedInputError",
    "VersionMismatchError",
    "WordListReader",
    "dumps",
    "hash_index",
    "load_file",
    "load_settings",
    "loads",
    "read_file_header",
    "save",
]
