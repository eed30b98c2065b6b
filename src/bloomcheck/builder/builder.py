"""Build a persisted Bloom filter from a newline-delimited word list."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from bloomcheck.codec.binary import save
from bloomcheck.config.settings import SETTINGS, BloomSettings
from bloomcheck.filter.bloom_filter import BloomFilter
from bloomcheck.io.file_reader import WordListReader

console = Console()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildReport:
    word_count: int
    size: int
    hash_count: int
    output_file: Path
    version: int


class FilterBuilder:
    def __init__(
        self,
        input_file: str,
        output_file: str,
        version: Optional[int] = None,
        settings: Optional[BloomSettings] = None,
    ) -> None:
        self.settings = settings or SETTINGS
        self.input_file = Path(input_file)
        self.output_file = Path(output_file)
        self.version = (
            self.settings.format_version if version is None else version
        )
        self.reader = WordListReader(encoding=self.settings.encoding)

    def run(self) -> BuildReport:
        words = self.reader.read_words(self.input_file)
        word_count = len(words)
        logger.debug("Read %d words from %s", word_count, self.input_file)
        bf = BloomFilter(word_count, self.settings.false_positive_probability)
        bf.add_many(words)
        save(bf, self.output_file, self.version)
        console.print(f"Processed {word_count} words from {self.input_file}")
        console.print(
            f"Bloom filter saved to {self.output_file} (version {self.version})"
        )
        return BuildReport(
            word_count=word_count,
            size=bf.size,
            hash_count=bf.hash_count,
            output_file=self.output_file,
            version=self.version,
        )
