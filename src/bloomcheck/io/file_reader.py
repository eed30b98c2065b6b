import mmap
from pathlib import Path
from typing import Iterator, List, Optional

from bloomcheck.config.settings import SETTINGS
from bloomcheck.errors import WordListError


class WordListReader:
    def __init__(self, encoding: Optional[str] = None) -> None:
        self.encoding = encoding or SETTINGS.encoding

    def read_bytes(self, path: Path) -> bytes:
        path = Path(path)
        size = path.stat().st_size
        # mmap cannot map empty files, so small ones are read directly
        if size < 64 * 1024:
            return path.read_bytes()
        with open(path, "rb") as f, mmap.mmap(
            f.fileno(), 0, access=mmap.ACCESS_READ
        ) as mm:
            return mm.read()

    def read_text(self, path: Path) -> str:
        data = self.read_bytes(path)
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise WordListError(
                f"{path}: invalid {self.encoding} data at byte {e.start}"
            ) from e

    def iter_words(self, path: Path) -> Iterator[str]:
        # Only "\n" ends a line; a trailing "\r" goes with the strip.
        for line in self.read_text(path).split("\n"):
            word = line.strip()
            if word:
                yield word

    def read_words(self, path: Path) -> List[str]:
        """One stripped word per non-empty line, in file order."""
        return list(self.iter_words(path))


WORD_READER = WordListReader()
