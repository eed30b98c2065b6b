from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from bloomcheck.codec.binary import load_file
from bloomcheck.config.settings import SETTINGS

console = Console()

PRESENT = "Probably in set"
ABSENT = "Not in set"


class FilterChecker:
    def __init__(self, filter_file: str, version: Optional[int] = None) -> None:
        self.filter_file = Path(filter_file)
        self.version = SETTINGS.format_version if version is None else version

    def run(self, words: Iterable[str]) -> List[Tuple[str, bool]]:
        bf = load_file(self.filter_file, self.version)
        results = []
        for word in words:
            found = bf.probably_contains(word)
            results.append((word, found))
            if found:
                console.print(f"{escape(word)}: [yellow]{PRESENT}[/yellow]")
            else:
                console.print(f"{escape(word)}: [green]{ABSENT}[/green]")
        return results
