import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from bloomcheck.builder.builder import FilterBuilder
from bloomcheck.checker.checker import FilterChecker
from bloomcheck.codec.binary import load_file, read_file_header
from bloomcheck.config.settings import SETTINGS, BloomSettings
from bloomcheck.errors import BloomError

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _show_info(filter_file: str) -> None:
    header = read_file_header(filter_file)
    bf = load_file(filter_file, header.version)
    table = Table(title=f"Bloom filter - {filter_file}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Format version", str(header.version))
    table.add_row("Hash count", str(header.hash_count))
    table.add_row("Size (bits)", f"{header.size:,}")
    table.add_row("File length", f"{header.total_length:,} bytes")
    table.add_row("Bits set", f"{bf.bits_set():,}")
    table.add_row("Fill ratio", f"{bf.fill_ratio():.4%}")
    table.add_row(
        "Estimated FP rate", f"{bf.estimated_false_positive_rate():.6%}"
    )
    console.print(table)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="bloomcheck",
        description="bloomcheck - Build and query persisted Bloom filters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\nExamples:\n  bloomcheck build words.txt words.bf --version 42\n  bloomcheck check words.bf aardvark zillow --version 42\n  bloomcheck info words.bf\n        ",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")
    build_parser = subparsers.add_parser(
        "build", help="Build a filter from a newline-delimited word list"
    )
    build_parser.add_argument("input_file", help="Word list, one per line")
    build_parser.add_argument("output_file", help="Destination filter file")
    build_parser.add_argument(
        "--version",
        type=int,
        default=None,
        help=f"Format version to record (default {SETTINGS.format_version})",
    )
    build_parser.add_argument(
        "--fpp",
        type=float,
        default=None,
        help=(
            "Target false-positive probability "
            f"(default {SETTINGS.false_positive_probability})"
        ),
    )
    check_parser = subparsers.add_parser(
        "check", help="Query words against a filter file"
    )
    check_parser.add_argument("filter_file", help="Filter file to load")
    check_parser.add_argument("words", nargs="+", help="Words to look up")
    check_parser.add_argument(
        "--version",
        type=int,
        default=None,
        help=f"Expected format version (default {SETTINGS.format_version})",
    )
    info_parser = subparsers.add_parser(
        "info", help="Show the header and fill of a filter file"
    )
    info_parser.add_argument("filter_file", help="Filter file to inspect")
    args = parser.parse_args()
    _configure_logging(args.verbose)
    try:
        if args.command == "build":
            settings = SETTINGS
            if args.fpp is not None:
                settings = BloomSettings(
                    false_positive_probability=args.fpp,
                    format_version=SETTINGS.format_version,
                    encoding=SETTINGS.encoding,
                )
            FilterBuilder(
                args.input_file,
                args.output_file,
                version=args.version,
                settings=settings,
            ).run()
        elif args.command == "check":
            FilterChecker(args.filter_file, version=args.version).run(
                args.words
            )
        elif args.command == "info":
            _show_info(args.filter_file)
        else:
            parser.print_help()
            sys.exit(1)
    except (BloomError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
