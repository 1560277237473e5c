#!/usr/bin/env python3
"""
BCMS Transliterator CLI

Command-line interface for converting BCMS text between the Latin and
Cyrillic alphabets.

Usage:
    python -m bcms_transliterator -a <ALPHABET> <source> [options]
    python -m bcms_transliterator -a LATIN pesma.txt
    python -m bcms_transliterator -a CYRILLIC песма.txt -o pesma.txt
    python -m bcms_transliterator -a LATIN ugovor.docx
    cat pesma.txt | python -m bcms_transliterator -a LATIN -

Options:
    -a, --alphabet NAME  Alphabet the input is written in (LATIN | CYRILLIC)
    -t, --target NAME    Alphabet to produce (default: the other one)
    -o, --output FILE    Write converted text to FILE instead of stdout
    --encoding ENC       Encoding of plain text input (default: utf-8)
    -v, --verbose        Print progress to stderr
    --formats            Show all supported input sources
    --table              Show the substitution table for the chosen direction
"""

import argparse
import codecs
import os
import sys

# Allow running from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bcms_transliterator.core import Transliterator, table_for
from bcms_transliterator.orthography import Orthography, OrthographyError
from bcms_transliterator.sources import SourceError, TextSource, WebSource


ALPHABET_CHOICES = "|".join(member.value for member in Orthography)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bcms-transliterate",
        description=(
            "BCMS Alphabet Converter\n\n"
            "Converts Bosnian/Croatian/Montenegrin/Serbian text between the\n"
            "Latin and Cyrillic alphabets, line by line."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  bcms-transliterate -a LATIN pesma.txt                 # Latin -> Cyrillic\n"
            "  bcms-transliterate -a CYRILLIC песма.txt              # Cyrillic -> Latin\n"
            "  bcms-transliterate -a LATIN ugovor.docx -o ugovor.txt\n"
            "  bcms-transliterate -a LATIN https://example.rs/vesti\n"
            "  cat pesma.txt | bcms-transliterate -a LATIN -\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        metavar="INPUT",
        help="Files, URLs or - (stdin) to read text from",
    )
    parser.add_argument(
        "-a", "--alphabet",
        metavar=ALPHABET_CHOICES,
        help="Which alphabet the input is written in",
    )
    parser.add_argument(
        "-t", "--target",
        metavar=ALPHABET_CHOICES,
        default=None,
        help="Which alphabet to convert to (default: the other one)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write converted text to this file instead of stdout",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of plain text input (default: utf-8)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress messages to stderr",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input sources and exit",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show the substitution table for the chosen direction and exit",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Output is always UTF-8, whatever the console locale
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    if args.formats:
        _show_formats()
        return 0

    if args.alphabet is None:
        parser.error("the following arguments are required: -a/--alphabet")

    try:
        source = Orthography.parse(args.alphabet)
        target = Orthography.parse(args.target) if args.target else source.complement
    except OrthographyError as e:
        parser.error(str(e))

    if args.table:
        _show_table(source, target)
        return 0

    if not args.sources:
        parser.error("the following arguments are required: INPUT")

    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"Unknown encoding: {args.encoding}")

    # Lines are split on b"\n" before decoding
    if not _is_ascii_compatible(args.encoding):
        parser.error(f"Encoding must be ASCII-compatible: {args.encoding}")

    engine = Transliterator(source, target, encoding=args.encoding, verbose=args.verbose)

    if args.output:
        output = os.path.realpath(args.output)
        for src in args.sources:
            if _is_local_file(src) and os.path.realpath(src) == output:
                parser.error(f"Output file is also an input: {args.output}")

        with open(args.output, "w", encoding="utf-8") as sink:
            status = _run(engine, args.sources, sink)
        if status == 0 and args.verbose:
            print(f"[SAVED] {args.output}", file=sys.stderr)
        return status

    return _run(engine, args.sources, sys.stdout)


def _run(engine: Transliterator, sources: list[str], sink) -> int:
    """Convert every source into ``sink``; stop at the first unreadable one."""
    line_count = 0
    for source in sources:
        try:
            for line in engine.convert_source(source):
                sink.write(line + "\n")
                line_count += 1
        except (SourceError, RuntimeError) as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            return 1

    if engine.verbose:
        print(
            f"[DONE] {line_count} lines converted "
            f"{engine.source.value} -> {engine.target.value}",
            file=sys.stderr,
        )
    return 0


def _is_ascii_compatible(encoding: str) -> bool:
    try:
        return "\n".encode(encoding) == b"\n" and "a".encode(encoding) == b"a"
    except LookupError:
        # Codecs that are not text encodings, such as rot13 or hex
        return False


def _is_local_file(source: str) -> bool:
    return source != TextSource.STDIN and not WebSource.can_handle(source)


def _show_formats():
    """Display all supported input sources."""
    formats = Transliterator.supported_sources()
    print("\nSupported Input Sources:")
    print("-" * 40)
    for category, entries in formats.items():
        print(f"\n  {category}:")
        for entry in entries:
            print(f"    {entry}")
    print()


def _show_table(source: Orthography, target: Orthography):
    """Display the substitution pairs, in the order they are applied."""
    table = table_for(source, target)
    print(f"\n{source.value} -> {target.value} ({len(table)} pairs)")
    print("-" * 40)
    for src, dst in table:
        print(f"  {src:<4} -> {dst}")
    print()


if __name__ == "__main__":
    sys.exit(main())
