"""CLI entrypoint converting syllable runs between Bopomofo and Pinyin notations."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from bpmf_pinyin.convert import RENDERERS, Notation, detect_notation, parse_syllables
from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.inventory import is_attested
from bpmf_pinyin.models import Syllable

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
NOTATION_CHOICES = [item.value for item in Notation]


def _configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the root logger.

    Args:
        verbose: Emit DEBUG records instead of WARNING and above.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the conversion command.
    """

    parser = argparse.ArgumentParser(
        prog="bpmf-pinyin",
        description="Convert Mandarin syllables between Bopomofo, Pinyin and ASCII Pinyin.",
    )
    parser.add_argument("text", nargs="+", help="Syllables to convert; arguments are joined by spaces.")
    parser.add_argument(
        "--from",
        dest="source",
        choices=NOTATION_CHOICES,
        default=None,
        help="Input notation (default: detect from the first syllable).",
    )
    parser.add_argument(
        "--to",
        dest="target",
        choices=NOTATION_CHOICES,
        default=Notation.PINYIN.value,
        help="Output notation (default: pinyin).",
    )
    parser.add_argument("--separator", default=" ", help="Joiner between output syllables.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject syllables that are not attested in Mandarin readings.",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print every syllable in all three notations instead of a single line.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _unattested(syllables: Sequence[Syllable]) -> list[Syllable]:
    return [syllable for syllable in syllables if not is_attested(syllable)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments to printed output.

    Returns:
        Zero exit status on success, one when the input cannot be converted.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    text = " ".join(args.text)
    try:
        source = Notation(args.source) if args.source else detect_notation(text)
        logger.debug("Reading %r as %s", text, source.value)
        syllables = parse_syllables(text, source)
    except SyllableParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.strict:
        unknown = _unattested(syllables)
        if unknown:
            listed = ", ".join(syllable.to_pinyin() for syllable in unknown)
            print(f"error: unattested syllables: {listed}", file=sys.stderr)
            return 1

    if args.table:
        rows = [[RENDERERS[notation](syllable) for notation in Notation] for syllable in syllables]
        print(_format_table(NOTATION_CHOICES, rows))
        return 0

    render = RENDERERS[Notation(args.target)]
    print(args.separator.join(render(syllable) for syllable in syllables))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
