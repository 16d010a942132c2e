"""
CLI interface for cedict-lite.

Usage:
    cedict-lite 我的大王！
    cedict-lite chinese language
    cedict-lite --pinyin "mei guo ren"
    cedict-lite --file cedict_ts.u8.gz --json 中文
"""

import argparse
import json
import logging
import sys
from typing import List

from cedict_lite import __version__
from cedict_lite.characters import is_hanzi
from cedict_lite.codec import format_timestamp, marshal
from cedict_lite.dictionary import Dictionary, new
from cedict_lite.errors import CedictError
from cedict_lite.raw_types import Entry
from cedict_lite.tones import pinyin_plaintext, pinyin_tones

logger = logging.getLogger(__name__)


# ============================================================================
# Output Formatting
# ============================================================================

def format_entries(entries: List[Entry]) -> str:
    """Default output: one CC-CEDICT line per entry."""
    return "\n".join(marshal(e) for e in entries)


def format_json(entries: List[Entry]) -> str:
    """Format entries as JSON, with pinyin in both notations."""
    data = []
    for e in entries:
        data.append({
            "traditional": e.traditional,
            "simplified": e.simplified,
            "pinyin": e.pinyin,
            "pinyin_tones": pinyin_tones(e.pinyin),
            "meanings": list(e.meanings),
        })
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_pinyin(pinyin: str, tone_numbers: bool = False, plain: bool = False) -> str:
    """Render transliterated pinyin in the requested notation."""
    if plain:
        return pinyin_plaintext(pinyin)
    if tone_numbers:
        return pinyin
    return pinyin_tones(pinyin)


def format_metadata(d: Dictionary) -> str:
    md = d.metadata()
    ts = format_timestamp(md.timestamp) if md.timestamp else "-"
    lines = [
        f"version:    {md.version}.{md.subversion}",
        f"format:     {md.format}",
        f"charset:    {md.charset}",
        f"entries:    {md.entries:,}",
        f"publisher:  {md.publisher}",
        f"license:    {md.license}",
        f"date:       {ts}",
    ]
    return "\n".join(lines)


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cedict-lite",
        description="Chinese-English dictionary (CC-CEDICT)",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Hanzi to transliterate, or English to look up",
    )
    parser.add_argument(
        "--file", "-f",
        help="Load a local CC-CEDICT file instead of downloading",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--pinyin", "-p",
        action="store_true",
        help="Look up entries by pinyin",
    )
    mode.add_argument(
        "--hanzi", "-z",
        action="store_true",
        help="Look up entries by hanzi instead of transliterating",
    )
    mode.add_argument(
        "--info",
        action="store_true",
        help="Show dictionary metadata",
    )
    tones = parser.add_mutually_exclusive_group()
    tones.add_argument(
        "--tone-numbers", "-n",
        action="store_true",
        help="Print transliterated pinyin with tone numbers",
    )
    tones.add_argument(
        "--plain",
        action="store_true",
        help="Print transliterated pinyin without tones",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output entries as JSON",
    )
    parser.add_argument(
        "--save",
        metavar="PATH",
        help="Save the dictionary to PATH (.gz to compress)",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Seconds to wait for the dictionary to load",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"cedict-lite {__version__}",
    )
    return parser


def run(args: argparse.Namespace, text: str) -> str:
    """Execute one invocation and return what to print."""
    d = Dictionary.load(args.file) if args.file else new()

    if not d.wait(args.timeout):
        raise CedictError(f"dictionary not ready after {args.timeout}s")

    if args.save:
        d.save(args.save)

    if args.info:
        return format_metadata(d)

    if not text:
        return ""

    if args.pinyin:
        entries = d.get_by_pinyin(text)
    elif args.hanzi:
        entries = d.get_all_by_hanzi(text)
    elif is_hanzi(text):
        logger.debug("input: hanzi")
        return format_pinyin(d.hanzi_to_pinyin(text), args.tone_numbers, args.plain)
    else:
        logger.debug("input: english")
        entries = d.get_by_meaning(text)

    if args.json:
        return format_json(entries)
    return format_entries(entries)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if args.text:
        text = " ".join(args.text)
    elif args.info or args.save:
        text = ""
    else:
        # Read from stdin
        text = sys.stdin.read().strip()

    if not text and not (args.info or args.save):
        parser.print_help()
        sys.exit(1)

    try:
        output = run(args, text)
    except CedictError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if output:
        print(output)


if __name__ == "__main__":
    main()
