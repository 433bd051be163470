"""Command that checks both JSON grammars agree on a document."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from combiparse import json_functional, json_method
from combiparse.parser import ParseError

SAMPLE_DOCUMENT = r"""
{
  "title": "Inventory snapshot",
  "count": 7,
  "offset": -12,
  "ratio": 0.5,
  "delta": -1.25,
  "scaled": 6.02E23,
  "active": true,
  "archived": false,
  "owner": null,
  "note": "",
  "symbols": "~`!?<>[]{}()|\\/\"':;,.+-*=&^%$#@",
  "greeting": "Grüße, καλημέρα \u00e9t\u00e9",
  "escapes": "line\nbreak\ttab\rreturn\bback\fform\/slash",
  "mixed": [10, "eleven", 12.0, true, null, {"inner": "leaf"}],
  "tree": {
    "branch": {
      "twig": {
        "leaf": {"label": "bottom", "depth": 4}
      },
      "flags": [false, true, "maybe"]
    }
  },
  "records": [
    {"key": 100, "label": "first", "colours": ["cyan", "magenta"]},
    {"key": 200, "label": "second", "colours": ["black"]},
    {"key": 300, "label": "third", "colours": []}
  ],
  "nothing": {},
  "none": [],
  "nested_lists": [[["core"]], [[]]]
}
"""


def _outcome(parse: Callable[[str], Any], text: str) -> tuple[bool, Any]:
    try:
        return True, parse(text)
    except ParseError:
        return False, None


def main(argv: list[str] | None = None) -> int:
    """Parse a document with both grammars; exit 0 if they agree."""
    parser = argparse.ArgumentParser(
        prog="combiparse",
        description="Check that both JSON grammars give the same result.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="JSON file to read, '-' for standard input; a built-in sample by default",
    )
    args = parser.parse_args(argv)

    if args.path is None:
        text = SAMPLE_DOCUMENT
    elif args.path == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(args.path).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"combiparse: {exc}", file=sys.stderr)
            return 2

    if _outcome(json_method.parse, text) != _outcome(json_functional.parse, text):
        print("combiparse: the two grammars disagree", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())