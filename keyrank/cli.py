"""
Command-line keyword extraction.

    keyrank                                  # prompt for one line of text
    keyrank "Encryption converts plaintext into ciphertext ..."
    cat article.txt | keyrank --stdin --scores
    python -m keyrank.cli --window 3 --json "some text"
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional, TextIO

from keyrank.rank import KeywordExtractor, KeywordResult, TextRankConfig

PROMPT = "Enter text for keyword extraction:"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyrank",
        description="Extract keywords from text with TextRank.",
    )
    parser.add_argument("text", nargs="*", help="Text to analyse (prompted for when omitted)")
    parser.add_argument("--stdin", action="store_true", help="Read the whole text from standard input")
    parser.add_argument("--damping", type=float, default=None, help="Damping factor in [0, 1] (default 0.85)")
    parser.add_argument("--window", type=int, default=None, help="Co-occurrence window size (default 4)")
    parser.add_argument("--iterations", type=int, default=None, help="Scoring rounds (default 100)")
    parser.add_argument("--top-n", type=int, default=None, help="Fixed number of keywords to print")
    parser.add_argument(
        "--tokenizer",
        choices=["word", "punctuation"],
        default=None,
        help="Split on non-word characters or on a fixed punctuation set",
    )
    parser.add_argument("--scores", action="store_true", help="Print scores next to keywords")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> TextRankConfig:
    config = TextRankConfig.from_env()
    overrides = {
        "damping_factor": args.damping,
        "window_size": args.window,
        "iterations": args.iterations,
        "top_n": args.top_n,
        "tokenizer": args.tokenizer,
    }
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def _read_text(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> str:
    if args.text:
        return " ".join(args.text)
    if args.stdin:
        return stdin.read()
    print(PROMPT, file=out)
    return stdin.readline()


def _print_result(result: KeywordResult, args: argparse.Namespace, out: TextIO) -> None:
    if args.json:
        payload = {
            "keywords": [{"keyword": w, "score": round(s, 6)} for w, s in result.keywords],
            "token_count": result.token_count,
            "node_count": result.node_count,
        }
        print(json.dumps(payload, indent=2), file=out)
        return
    print("\nExtracted Keywords:", file=out)
    for word, s in result.keywords:
        print(f"{word}\t{s:.4f}" if args.scores else word, file=out)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        extractor = KeywordExtractor(_config_from_args(args))
    except ValueError as e:
        parser.error(str(e))

    text = _read_text(args, stdin, out)
    if not text or not text.strip():
        print("No text provided. Exiting.", file=out)
        return 0

    _print_result(extractor.extract_with_scores(text), args, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
