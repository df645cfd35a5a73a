#!/usr/bin/env python3
"""
score text read from stdin against a frequency list.

usage:
    python scripts/score_text.py path/to/en_full.txt < article.txt
    python scripts/score_text.py path/to/en_full.txt --preset average < article.txt

prints a single number: the kurtosis of the text's word scores, or
their average with --aggregator average / --preset average.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# add parent dir to path so we can import freqscore
sys.path.insert(0, str(Path(__file__).parent.parent))

from freqscore import PRESETS, FreqScoreError, build_from_text
from freqscore.config import Aggregator, ScoreFormula


def main():
    parser = argparse.ArgumentParser(
        description="score stdin's reading difficulty against a frequency list"
    )
    parser.add_argument(
        "freqlist",
        type=Path,
        help="path to a '<word> <count>' frequency list"
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="float",
        help="scoring variant to start from (default: float)"
    )
    parser.add_argument(
        "--formula",
        choices=[f.value for f in ScoreFormula],
        default=None,
        help="override the preset's score formula"
    )
    parser.add_argument(
        "--aggregator",
        choices=[a.value for a in Aggregator],
        default=None,
        help="override the preset's aggregator"
    )
    parser.add_argument(
        "--no-filter",
        action="store_true",
        help="keep list words containing digits, hyphens or periods"
    )
    parser.add_argument(
        "--drop-partial-line",
        action="store_true",
        help="ignore a last list line with no trailing newline"
    )
    parser.add_argument(
        "--drop-trailing-word",
        action="store_true",
        help="ignore a last word of the text with nothing after it"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="print extra info"
    )

    args = parser.parse_args()

    config = replace(PRESETS[args.preset])
    if args.formula:
        config.formula = ScoreFormula(args.formula)
    if args.aggregator:
        config.aggregator = Aggregator(args.aggregator)
    if args.no_filter:
        config.filter_keys = False
    if args.drop_partial_line:
        config.drop_partial_line = True
    if args.drop_trailing_word:
        config.flush_trailing = False

    try:
        raw = args.freqlist.read_bytes()
    except OSError as e:
        print(f"error: read {args.freqlist}: {e}")
        sys.exit(1)

    try:
        if args.verbose:
            print(f"parsing {args.freqlist}...")
        word_map = build_from_text(raw, config, verbose=args.verbose)

        text = sys.stdin.buffer.read()
        score = word_map.score(
            text,
            config.aggregator,
            flush_trailing=config.flush_trailing,
            encoding_errors=config.encoding_errors,
        )
    except FreqScoreError as e:
        print(f"error: {e}")
        sys.exit(1)

    print(score)


if __name__ == "__main__":
    main()
