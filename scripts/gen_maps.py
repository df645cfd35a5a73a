#!/usr/bin/env python3
"""
generate static word-score maps from a frequency list.

usage:
    python scripts/gen_maps.py ~/FrequencyWords/content/2018/en/en_full.txt
    python scripts/gen_maps.py path/to/list.txt --lang en --output-root lang/

generates:
    - {output}/{lang}/wordmap.json
    - {output}/{lang}/autogen.py

the locale defaults to the name of the directory holding the list.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# add parent dir to path so we can import freqscore
sys.path.insert(0, str(Path(__file__).parent.parent))

from freqscore import PRESETS, FreqScoreError, build_from_text, locale_from_path, write_word_map
from freqscore.artifacts import check_locale


def main():
    parser = argparse.ArgumentParser(
        description="generate per-locale word-score lookup tables"
    )
    parser.add_argument(
        "freqlist",
        type=Path,
        help="path to a '<word> <count>' frequency list"
    )
    parser.add_argument(
        "--lang",
        type=str,
        default=None,
        help="locale name (default: the list's directory name)"
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="float",
        help="scoring variant (default: float)"
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=None,
        help="output root directory (default: lang/)"
    )

    args = parser.parse_args()

    if not args.freqlist.exists():
        print(f"error: file not found: {args.freqlist}")
        sys.exit(1)

    try:
        lang = check_locale(args.lang) if args.lang else locale_from_path(args.freqlist)
    except ValueError as e:
        print(f"error: {e}")
        sys.exit(1)

    config = replace(PRESETS[args.preset])
    if args.output_root:
        config.output_dir = args.output_root

    print(f"reading {args.freqlist}...")
    try:
        word_map = build_from_text(args.freqlist.read_bytes(), config, verbose=True)
    except OSError as e:
        print(f"error: read {args.freqlist}: {e}")
        sys.exit(1)
    except FreqScoreError as e:
        print(f"error: parse {args.freqlist}: {e}")
        sys.exit(1)

    print(f"writing {lang} artifacts to {config.output_dir / lang}...")
    try:
        paths = write_word_map(word_map, lang, config)
    except OSError as e:
        print(f"error: {e}")
        sys.exit(1)

    print("\nartifacts written:")
    for name, path in paths.items():
        size = path.stat().st_size
        print(f"  {name}: {path} ({size:,} bytes)")

    print("\ndone!")


if __name__ == "__main__":
    main()
