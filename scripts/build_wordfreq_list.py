#!/usr/bin/env python3
"""build a '<word> <count>' frequency list from wordfreq.

usage:
    python scripts/build_wordfreq_list.py --lang en -n 50000

outputs:
    data/{lang}/{lang}_wordfreq.txt, ready for score_text.py / gen_maps.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# add parent dir to path so we can import freqscore
sys.path.insert(0, str(Path(__file__).parent.parent))

from freqscore.wordfreq_utils import format_freqlist, freqlist_from_wordfreq


def main() -> None:
  parser = argparse.ArgumentParser(description="write a frequency list from wordfreq")
  parser.add_argument("--lang", type=str, default="en", help="wordfreq language code")
  parser.add_argument("-n", type=int, default=10_000, help="number of top words")
  parser.add_argument("--wordlist", type=str, default="best", help="wordfreq wordlist (best, small, large)")
  parser.add_argument("--corpus-size", type=int, default=10**9, help="nominal corpus size for counts")
  parser.add_argument("--data-dir", type=Path, default=Path("data"), help="output root")

  args = parser.parse_args()

  print(f"reading top {args.n:,} '{args.lang}' words from wordfreq ({args.wordlist})...")
  entries = freqlist_from_wordfreq(
    args.lang,
    args.n,
    wordlist=args.wordlist,
    corpus_size=args.corpus_size,
  )

  if entries:
    counts = [e.count for e in entries]
    print(f"  entries: {len(entries):,}")
    print(f"  count range: {min(counts):,} - {max(counts):,}")
  else:
    print("  no entries (unknown language?)")

  out_path = args.data_dir / args.lang / f"{args.lang}_wordfreq.txt"
  out_path.parent.mkdir(parents=True, exist_ok=True)

  with open(out_path, "w", encoding="utf-8") as f:
    f.write(format_freqlist(entries))

  print(f"wrote {len(entries):,} entries to {out_path}")


if __name__ == "__main__":
  main()
