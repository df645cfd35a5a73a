"""helpers for building frequency lists from wordfreq.

handy when there is no FrequencyWords-style list for a language: we
take wordfreq's top-n words and turn their frequencies back into counts
over a nominal corpus size.
"""

from __future__ import annotations

from typing import Iterable

from wordfreq import top_n_list, word_frequency

from .freqlist import UINT32_MAX, WordCount, is_valid_key


def freqlist_from_wordfreq(
  lang: str = "en",
  n: int = 10_000,
  *,
  wordlist: str = "best",
  corpus_size: int = 10**9,
  filter_keys: bool = True,
) -> list[WordCount]:
  """top-n words of `lang` with counts = frequency * corpus_size.

  counts are clamped to [1, UINT32_MAX] so every entry works with the
  reciprocal formulas. with filter_keys, words the list parser would
  skip are left out.
  """
  entries: list[WordCount] = []
  for w in top_n_list(lang, n, wordlist=wordlist):
    if filter_keys and not is_valid_key(w):
      continue
    freq = word_frequency(w, lang, wordlist=wordlist)
    count = min(max(1, round(freq * corpus_size)), UINT32_MAX)
    entries.append(WordCount(word=w, count=count))
  return entries


def format_freqlist(entries: Iterable[WordCount]) -> str:
  """render entries as "<word> <count>" lines, newline-terminated."""
  return "".join(f"{e.word} {e.count}\n" for e in entries)
