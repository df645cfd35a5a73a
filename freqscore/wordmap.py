"""
the word -> score map, built once from a parsed frequency list.

this is the core of freqscore: build() derives every word's score
(two passes: find max_count, then score), and WordMap.score() rates a
text by aggregating the scores of the words it contains.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator

from .config import Aggregator, Config, DEFAULT_CONFIG, ScoreFormula
from .errors import ZeroCount
from .freqlist import WordCount, parse
from .scoring import Score, derive
from .stats import aggregate
from .text import decode_text, tokenize


@dataclass(frozen=True)
class WordScore:
    word: str
    score: Score


class WordMap(Mapping):
    """
    read-only mapping word -> score.

    keys are stored as parsed (case-sensitive); score() lowercases the
    text before looking words up.
    """

    def __init__(self, scores: dict[str, Score], formula: ScoreFormula, max_count: int):
        self._scores = MappingProxyType(dict(scores))
        self.formula = ScoreFormula(formula)
        self.max_count = max_count

    def __getitem__(self, word: str) -> Score:
        return self._scores[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        return f"WordMap({len(self):,} words, formula={self.formula.value}, max_count={self.max_count})"

    def sorted_pairs(self) -> list[WordScore]:
        """all (word, score) pairs, ascending by score (ties keep map order)."""
        pairs = [WordScore(word=w, score=s) for w, s in self._scores.items()]
        pairs.sort(key=lambda p: p.score)
        return pairs

    def scores_for(self, words: Iterable[str]) -> list[Score]:
        """scores of the words present in the map; unknown words are skipped."""
        found: list[Score] = []
        for w in words:
            score = self._scores.get(w)
            if score is not None:
                found.append(score)
        return found

    def score(
        self,
        text: bytes | str,
        aggregator: Aggregator | str = Aggregator.KURTOSIS,
        *,
        flush_trailing: bool = True,
        encoding_errors: str = "strict",
    ) -> Score:
        """
        reading-difficulty score of a text.

        args:
            text: the text (bytes are decoded as utf-8)
            aggregator: KURTOSIS (0.0 for fewer than two known words)
                or AVERAGE (raises NoWordsFound when none are known)
            flush_trailing: count a final word with nothing after it

        returns:
            the aggregate of the known words' scores
        """
        decoded = decode_text(text, errors=encoding_errors)
        found = self.scores_for(tokenize(decoded, flush_trailing=flush_trailing))
        return aggregate(found, aggregator)


def build(
    entries: Iterable[WordCount],
    formula: ScoreFormula | str = ScoreFormula.RECIPROCAL_FLOAT,
) -> WordMap:
    """
    build a WordMap from parsed entries.

    max_count is taken over every entry before any score is derived.
    when a word appears twice the later entry wins.

    raises:
        ZeroCount: an entry has count 0 under a reciprocal formula
    """
    entries = list(entries)
    formula = ScoreFormula(formula)

    # --- pass 1: global max ---
    max_count = max((e.count for e in entries), default=0)

    # --- pass 2: scores ---
    scores: dict[str, Score] = {}
    for e in entries:
        try:
            scores[e.word] = derive(e.count, max_count, formula)
        except ZeroCount as err:
            raise ZeroCount(f"word {e.word!r}: {err}") from err

    return WordMap(scores, formula=formula, max_count=max_count)


def build_from_text(
    raw: bytes | str,
    config: Config = DEFAULT_CONFIG,
    verbose: bool = False,
) -> WordMap:
    """parse a raw frequency list and build its WordMap in one go."""
    result = parse(
        raw,
        filter_keys=config.filter_keys,
        drop_partial_line=config.drop_partial_line,
        encoding_errors=config.encoding_errors,
        verbose=verbose,
    )
    word_map = build(result.entries, config.formula)
    if verbose:
        print(f"  word map: {len(word_map):,} words (max count {word_map.max_count:,})")
    return word_map
