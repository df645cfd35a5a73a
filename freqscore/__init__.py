"""
freqscore: reading difficulty from word frequency lists

parses "<word> <count>" frequency lists into a word -> difficulty map
and scores texts by the distribution of their words' scores.
"""

from .config import Aggregator, Config, DEFAULT_CONFIG, PRESETS, ScoreFormula
from .errors import (
    ArtifactError,
    FreqScoreError,
    InvalidCount,
    InvalidKey,
    MalformedLine,
    NoWordsFound,
    TextDecodeError,
    ZeroCount,
)
from .freqlist import WordCount, parse, parse_line
from .scoring import derive
from .stats import aggregate, average, kurtosis
from .text import decode_text, tokenize
from .wordmap import WordMap, WordScore, build, build_from_text
from .artifacts import locale_from_path, read_word_map, write_word_map

__all__ = [
    "Aggregator",
    "Config",
    "DEFAULT_CONFIG",
    "PRESETS",
    "ScoreFormula",
    "ArtifactError",
    "FreqScoreError",
    "InvalidCount",
    "InvalidKey",
    "MalformedLine",
    "NoWordsFound",
    "TextDecodeError",
    "ZeroCount",
    "WordCount",
    "parse",
    "parse_line",
    "derive",
    "aggregate",
    "average",
    "kurtosis",
    "decode_text",
    "tokenize",
    "WordMap",
    "WordScore",
    "build",
    "build_from_text",
    "locale_from_path",
    "read_word_map",
    "write_word_map",
]
