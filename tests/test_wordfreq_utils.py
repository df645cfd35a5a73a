from freqscore.freqlist import UINT32_MAX, WordCount, is_valid_key, parse
from freqscore.wordfreq_utils import format_freqlist, freqlist_from_wordfreq
from freqscore.wordmap import build


def test_freqlist_from_wordfreq_english():
  entries = freqlist_from_wordfreq("en", 50)

  words = [e.word for e in entries]
  assert "the" in words
  assert all(1 <= e.count <= UINT32_MAX for e in entries)
  assert all(is_valid_key(w) for w in words)


def test_common_words_score_lower():
  word_map = build(freqlist_from_wordfreq("en", 500))
  assert word_map["the"] < word_map["because"]


def test_format_freqlist_parses_back():
  entries = [WordCount("the", 100), WordCount("cat", 10)]
  text = format_freqlist(entries)

  assert text == "the 100\ncat 10\n"
  assert parse(text).entries == entries
