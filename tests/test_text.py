import pytest

from freqscore.errors import TextDecodeError
from freqscore.text import decode_text, tokenize


def test_tokenize_flushes_trailing_word():
    assert list(tokenize("The cat sat.")) == ["the", "cat", "sat"]
    assert list(tokenize("The cat sat")) == ["the", "cat", "sat"]


def test_tokenize_can_drop_trailing_word():
    assert list(tokenize("The cat sat", flush_trailing=False)) == ["the", "cat"]
    # a separator after the last word still completes it
    assert list(tokenize("The cat sat.", flush_trailing=False)) == ["the", "cat", "sat"]


def test_non_letters_separate_words():
    assert list(tokenize("abc123def--ghi")) == ["abc", "def", "ghi"]
    assert list(tokenize("don't")) == ["don", "t"]
    assert list(tokenize("  ,,  ")) == []


def test_unicode_letters():
    assert list(tokenize("Über die Straße")) == ["über", "die", "straße"]
    assert list(tokenize("Привет, мир")) == [
        "привет",
        "мир",
    ]


def test_tokens_are_restartable():
    tokens = tokenize("one two three")
    assert list(tokens) == list(tokens) == ["one", "two", "three"]


def test_decode_text():
    assert decode_text(b"hello") == "hello"
    assert decode_text("already text") == "already text"
    assert decode_text("\ufeffhi".encode("utf-8")) == "hi"
    assert decode_text(b"caf\xe9", errors="replace") == "caf\ufffd"

    with pytest.raises(TextDecodeError):
        decode_text(b"caf\xe9")


def test_case_folding_keeps_one_code_point_per_character():
    # "İ".lower() alone would add a combining dot and split the word
    assert list(tokenize("İstanbul güzel")) == ["istanbul", "güzel"]
    assert list(tokenize("DİYARBAKIR")) == ["diyarbakir"]
