"""
text helpers shared by the list parser and the text scorer.

decode_text turns raw input into str (one place, no byte aliasing);
tokenize splits a text into lowercase letter runs.
"""

from __future__ import annotations

from typing import Iterator

from .errors import TextDecodeError


def decode_text(raw: bytes | str, errors: str = "strict") -> str:
    """
    decode raw input as utf-8 text.

    a leading BOM is dropped. str input is returned unchanged.

    args:
        raw: bytes read from a file / stdin, or an already-decoded str
        errors: bytes.decode error handler ("strict", "replace", ...)

    returns:
        the decoded text
    """
    if isinstance(raw, str):
        return raw
    try:
        return bytes(raw).decode("utf-8-sig", errors=errors)
    except UnicodeDecodeError as e:
        raise TextDecodeError(f"input is not valid utf-8: {e}") from e


def _fold(ch: str) -> str:
    # one code point in, one out: "\u0130".lower() is "i" plus U+0307
    return ch.lower()[0]


class Tokens:
    """lazy, restartable sequence of candidate words in a text.

    every iter() rescans the text, so the same Tokens can be walked
    more than once.
    """

    def __init__(self, text: str, flush_trailing: bool = True):
        # case-fold the whole text up front, not per token
        self.text = "".join(_fold(ch) for ch in text)
        self.flush_trailing = flush_trailing

    def __iter__(self) -> Iterator[str]:
        buf: list[str] = []
        for ch in self.text:
            if ch.isalpha():
                buf.append(ch)
                continue
            if buf:
                yield "".join(buf)
                buf.clear()

        # a word running into end-of-text
        if buf and self.flush_trailing:
            yield "".join(buf)

    def __repr__(self) -> str:
        return f"Tokens({self.text[:30]!r}, flush_trailing={self.flush_trailing})"


def tokenize(text: str, *, flush_trailing: bool = True) -> Tokens:
    """
    split text into lowercase runs of letters.

    anything that is not a letter (str.isalpha, unicode category L*)
    separates words. with flush_trailing=False a word that is not
    followed by a separator is dropped, like the old scanner did.
    """
    return Tokens(text, flush_trailing=flush_trailing)
