"""
frequency-list parser.

expects one entry per line, word and count separated by the first space:

    you 28787591
    i 27086011
    the 22761659

lines are split on "\\n" (a trailing "\\r" is tolerated). any malformed
line aborts the whole parse; lines whose word fails the key filter are
skipped and counted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import InvalidCount, InvalidKey, MalformedLine
from .text import decode_text

UINT32_MAX = 2**32 - 1

# characters that disqualify a word when filter_keys is on
INVALID_KEY_CHARS = frozenset(" 0123456789-.")

# ascii digits only; int() alone would also take "+5", " 5" and "1_000"
COUNT_RE = re.compile(r"[0-9]+")


@dataclass
class WordCount:
    word: str
    count: int


@dataclass
class ParseResult:
    """entries in input order plus per-parse statistics."""

    entries: list[WordCount] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def max_count(self) -> int:
        return max((e.count for e in self.entries), default=0)


def is_valid_key(word: str) -> bool:
    """True if word has no space, ascii digit, hyphen or period."""
    return not any(ch in INVALID_KEY_CHARS for ch in word)


def parse_count(raw: str, line_num: int | None = None, line: str | None = None) -> int:
    """parse an unsigned base-10 count that fits in 32 bits."""
    if not COUNT_RE.fullmatch(raw):
        raise InvalidCount(f"count {raw!r} is not a non-negative integer", line_num, line)

    count = int(raw)
    if count > UINT32_MAX:
        raise InvalidCount(f"count {raw} does not fit in 32 bits", line_num, line)
    return count


def parse_line(line: str, *, filter_keys: bool = True, line_num: int | None = None) -> WordCount:
    """
    parse a single "<word> <count>" line.

    args:
        line: the line, without its newline
        filter_keys: if True, reject words with disallowed characters
        line_num: 1-based position, only used in error messages

    returns:
        the parsed WordCount

    raises:
        MalformedLine: no space in the line
        InvalidKey: word rejected by the key filter (callers usually skip)
        InvalidCount: count is not a valid uint32
    """
    word, sep, raw_count = line.partition(" ")
    if not sep:
        raise MalformedLine("no space found", line_num, line)

    # key check happens before the count is looked at
    if filter_keys and not is_valid_key(word):
        raise InvalidKey(f"invalid key {word!r}", line_num, line)

    return WordCount(word=word, count=parse_count(raw_count, line_num, line))


def parse(
    raw: bytes | str,
    *,
    filter_keys: bool = True,
    drop_partial_line: bool = False,
    encoding_errors: str = "strict",
    verbose: bool = False,
) -> ParseResult:
    """
    parse a whole frequency list.

    args:
        raw: list contents (bytes are decoded as utf-8)
        filter_keys: skip lines whose word fails is_valid_key
        drop_partial_line: if True, silently drop a last line that has
            no terminating newline instead of parsing it
        encoding_errors: bytes.decode error handler
        verbose: print parse stats

    returns:
        ParseResult with entries in input order and stats:
            total, kept, invalid_key, partial_dropped
    """
    text = decode_text(raw, errors=encoding_errors)

    lines = text.split("\n")
    # whatever follows the last newline; "" when the list ends cleanly
    partial = lines.pop()

    stats = {
        "total": 0,
        "kept": 0,
        "invalid_key": 0,
        "partial_dropped": 0,
    }

    if partial:
        if drop_partial_line:
            stats["partial_dropped"] = 1
        else:
            lines.append(partial)

    entries: list[WordCount] = []
    for line_num, line in enumerate(lines, 1):
        stats["total"] += 1
        if line.endswith("\r"):
            line = line[:-1]

        try:
            entry = parse_line(line, filter_keys=filter_keys, line_num=line_num)
        except InvalidKey:
            stats["invalid_key"] += 1
            continue

        entries.append(entry)
        stats["kept"] += 1

    if verbose:
        print("  parse stats:")
        print(f"    lines:             {stats['total']:,}")
        print(f"    kept:              {stats['kept']:,}")
        if filter_keys:
            print(f"    invalid keys:      {stats['invalid_key']:,}")
        if stats["partial_dropped"]:
            print("    partial last line dropped")

    return ParseResult(entries=entries, stats=stats)
