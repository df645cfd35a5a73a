"""
exceptions raised by freqscore.

everything derives from FreqScoreError (a ValueError), so callers that
only care about "bad input" can catch one thing.
"""


class FreqScoreError(ValueError):
    """base class for all freqscore input errors."""


class TextDecodeError(FreqScoreError):
    """raw bytes could not be decoded as utf-8."""


class ParseError(FreqScoreError):
    """a frequency-list line could not be parsed.

    line_num is 1-based; line is the offending text without its newline.
    """

    def __init__(self, message: str, line_num: int | None = None, line: str | None = None):
        self.line_num = line_num
        self.line = line
        if line_num is not None:
            message = f"line {line_num}: {message}"
        super().__init__(message)


class MalformedLine(ParseError):
    """the line has no space separating word and count."""


class InvalidCount(ParseError):
    """the count is not a base-10 integer in [0, 2**32 - 1]."""


class ZeroCount(InvalidCount):
    """a count of 0 was fed to a reciprocal formula."""


class InvalidKey(ParseError):
    """the word contains a filtered character.

    parse() treats this as "skip the line", never as a failure.
    """


class NoWordsFound(FreqScoreError):
    """no word of the text is present in the word map (average only)."""


class ArtifactError(FreqScoreError):
    """a generated word-map artifact is missing fields or inconsistent."""
