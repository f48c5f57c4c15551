"""Data models for the keyword matching engine.

Pure data structures — no I/O, no external dependencies.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class TokenizationPolicy(str, Enum):
    """How text is split into tokens.

    UNICODE_WORDS: Unicode default word boundaries (UAX #29). Every
                   punctuation mark is a token of its own.
    GROUPED_RUNS: Maximal runs of one character class — word characters,
                  whitespace, or anything else — form one token.

    A keyword only matches text tokenized with the same policy it was
    registered under.
    """

    UNICODE_WORDS = "unicode_words"
    GROUPED_RUNS = "grouped_runs"


class Token(NamedTuple):
    """One token of a text, positioned by character offset.

    Attributes:
        offset: Start character offset in the source text.
        text: The token text, exactly as it appears in the source.
    """

    offset: int
    text: str

    @property
    def end(self) -> int:
        """Character offset one past the last character of the token."""
        return self.offset + len(self.text)


class Match(NamedTuple):
    """A keyword occurrence found in text.

    Unpacks as ``(clean_word, start, end)``.

    Attributes:
        clean_word: The replacement text registered for the keyword.
        start: Start character offset in the source text.
        end: End character offset (exclusive) in the source text.
    """

    clean_word: str
    start: int
    end: int
