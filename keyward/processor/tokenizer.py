"""Text tokenizer.

Splits text into an ordered sequence of ``Token(offset, text)`` values
that covers the input exactly: concatenating the token texts rebuilds the
original string, and offsets are strictly increasing.

Uses the third-party ``regex`` module, whose WORD flag gives ``\\b`` the
Unicode default word boundary semantics (UAX #29).
"""

from __future__ import annotations

from typing import Iterator

import regex

from keyward.processor.models import Token, TokenizationPolicy

# -----------------------------------------------------------------------
# Pre-compiled patterns
# -----------------------------------------------------------------------

# Shortest non-empty run of characters ending on a default word boundary.
# DOTALL so newlines are tokens like any other character.
_UNICODE_WORDS_RE = regex.compile(r"(?ws).+?(?:\b|\Z)")

# One run of word characters, whitespace, or anything else. The three
# alternatives are exhaustive, so every character lands in some token.
_GROUPED_RUNS_RE = regex.compile(r"\w+|\s+|[^\w\s]+")

_PATTERNS: dict[TokenizationPolicy, regex.Pattern[str]] = {
    TokenizationPolicy.UNICODE_WORDS: _UNICODE_WORDS_RE,
    TokenizationPolicy.GROUPED_RUNS: _GROUPED_RUNS_RE,
}


def tokenize(
    text: str,
    policy: TokenizationPolicy = TokenizationPolicy.UNICODE_WORDS,
) -> Iterator[Token]:
    """Split text into tokens.

    Args:
        text: The input text.
        policy: Which tokenization policy to apply.

    Yields:
        Tokens in order of appearance. Empty text yields nothing.
    """
    for m in _PATTERNS[policy].finditer(text):
        yield Token(m.start(), m.group())


def token_texts(
    text: str,
    policy: TokenizationPolicy = TokenizationPolicy.UNICODE_WORDS,
) -> list[str]:
    """Return just the token strings of ``text``, in order."""
    return [tok.text for tok in tokenize(text, policy)]
