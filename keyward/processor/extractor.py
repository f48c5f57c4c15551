"""Longest-match keyword extractor.

Walks the token sequence of a text against a ``Trie`` and yields one
``Match`` per ``next()`` call. At each scan position the longest keyword
wins; shorter keywords nested inside it are not reported, and matches
never overlap.

The extractor is a one-shot iterator: consuming it advances internal
state, and a fresh scan needs a fresh extractor. It only reads the trie.
"""

from __future__ import annotations

from enum import Enum

from keyward.processor.models import Match, Token, TokenizationPolicy
from keyward.processor.tokenizer import tokenize
from keyward.processor.trie import Trie


class ScanState(str, Enum):
    """Where the extractor is in its scan.

    SCANNING: More matches may follow; the next call resumes the scan.
    EXHAUSTED: All tokens consumed and nothing left to emit.

    A match held while an attempt is still being extended lives only
    inside one ``next()`` call, so it is not a state of the iterator.
    """

    SCANNING = "scanning"
    EXHAUSTED = "exhausted"


class KeywordExtractor:
    """Iterator of non-overlapping longest matches, left to right.

    Args:
        text: The text to scan.
        trie: The keyword trie to match against.
        tokenization: Must be the policy the trie's keywords were
            tokenized with.
    """

    def __init__(
        self,
        text: str,
        trie: Trie,
        tokenization: TokenizationPolicy = TokenizationPolicy.UNICODE_WORDS,
    ) -> None:
        self._tokens: list[Token] = list(tokenize(text, tokenization))
        self._trie = trie
        self._idx = 0
        self._state = ScanState.SCANNING if self._tokens else ScanState.EXHAUSTED

    @property
    def state(self) -> ScanState:
        return self._state

    def __iter__(self) -> KeywordExtractor:
        return self

    def __next__(self) -> Match:
        if self._state is ScanState.EXHAUSTED:
            raise StopIteration
        match = self._scan()
        if match is None:
            self._state = ScanState.EXHAUSTED
            raise StopIteration
        return match

    def __length_hint__(self) -> int:
        # Every match consumes at least one token.
        if self._state is ScanState.EXHAUSTED:
            return 0
        return len(self._tokens) - self._idx

    def _scan(self) -> Match | None:
        """Run one attempt sequence and return the next match, if any.

        An attempt starts at ``start`` and follows trie edges token by
        token, holding on to the last terminal it passed. When the chain
        breaks with a match held, the breaking token is given back and the
        match is emitted. An attempt that found nothing is restarted one
        token after its start. Running out of tokens emits whatever match
        is held, or ends the scan.
        """
        tokens = self._tokens
        n_tokens = len(tokens)
        root = self._trie.root

        node = root
        start = self._idx
        longest: Match | None = None

        while self._idx < n_tokens:
            token = tokens[self._idx]
            self._idx += 1

            child = self._trie.child(node, token.text)
            if child is not None:
                node = child
                if child.clean_word is not None:
                    longest = Match(child.clean_word, tokens[start].offset, token.end)
                continue

            if longest is not None:
                self._idx -= 1
                return longest

            # Dead end: retry from the token after this attempt's start.
            self._idx = start + 1
            node = root
            start = self._idx

        return longest
