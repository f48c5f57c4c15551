"""Keyword processor — the public entry point of the matching engine.

Owns one ``Trie`` plus the case and tokenization policies it was built
with, and exposes keyword registration, extraction and replacement. Both
the CLI and vocabulary files build on this class.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from keyward.processor.extractor import KeywordExtractor
from keyward.processor.models import Match, TokenizationPolicy
from keyward.processor.replacer import replace_spans
from keyward.processor.tokenizer import token_texts
from keyward.processor.trie import Trie


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


class KeywordProcessor:
    """Extracts and replaces registered keywords in text.

    Cost of a scan is proportional to the length of the text, not to the
    number of keywords. Keywords are token sequences: ``"New York"`` only
    matches the tokens ``"New"``, ``" "``, ``"York"`` in that order, never
    the inside of ``"New Yorker"``.

    Build first, then scan: registering keywords while an extraction
    iterator is still being consumed is unsupported.

    Args:
        case_sensitive: Compare tokens exactly (default) or after Unicode
            case folding.
        tokenization: How keywords and texts are split into tokens.
    """

    def __init__(
        self,
        case_sensitive: bool = True,
        tokenization: TokenizationPolicy = TokenizationPolicy.UNICODE_WORDS,
    ) -> None:
        self._tokenization = TokenizationPolicy(tokenization)
        self._trie = Trie(case_sensitive=case_sensitive)

    @property
    def case_sensitive(self) -> bool:
        return self._trie.case_sensitive

    @property
    def tokenization(self) -> TokenizationPolicy:
        return self._tokenization

    def __len__(self) -> int:
        """Number of keywords registered (not the number of trie nodes)."""
        return len(self._trie)

    def is_empty(self) -> bool:
        return len(self._trie) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeywordProcessor):
            return NotImplemented
        return self._tokenization == other._tokenization and self._trie == other._trie

    def __repr__(self) -> str:
        return (
            f"KeywordProcessor(case_sensitive={self.case_sensitive}, "
            f"tokenization={self._tokenization.value!r}, keywords={len(self)})"
        )

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.get_keyword(word) is not None

    # -------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------

    def add_keyword(self, word: str) -> None:
        """Register a keyword that extracts as itself."""
        self.add_keyword_with_clean_word(word, word)

    def add_keyword_with_clean_word(self, word: str, clean_word: str) -> None:
        """Register a keyword with the text it extracts and replaces as.

        Registering the same keyword again overwrites its clean word; the
        keyword count does not change. An empty keyword is ignored.

        Args:
            word: The keyword to look for.
            clean_word: Reported by extraction and substituted by
                replacement. May be empty.

        Raises:
            TypeError: If either argument is not a ``str``.
        """
        _require_str(word, "word")
        _require_str(clean_word, "clean_word")
        self._trie.insert(token_texts(word, self._tokenization), clean_word)

    def add_keywords_from_iter(self, words: Iterable[str]) -> None:
        for word in words:
            self.add_keyword(word)

    def add_keywords_with_clean_word_from_iter(
        self,
        pairs: Iterable[tuple[str, str]] | Mapping[str, str],
    ) -> None:
        """Register ``(word, clean_word)`` pairs, or a word -> clean word mapping."""
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for word, clean_word in pairs:
            self.add_keyword_with_clean_word(word, clean_word)

    # -------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------

    def get_keyword(self, word: str) -> str | None:
        """Return the clean word registered for ``word``, or ``None``.

        ``word`` must be a whole keyword; prefixes of keywords return
        ``None``.
        """
        _require_str(word, "word")
        return self._trie.lookup(token_texts(word, self._tokenization))

    def get_all_keywords(self) -> dict[str, str]:
        """Return every registered keyword mapped to its clean word.

        Keywords are rebuilt from trie keys, so a case-insensitive
        processor reports them case folded.
        """
        return {"".join(keys): clean for keys, clean in self._trie.iter_keywords()}

    # -------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------

    def extract_keywords(self, text: str) -> Iterator[str]:
        """Lazily yield the clean word of each match in ``text``."""
        return (match.clean_word for match in self.extract_keywords_with_span(text))

    def extract_keywords_with_span(self, text: str) -> KeywordExtractor:
        """Return a one-shot iterator of ``Match(clean_word, start, end)``.

        Offsets are character offsets into ``text``; ``text[start:end]``
        is the matched source text.

        Raises:
            TypeError: If ``text`` is not a ``str``.
        """
        _require_str(text, "text")
        return KeywordExtractor(text, self._trie, self._tokenization)

    def replace_keywords(self, text: str) -> str:
        """Return ``text`` with every match replaced by its clean word.

        Text outside matches is preserved exactly.
        """
        return replace_spans(text, self.extract_keywords_with_span(text))

    def extract_matches(self, text: str) -> list[Match]:
        """Eagerly collect all matches in ``text``."""
        return list(self.extract_keywords_with_span(text))
