"""Pydantic v2 models for keyward vocabulary files.

A vocabulary is the keyword list a ``KeywordProcessor`` is rebuilt from on
every run, plus the case and tokenization policies to build it with.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keyward.processor.models import TokenizationPolicy
from keyward.processor.processor import KeywordProcessor

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class Vocabulary(BaseModel):
    """Top-level model for a vocabulary file.

    ``keywords`` lists words that extract as themselves; ``replacements``
    maps words to the clean word they extract and replace as. Either may
    be omitted.
    """

    model_config = ConfigDict(extra="forbid")

    version: str
    case_sensitive: bool = True
    tokenization: TokenizationPolicy = TokenizationPolicy.UNICODE_WORDS
    keywords: list[str] = Field(default_factory=list)
    replacements: dict[str, str] = Field(
        default_factory=dict,
        description="Keyword -> clean word. Applied after `keywords`, so an "
        "entry here wins over the same word listed in `keywords`.",
    )

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, value: Any) -> Any:
        """Accept an unquoted YAML ``version: 1.0``."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            msg = (
                f"Unsupported vocabulary version {value!r}. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
            raise ValueError(msg)
        return value

    @field_validator("keywords")
    @classmethod
    def check_keywords(cls, value: list[str]) -> list[str]:
        for i, word in enumerate(value):
            if not word:
                msg = f"Keyword #{i + 1} is empty"
                raise ValueError(msg)
        return value

    @field_validator("replacements")
    @classmethod
    def check_replacements(cls, value: dict[str, str]) -> dict[str, str]:
        if "" in value:
            msg = "Replacement keys must be non-empty keywords"
            raise ValueError(msg)
        return value

    @property
    def keyword_total(self) -> int:
        """Number of entries in the file (duplicates included)."""
        return len(self.keywords) + len(self.replacements)

    def build_processor(
        self,
        *,
        case_sensitive: bool | None = None,
        tokenization: TokenizationPolicy | None = None,
    ) -> KeywordProcessor:
        """Build a ``KeywordProcessor`` from this vocabulary.

        Args:
            case_sensitive: Overrides the file's ``case_sensitive``.
            tokenization: Overrides the file's ``tokenization``.

        Returns:
            A processor holding every keyword in the file.
        """
        processor = KeywordProcessor(
            case_sensitive=self.case_sensitive if case_sensitive is None else case_sensitive,
            tokenization=self.tokenization if tokenization is None else tokenization,
        )
        processor.add_keywords_from_iter(self.keywords)
        processor.add_keywords_with_clean_word_from_iter(self.replacements)
        return processor
