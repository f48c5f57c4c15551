"""Vocabulary loading and validation.

Loads keyword files, validates them against the pydantic schema, and
returns ``Vocabulary`` objects. Two formats are accepted:

  - ``.yaml`` / ``.yml``: a mapping validated against ``Vocabulary``.
  - anything else: plain text, one keyword per line. Blank lines and
    lines starting with ``#`` are skipped; ``word => clean word`` sets a
    replacement.

Errors are always actionable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from keyward.vocab.schema import Vocabulary

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})
_ARROW = "=>"


class VocabularyValidationError(Exception):
    """Raised when a vocabulary file is malformed or fails validation.

    Attributes:
        path: The path to the vocabulary file that failed validation.
        details: Structured error details (pydantic errors or our own).
    """

    def __init__(self, path: Path, details: list[dict[str, Any]], message: str) -> None:
        self.path = path
        self.details = details
        super().__init__(message)


def load_vocabulary(path: Path) -> Vocabulary:
    """Load and validate a vocabulary file.

    Args:
        path: Path to a YAML or plain-text keyword file.

    Returns:
        A validated ``Vocabulary``.

    Raises:
        FileNotFoundError: If the file doesn't exist (with actionable message).
        VocabularyValidationError: If the file is malformed or fails validation.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Vocabulary file not found at {path}. "
            f"Pass a YAML or plain-text keyword list with --vocab."
        )

    raw_text = path.read_text(encoding="utf-8")

    if path.suffix.lower() in _YAML_SUFFIXES:
        raw_data = _parse_yaml(path, raw_text)
    else:
        raw_data = _parse_plain_text(path, raw_text)

    return _validate(path, raw_data)


def _parse_yaml(path: Path, raw_text: str) -> dict[str, Any]:
    try:
        raw_data = yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise VocabularyValidationError(
            path=path,
            details=[{"type": "yaml_parse_error", "msg": str(e)}],
            message=f"Failed to parse YAML in {path}: {e}",
        ) from e

    if raw_data is None:
        raise VocabularyValidationError(
            path=path,
            details=[{"type": "empty_file"}],
            message=f"Vocabulary file {path} is empty. It must contain at least a 'version' field.",
        )

    if not isinstance(raw_data, dict):
        raise VocabularyValidationError(
            path=path,
            details=[{"type": "not_a_mapping", "got": type(raw_data).__name__}],
            message=(
                f"Vocabulary file {path} must contain a YAML mapping (key-value pairs) "
                f"at the top level, got {type(raw_data).__name__}."
            ),
        )

    return raw_data


def _parse_plain_text(path: Path, raw_text: str) -> dict[str, Any]:
    """Turn a one-keyword-per-line file into raw vocabulary data."""
    keywords: list[str] = []
    replacements: dict[str, str] = {}

    for lineno, line in enumerate(raw_text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if _ARROW in stripped:
            word, _, clean_word = stripped.partition(_ARROW)
            word = word.strip()
            if not word:
                raise VocabularyValidationError(
                    path=path,
                    details=[{"type": "empty_keyword", "line": lineno}],
                    message=f"{path}:{lineno}: missing keyword before '{_ARROW}'.",
                )
            replacements[word] = clean_word.strip()
        else:
            keywords.append(stripped)

    if not keywords and not replacements:
        raise VocabularyValidationError(
            path=path,
            details=[{"type": "empty_file"}],
            message=f"Vocabulary file {path} contains no keywords.",
        )

    return {"version": "1.0", "keywords": keywords, "replacements": replacements}


def _validate(path: Path, raw_data: dict[str, Any]) -> Vocabulary:
    try:
        return Vocabulary.model_validate(raw_data)
    except ValidationError as e:
        error_details = e.errors()
        error_lines = []
        for err in error_details:
            loc = " → ".join(str(part) for part in err["loc"])
            error_lines.append(f"  - {loc}: {err['msg']}")

        summary = "\n".join(error_lines)
        raise VocabularyValidationError(
            path=path,
            details=error_details,
            message=f"Vocabulary validation failed for {path}:\n{summary}",
        ) from e
