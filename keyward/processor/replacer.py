"""Text reassembly — swap matched spans for their clean words.

Given the original text and its matches, copies unmatched text verbatim
and substitutes each match's ``clean_word``. Clean words need not be the
same length as the keyword they replace: spans always index the original
text, so later offsets stay valid.
"""

from __future__ import annotations

from typing import Iterable

from keyward.processor.models import Match


def replace_spans(text: str, matches: Iterable[Match]) -> str:
    """Replace matched spans with their clean words.

    Uses forward string slicing, one pass over the matches.

    Args:
        text: The original text.
        matches: Non-overlapping matches sorted by start offset.

    Returns:
        The rewritten text. With no matches, ``text`` itself.
    """
    chunks: list[str] = []
    prev_end = 0
    for clean_word, start, end in matches:
        chunks.append(text[prev_end:start])
        chunks.append(clean_word)
        prev_end = end

    if not chunks:
        return text

    chunks.append(text[prev_end:])
    return "".join(chunks)
