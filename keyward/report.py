"""Rich CLI output for extraction results.

Renders per-keyword match counts as a terminal table, and builds the JSON
payload printed by ``keyward extract --json``.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from keyward.processor.models import Match


def summarize_matches(matches: list[Match]) -> dict[str, int]:
    """Count matches per clean word, in order of first appearance."""
    counts: dict[str, int] = {}
    for m in matches:
        counts[m.clean_word] = counts.get(m.clean_word, 0) + 1
    return counts


def matches_to_json(text: str, matches: list[Match], keyword_count: int) -> dict[str, Any]:
    """Build the JSON-serialisable extraction payload.

    Args:
        text: The scanned text (used to report the matched source text).
        matches: Matches found in ``text``.
        keyword_count: Number of keywords the processor holds.

    Returns:
        A dict with counts, the per-keyword summary and every match.
    """
    return {
        "keyword_count": keyword_count,
        "match_count": len(matches),
        "summary": summarize_matches(matches),
        "matches": [
            {
                "clean_word": m.clean_word,
                "text": text[m.start:m.end],
                "start": m.start,
                "end": m.end,
            }
            for m in matches
        ],
    }


def print_match_report(matches: list[Match], keyword_count: int, console: Console) -> None:
    """Render a summary table of matches.

    Args:
        matches: Matches found in the scanned text.
        keyword_count: Number of keywords the processor holds.
        console: Rich console to print to (should be stderr).
    """
    if not matches:
        console.print(
            f"[dim]No keywords found ({keyword_count} keyword(s) loaded).[/dim]",
            highlight=False,
        )
        return

    first_span: dict[str, tuple[int, int]] = {}
    for m in matches:
        first_span.setdefault(m.clean_word, (m.start, m.end))

    table = Table(title="Keyword Summary", show_lines=False)
    table.add_column("Keyword", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("First span", style="dim")

    for clean_word, count in summarize_matches(matches).items():
        start, end = first_span[clean_word]
        table.add_row(escape(clean_word) or "[dim](empty)[/dim]", str(count), f"{start}–{end}")

    console.print(table)
    console.print(
        f"[bold]Total:[/bold] {len(matches)} match(es) of "
        f"{len(first_span)} distinct keyword(s), {keyword_count} loaded",
        highlight=False,
    )
