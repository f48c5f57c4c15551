"""keyward CLI entry point.

Provides the `keyward` command with subcommands:
  - extract: List the keywords found in a text file
  - replace: Rewrite a text file with keywords swapped for their clean words
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from keyward import __version__
from keyward.processor.models import TokenizationPolicy
from keyward.processor.processor import KeywordProcessor

app = typer.Typer(
    name="keyward",
    help="Extract and replace large keyword vocabularies in text, in time linear in the text.",
    no_args_is_help=True,
)

# Diagnostics go to stderr — stdout is reserved for results
_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"keyward {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """keyward — Linear-time keyword extraction and replacement."""


def _error(message: str) -> typer.Exit:
    _console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
    return typer.Exit(1)


def _build_processor(
    vocab: Path,
    case_insensitive: bool,
    tokenization: str | None,
) -> KeywordProcessor:
    """Load a vocabulary file and build its processor, applying CLI overrides."""
    from keyward.vocab.loader import VocabularyValidationError, load_vocabulary

    policy: TokenizationPolicy | None = None
    if tokenization is not None:
        try:
            policy = TokenizationPolicy(tokenization)
        except ValueError:
            supported = ", ".join(p.value for p in TokenizationPolicy)
            raise _error(
                f"Unknown tokenization {tokenization!r}. Supported: {supported}"
            ) from None

    try:
        vocabulary = load_vocabulary(vocab)
    except (FileNotFoundError, VocabularyValidationError) as e:
        raise _error(str(e)) from None

    return vocabulary.build_processor(
        case_sensitive=False if case_insensitive else None,
        tokenization=policy,
    )


def _read_text(path: Path, errors: str = "replace") -> str:
    if not path.is_file():
        raise _error(f"File not found: {path}")
    return path.read_text(encoding="utf-8", errors=errors)


_VocabOption = Annotated[
    Path,
    typer.Option(
        "--vocab",
        "-k",
        help="Keyword file: YAML vocabulary, or plain text with one keyword per line "
        "('word => clean word' sets a replacement).",
    ),
]
_CaseInsensitiveOption = Annotated[
    bool,
    typer.Option(
        "--case-insensitive",
        "-i",
        help="Match keywords ignoring case. Overrides the vocabulary file.",
    ),
]
_TokenizationOption = Annotated[
    Optional[str],
    typer.Option(
        "--tokenization",
        "-t",
        help="Tokenization policy: 'unicode_words' or 'grouped_runs'. "
        "Overrides the vocabulary file.",
    ),
]


@app.command()
def extract(
    text_file: Annotated[Path, typer.Argument(help="Text file to scan.")],
    vocab: _VocabOption,
    case_insensitive: _CaseInsensitiveOption = False,
    tokenization: _TokenizationOption = None,
    output_json: Annotated[
        bool,
        typer.Option("--json", help="Print matches with spans as JSON."),
    ] = False,
    report: Annotated[
        bool,
        typer.Option("--report", help="Show a per-keyword summary table on stderr."),
    ] = False,
) -> None:
    """Print the clean word of every keyword found in TEXT_FILE, one per line.

    Examples:
      keyward extract notes.txt --vocab skills.yaml
      keyward extract notes.txt --vocab skills.txt --case-insensitive --report
      keyward extract notes.txt --vocab skills.yaml --json > matches.json
    """
    from keyward.report import matches_to_json, print_match_report

    processor = _build_processor(vocab, case_insensitive, tokenization)
    text = _read_text(text_file)
    matches = processor.extract_matches(text)

    if output_json:
        payload = matches_to_json(text, matches, len(processor))
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for m in matches:
            typer.echo(m.clean_word)

    if report:
        print_match_report(matches, len(processor), _console)


@app.command()
def replace(
    text_file: Annotated[Path, typer.Argument(help="Text file to rewrite.")],
    vocab: _VocabOption,
    case_insensitive: _CaseInsensitiveOption = False,
    tokenization: _TokenizationOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the result to this file instead of stdout.",
        ),
    ] = None,
) -> None:
    """Replace every keyword in TEXT_FILE with its clean word.

    Text outside matched keywords is copied unchanged.

    Examples:
      keyward replace post.md --vocab brands.yaml
      keyward replace post.md --vocab brands.yaml --output clean/post.md
    """
    from keyward.processor.replacer import replace_spans

    processor = _build_processor(vocab, case_insensitive, tokenization)
    # Undecodable bytes round-trip as lone surrogates and are written back as-is.
    text = _read_text(text_file, errors="surrogateescape")
    matches = processor.extract_matches(text)
    replaced = replace_spans(text, matches)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(replaced, encoding="utf-8", errors="surrogateescape")
        _console.print(
            f"[#00ff88]✓[/#00ff88] Replaced {len(matches)} keyword(s). Written to {output}",
            highlight=False,
        )
    else:
        typer.echo(replaced.encode("utf-8", "surrogateescape"), nl=False)
