"""Lookup command for querying the dictionary from the terminal."""

import asyncio
import json

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dictlookup.cli.utils.console import console, error_console
from dictlookup.services.dictionary import (
    DictionaryService,
    DictionaryServiceError,
    Language,
    LookupResult,
)


def lookup(
    word: str = typer.Argument(..., help="Word to look up"),
    language: str = typer.Option(
        Language.EN.value,
        "--language",
        "-l",
        help=f"Lookup language ({', '.join(Language.values())})",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
) -> None:
    """Look up a word and print its entry."""
    service = DictionaryService()
    try:
        result = asyncio.run(service.lookup(word, language))
    except DictionaryServiceError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    render_result(result)


def render_result(result: LookupResult) -> None:
    """Print a lookup result with Rich formatting."""
    console.print()
    pos = ", ".join(f"[pos]{escape(p)}[/]" for p in result.parts_of_speech) or "[dim]-[/]"
    console.print(Panel(f"[word]{escape(result.word)}[/]  {pos}", border_style="blue"))

    if result.pronunciations:
        pron_table = Table(title="Pronunciation", show_lines=False)
        pron_table.add_column("POS", style="pos")
        pron_table.add_column("Region")
        pron_table.add_column("Phonetic", style="phonetic", no_wrap=True)
        pron_table.add_column("Audio", style="dim", overflow="fold")
        for pron in result.pronunciations:
            pron_table.add_row(
                escape(pron.part_of_speech),
                escape(pron.region),
                escape(pron.phonetic),
                escape(pron.audio_url),
            )
        console.print(pron_table)

    for definition in result.definitions:
        console.print(f"[pos]{escape(definition.part_of_speech or '?')}[/] {escape(definition.text)}")
        if definition.translation:
            console.print(f"  [translation]{escape(definition.translation)}[/]")
        for example in definition.examples:
            console.print(f"  [dim]-[/] {escape(example.text)}")
            if example.translation:
                console.print(f"    [translation]{escape(example.translation)}[/]")

    if result.verbs:
        verb_table = Table(title="Verb forms")
        verb_table.add_column("Form")
        verb_table.add_column("Text", style="word")
        for verb in result.verbs:
            verb_table.add_row(escape(verb.form_type), escape(verb.text))
        console.print(verb_table)

    console.print()
