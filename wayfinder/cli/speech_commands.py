"""CLI commands for previewing text as it is sent to TTS."""

import typer
from rich.console import Console
from rich.table import Table

console = Console()


def normalize(
    text: str = typer.Argument(..., help="Text to normalize"),
    clean: bool = typer.Option(False, "--clean", help="Strip markdown first"),
):
    """Show how text will be spoken."""
    from wayfinder.speech import clean_text_for_speech, normalize_text_for_tts

    if clean:
        text = clean_text_for_speech(text)
    console.print(normalize_text_for_tts(text))


def chunk(
    text: str = typer.Argument(..., help="Text to split"),
    size: int = typer.Option(900, "--size", "-s", min=1, help="Maximum chunk size"),
):
    """Split text into TTS-sized chunks."""
    from wayfinder.speech import split_text_into_chunks

    chunks = split_text_into_chunks(text, size)
    table = Table(title=f"{len(chunks)} chunk(s)")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Chars", justify="right", style="green")
    table.add_column("Text", style="white")
    for i, part in enumerate(chunks, 1):
        table.add_row(str(i), str(len(part)), part)
    console.print(table)
