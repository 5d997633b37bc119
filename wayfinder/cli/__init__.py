"""Wayfinder CLI application."""

import typer

from wayfinder.cli.query_commands import analyze, court_analyze, lookup
from wayfinder.cli.speech_commands import chunk, normalize

app = typer.Typer(
    name="wayfinder",
    help="Wayfinder - college and court voice assistant CLI",
    no_args_is_help=True,
)

# Offline inspection commands
app.command("analyze")(analyze)
app.command("court-analyze")(court_analyze)
app.command("lookup")(lookup)
app.command("normalize")(normalize)
app.command("chunk")(chunk)


@app.command()
def version():
    """Show version information."""
    from wayfinder.config import get_settings

    settings = get_settings()
    typer.echo(f"Wayfinder v{settings.app_version}")


@app.command()
def info():
    """Show application information."""
    from wayfinder.config import get_settings

    settings = get_settings()

    typer.echo(f"Application: Wayfinder v{settings.app_version}")
    typer.echo(f"Environment: {settings.env}")
    typer.echo(f"LLM Providers: {' -> '.join(settings.provider_chain)}")
    typer.echo(f"College: {settings.college_name}")
    typer.echo(f"Court: {settings.court_name}")


if __name__ == "__main__":
    app()
