"""CLI commands for inspecting query analysis and the court directory."""

import json
from dataclasses import asdict

import typer
from rich.console import Console
from rich.table import Table

console = Console()


def _flags_table(title: str, values: dict) -> Table:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for name, value in values.items():
        table.add_row(name, str(value))
    return table


def analyze(
    query: str = typer.Argument(..., help="College question to analyze"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """Show detected topics and the data fetch plan for a college question."""
    from wayfinder.core.query_analyzer import (
        analyze_query_topics,
        classify_query_intent,
        get_data_fetch_strategy,
        is_college_relevant,
    )

    analysis = analyze_query_topics(query)
    strategy = get_data_fetch_strategy(analysis)

    if format == "json":
        console.print_json(
            json.dumps(
                {
                    "relevant": is_college_relevant(query),
                    "intent": classify_query_intent(query).value,
                    "topics": analysis.topics.active(),
                    "entities": analysis.entity_mentions,
                    "needs_detailed_info": analysis.needs_detailed_info,
                    "strategy": asdict(strategy),
                }
            )
        )
        return

    console.print(f"[bold]Relevant:[/bold] {is_college_relevant(query)}")
    console.print(f"[bold]Intent:[/bold] {classify_query_intent(query)}")
    console.print(f"[bold]Topics:[/bold] {', '.join(analysis.topics.active())}")
    console.print(f"[bold]Detailed:[/bold] {analysis.needs_detailed_info}")
    console.print(_flags_table("Fetch Strategy", asdict(strategy)))


def court_analyze(
    query: str = typer.Argument(..., help="Court question to analyze"),
):
    """Show detected topics and the data fetch plan for a court question."""
    from wayfinder.core.court_query_analyzer import (
        analyze_court_query,
        extract_image_search_keywords,
        get_court_data_fetch_strategy,
    )

    analysis = analyze_court_query(query)
    strategy = get_court_data_fetch_strategy(analysis)

    console.print(f"[bold]Topics:[/bold] {', '.join(analysis.topics.active())}")
    if analysis.entity_mentions:
        console.print(f"[bold]Entities:[/bold] {analysis.entity_mentions}")
    keywords = extract_image_search_keywords(query)
    if keywords:
        console.print(f"[bold]Image keywords:[/bold] {', '.join(keywords)}")
    console.print(_flags_table("Fetch Strategy", asdict(strategy)))


def lookup(
    query: str = typer.Argument(..., help="Court question to match"),
):
    """Match a question against the static court directory."""
    from wayfinder.config import get_settings
    from wayfinder.core.court_directory import CourtDirectory
    from wayfinder.core.exception import CourtDirectoryError

    try:
        directory = CourtDirectory(get_settings().court_directory_path)
    except CourtDirectoryError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    result = directory.lookup(query)
    if not result.matched:
        console.print("[yellow]No static match; the LLM would answer this[/yellow]")
        raise typer.Exit(1)

    console.print(f"[bold]Match:[/bold] {result.kind}")
    if result.room_number is not None:
        console.print(f"[bold]Room:[/bold] {result.room_number}")
    if result.building is not None:
        console.print(f"[bold]Building:[/bold] {result.building.name}")
        console.print(f"[bold]Image:[/bold] {result.image_url}")
    console.print(f"\n{result.response_text}")
    console.print(f"\n[dim]Spoken:[/dim] {result.spoken_text}")
