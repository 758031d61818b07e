import asyncio

import click
from rich.console import Console
from rich.table import Table

from dailygrid.config import Config
from dailygrid.constants import SUGGEST_DEFAULT_LIMIT
from dailygrid.logging import configure_logging, uvicorn_log_config
from dailygrid.search import SearchPage, SuggestionResults, clamp_limit
from dailygrid.server.runtime import Runtime

console = Console()


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx):
    """dailygrid - Daily Grid search service"""
    try:
        ctx.ensure_object(dict)
        ctx.obj["config"] = Config()
    except ValueError as e:
        # Only fail if we're running a command that needs config
        ctx.obj["config_error"] = str(e)

    if ctx.invoked_subcommand is None:
        console.print("[bold]dailygrid[/bold] - Daily Grid search service\n")
        console.print("Run [cyan]dailygrid serve[/cyan] to start the server.")
        console.print("\nUse [cyan]dailygrid --help[/cyan] for all commands.")


def _require_config(ctx) -> Config:
    if "config_error" in ctx.obj:
        console.print(f"[red]Error:[/red] {ctx.obj['config_error']}")
        raise SystemExit(1)
    return ctx.obj["config"]


@main.command()
@click.pass_context
def status(ctx):
    """Show current configuration."""
    config = _require_config(ctx)

    console.print("[bold]dailygrid status[/bold]")
    console.print()
    console.print(f"Database: [cyan]{config.database_path}[/cyan]")
    exists = config.database_path.exists()
    console.print(f"Database exists: {'[green]yes[/green]' if exists else '[yellow]no[/yellow]'}")
    console.print(f"Suggestion fetch limit: {config.suggest_fetch_limit} per source")
    console.print(f"Search page fetch limit: {config.page_fetch_limit} per source")
    console.print(f"Search page display limit: {config.page_display_limit} per section")


@main.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8000, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx, host: str, port: int, reload: bool):
    """Start the search API server."""
    config = _require_config(ctx)

    import uvicorn

    console.print(f"[bold]dailygrid server[/bold] starting on http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]")
    console.print()

    uvicorn.run(
        "dailygrid.server.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=uvicorn_log_config(config.log_level, config.log_json),
    )


@main.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the database schema."""
    config = _require_config(ctx)

    async def run():
        runtime = Runtime(config=config)
        await runtime.connect()
        await runtime.close()

    asyncio.run(run())
    console.print(f"[green]Schema ready[/green] at {config.database_path}")


@main.command()
@click.argument("query")
@click.option("--limit", default=SUGGEST_DEFAULT_LIMIT, help="Number of suggestions (1-20)")
@click.option("--user", "user_id", default=None, help="Include this user's plays, stats and badges")
@click.option("--full", is_flag=True, help="Show the full search page instead of suggestions")
@click.pass_context
def search(ctx, query: str, limit: int, user_id: str | None, full: bool):
    """Run a search against the local database."""
    config = _require_config(ctx)
    configure_logging(config.log_level, config.log_json)

    async def run():
        runtime = Runtime(config=config)
        await runtime.connect()
        try:
            if full:
                return await runtime.search.search_page(query, user_id=user_id)
            return await runtime.search.suggest(query, limit=clamp_limit(limit), user_id=user_id)
        finally:
            await runtime.close()

    result = asyncio.run(run())
    if isinstance(result, SearchPage):
        _print_page(result)
    else:
        _print_suggestions(result)


def _print_errors(errors: dict[str, str]) -> None:
    for source, message in errors.items():
        console.print(f"[yellow]Source {source} could not be searched:[/yellow] {message}")


def _print_suggestions(found: SuggestionResults) -> None:
    _print_errors(found.errors)
    if not found.results:
        console.print("[dim]No matches found.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Kind", style="cyan")
    table.add_column("Title")
    table.add_column("Subtitle", style="dim")
    table.add_column("Link")
    for s in found.results:
        table.add_row(s.kind, s.title, s.subtitle, s.href)
    console.print(table)


def _print_page(page: SearchPage) -> None:
    _print_errors(page.errors)
    if not page.has_results:
        console.print("[dim]No matches found. Try a username, date (YYYY-MM-DD), keyword, or score value.[/dim]")
        return

    counts = page.counts
    console.print(
        f"[bold]{counts['total']}[/bold] matches for [cyan]{page.query}[/cyan] "
        f"(forum {counts['forum']}, puzzle history {counts['puzzle_history']}, "
        f"profiles + badges {counts['profiles_and_badges']})"
    )

    for name, results in page.sections.items():
        if not results:
            continue
        table = Table(title=name.replace("_", " ").title(), show_header=True, header_style="bold")
        table.add_column("Score", justify="right")
        table.add_column("Record")
        for r in results:
            table.add_row(str(r.score), r.record.model_dump_json())
        console.print(table)

    if page.stats:
        console.print(f"[bold]My stats[/bold] (score {page.stats.score}): {page.stats.record.model_dump_json()}")


if __name__ == "__main__":
    main()
