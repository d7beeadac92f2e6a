"""CLI entry point for castfeed."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from castfeed.config.logging import setup_logging
from castfeed.config.manager import ConfigManager
from castfeed.feeds.channel import Channel
from castfeed.utils.errors import CastfeedError, ConfigError, MissingAttributeError

app = typer.Typer(
    name="castfeed",
    help="Build podcast RSS feeds from local audio files",
    no_args_is_help=True,
)
console = Console()
# Status output goes to stderr so the feed can be piped from stdout
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """castfeed - Build podcast RSS feeds from local audio files."""
    setup_logging(verbose=verbose, log_file=log_file)


def _load_channel(
    sources: list[Path],
    channel_file: Path | None,
    overrides: dict[str, str | None],
) -> Channel:
    manager = ConfigManager(channel_file=channel_file)
    attributes = manager.load_attributes(sources, overrides)
    return Channel(sources, attributes)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from castfeed import __version__

    console.print(f"[bold cyan]castfeed[/bold cyan] v{__version__}")


@app.command("build")
def build_feed(
    sources: list[Path] = typer.Argument(..., help="Episode files or directories"),
    channel_file: Path | None = typer.Option(
        None, "--channel", "-c", help="Channel file (default: channel.yml next to the first source)"
    ),
    title: str | None = typer.Option(None, "--title", help="Podcast title"),
    url: str | None = typer.Option(None, "--url", help="Podcast URL"),
    description: str | None = typer.Option(None, "--description", help="Podcast description"),
    author: str | None = typer.Option(None, "--author", help="Default episode author"),
    image_url: str | None = typer.Option(None, "--image-url", help="Channel artwork URL"),
    enclosures_url: str | None = typer.Option(
        None, "--enclosures-url", help="Base URL of the episode files"
    ),
    channel_template: str | None = typer.Option(
        None, "--channel-template", help="Channel template file or name"
    ),
    episode_template: str | None = typer.Option(
        None, "--episode-template", help="Episode template file or name"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to a file instead of stdout"
    ),
) -> None:
    """Build an RSS feed from episode files.

    Examples:
        castfeed build episodes/ > feed.rss

        castfeed build episodes/ --url https://example.com/podcast/ -o feed.rss
    """
    overrides = {
        "title": title,
        "url": url,
        "description": description,
        "author": author,
        "image_url": image_url,
        "enclosures_url": enclosures_url,
        "channel_template": channel_template,
        "episode_template": episode_template,
    }

    try:
        channel = _load_channel(sources, channel_file, overrides)
        collection = channel.collect()
        rss = channel.to_rss(collection.episodes)

        if output is None:
            typer.echo(rss, nl=False)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(rss, encoding="utf-8")
            err_console.print(
                f"[green]✓[/green] Wrote {len(collection.episodes)} episode(s) "
                f"to {escape(str(output))}"
            )

        for error in collection.errors:
            err_console.print(
                f"[yellow]![/yellow] Skipped {escape(str(error.path))}: {escape(error.message)}"
            )

    except MissingAttributeError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        err_console.print(
            f"[dim]  Set '{e.attribute}' in channel.yml or pass --{e.attribute}[/dim]"
        )
        sys.exit(1)
    except CastfeedError as e:
        err_console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@app.command("episodes")
def list_episodes(
    sources: list[Path] = typer.Argument(..., help="Episode files or directories"),
    channel_file: Path | None = typer.Option(
        None, "--channel", "-c", help="Channel file (default: channel.yml next to the first source)"
    ),
    url: str | None = typer.Option(None, "--url", help="Podcast URL"),
) -> None:
    """List the episodes a feed would contain, newest first."""
    try:
        channel = _load_channel(sources, channel_file, {"url": url})
        collection = channel.collect()

        if not collection.episodes:
            console.print("[yellow]No episodes found.[/yellow]")
        else:
            table = Table(title=f"[bold]{escape(channel.title)}[/bold]")
            table.add_column("Published", style="green", no_wrap=True)
            table.add_column("Title", style="cyan")
            table.add_column("Artist", style="yellow")
            table.add_column("Duration", justify="right")
            table.add_column("URL", style="blue")

            for episode in collection.episodes:
                table.add_row(
                    episode.pub_date.strftime("%Y-%m-%d"),
                    escape(episode.title),
                    escape(episode.artist or "—"),
                    episode.duration_formatted,
                    escape(episode.url),
                )

            console.print(table)
            console.print(f"\n[dim]Total: {len(collection.episodes)} episode(s)[/dim]")

        for error in collection.errors:
            err_console.print(
                f"[yellow]![/yellow] Skipped {escape(str(error.path))}: {escape(error.message)}"
            )

    except CastfeedError as e:
        err_console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@app.command("init")
def init_channel(
    directory: Path = typer.Argument(Path("."), help="Directory for channel.yml"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a starter channel.yml."""
    try:
        path = ConfigManager().write_default(directory, overwrite=force)
        console.print(f"[green]✓[/green] Created {escape(str(path))}")
    except ConfigError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    app()
