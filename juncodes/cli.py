"""CLI entry point for juncodes content tooling."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from juncodes.blog import Post, find_all_blogs, find_blog_by_slug
from juncodes.config import SiteConfig, load_config
from juncodes.config.loader import DEFAULT_CONFIG_TEMPLATE
from juncodes.dates import format_date, format_period
from juncodes.errors import ContentError
from juncodes.jobs import find_all_jobs

app = typer.Typer(
    name="juncodes",
    help="Inspect and validate the website's markdown content.",
)

config_app = typer.Typer(help="Manage juncodes configuration.")
app.add_typer(config_app, name="config")

blog_app = typer.Typer(help="Blog posts.")
app.add_typer(blog_app, name="blog")

jobs_app = typer.Typer(help="Job history.")
app.add_typer(jobs_app, name="jobs")

# Global state
_config: SiteConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> SiteConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to juncodes.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=_LOG_LEVELS[_config.log_level],
        format="%(levelname)s %(name)s: %(message)s",
    )


def _display_post(post: Post) -> None:
    m = post.metadata
    tags = ", ".join(m.tags) if m.tags else "-"
    panel_text = (
        f"[bold]{escape(m.title)}[/bold]\n"
        f"{escape(m.description)}\n\n"
        f"[dim]Slug:[/dim]      {escape(post.slug)}\n"
        f"[dim]Published:[/dim] {format_date(m.date)}"
        f"{'' if m.published else ' [yellow](draft)[/yellow]'}\n"
        f"[dim]Tags:[/dim]      {escape(tags)}\n"
        f"[dim]Reading:[/dim]   {int(m.reading_time)} minute read"
    )
    rprint(Panel(panel_text, title="Post", border_style="blue"))


@blog_app.command("list")
def blog_list(
    unpublished: bool = typer.Option(False, "--unpublished", help="Include drafts"),
) -> None:
    """List blog posts, newest first."""
    cfg = _get_config()
    try:
        posts = find_all_blogs(unpublished, cfg)
    except (ContentError, FileNotFoundError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not posts:
        rprint("[yellow]No posts found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Posts ({len(posts)})")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Date", style="green")
    table.add_column("Minutes", justify="right")
    table.add_column("Published", justify="center")
    for p in posts:
        table.add_row(
            escape(p.slug),
            escape(p.metadata.title),
            p.metadata.date.isoformat(),
            f"{p.metadata.reading_time:.1f}",
            "[green]yes[/green]" if p.metadata.published else "[yellow]no[/yellow]",
        )
    rprint(table)


@blog_app.command("show")
def blog_show(
    slug: str = typer.Argument(..., help="Post slug (file name without extension)"),
    unpublished: bool = typer.Option(False, "--unpublished", help="Include drafts"),
    html: bool = typer.Option(False, "--html", help="Print the rendered HTML"),
) -> None:
    """Show a single blog post."""
    cfg = _get_config()
    try:
        post = find_blog_by_slug(slug, unpublished, cfg)
    except (ContentError, FileNotFoundError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if post is None:
        rprint(f"[yellow]No post named '{escape(slug)}'.[/yellow]")
        raise typer.Exit(1)

    _display_post(post)
    if html:
        rprint(Syntax(post.content, "html", word_wrap=True))


@jobs_app.command("list")
def jobs_list() -> None:
    """List job history, most recent first."""
    cfg = _get_config()
    try:
        jobs = find_all_jobs(cfg)
    except (ContentError, FileNotFoundError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not jobs:
        rprint("[yellow]No jobs found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Jobs ({len(jobs)})")
    table.add_column("Slug", style="cyan")
    table.add_column("Role")
    table.add_column("Type")
    table.add_column("Period", style="green")
    for j in jobs:
        m = j.metadata
        table.add_row(
            escape(j.slug),
            escape(f"{m.title} at {m.company}"),
            m.type,
            format_period(m.begin, m.end),
        )
    rprint(table)


@app.command()
def check() -> None:
    """Load every collection and fail on the first invalid file."""
    cfg = _get_config()
    rprint(f"[bold]Checking[/bold] {escape(cfg.content.base_dir)}...")
    try:
        posts = find_all_blogs(True, cfg)
        jobs = find_all_jobs(cfg)
    except (ContentError, FileNotFoundError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    rprint(f"[green]OK[/green] {len(posts)} posts, {len(jobs)} jobs")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default juncodes.yaml in current directory."""
    target = Path("juncodes.yaml")
    if target.exists() and not force:
        rprint("[yellow]juncodes.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
