"""
Commande CLI crawl : scraping, fusion, resolution TMDB et snapshot du jour.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from metrowatch.adapters.cli.helpers import console, load_snapshot, suppress_loguru, with_container
from metrowatch.services.catalog_matcher import MatchResult, ProgressInfo
from metrowatch.services.catalog_merger import merge_catalog


def crawl(
    merge_from: Annotated[
        Optional[Path],
        typer.Option(
            "--merge-from", "-m",
            help="Snapshot precedent a fusionner (conserve ses IDs TMDB)",
        ),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Repertoire du snapshot (defaut: snapshot_dir)"),
    ] = None,
    with_imdb: Annotated[
        bool,
        typer.Option("--with-imdb", help="Recuperer aussi les IDs IMDb des films resolus"),
    ] = False,
) -> None:
    """Scrape les series, resout les films sur TMDB et ecrit le snapshot du jour."""
    _crawl(merge_from, output_dir, with_imdb)


@with_container
def _crawl(
    container, merge_from: Optional[Path], output_dir: Optional[Path], with_imdb: bool
) -> None:
    """Implementation de la commande crawl."""
    # Le snapshot precedent est charge avant tout appel reseau : s'il est
    # illisible, la commande s'arrete sans rien ecrire.
    previous = load_snapshot(container, merge_from) if merge_from else None

    crawler = container.crawler_service()
    matcher = container.matcher_service(fetch_imdb_ids=with_imdb)

    with console.status("[cyan]Scraping des series..."):
        catalog = crawler.crawl(
            on_series=lambda s: console.print(f"  [dim]{s.name}[/dim] ({len(s.films)} films)")
        )
    console.print(
        f"[bold cyan]Scraping[/bold cyan]: {len(catalog)} serie(s), {catalog.film_count} film(s)\n"
    )

    # Fusion avant resolution : les films deja connus gardent leur ID TMDB
    # et ne sont pas recherches a nouveau.
    if previous is not None:
        catalog, merge_stats = merge_catalog(catalog, previous.catalog)
        console.print(
            f"Fusion avec {merge_from}: {merge_stats.merged_series} serie(s) fusionnee(s)\n"
        )

    if not matcher.enabled:
        console.print("[yellow]Cle TMDB absente : les films ne seront pas resolus.[/yellow]")

    with suppress_loguru():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=console,
            transient=False,
        ) as progress:
            task = progress.add_task("[cyan]Resolution TMDB...", total=catalog.film_count)

            def on_progress(info: ProgressInfo) -> None:
                """Callback de progression."""
                progress.update(task, completed=info.current)
                if info.result == MatchResult.RESOLVED:
                    progress.console.print(f"  [green]✓[/green] {info.film_title} → {info.tmdb_id}")
                elif info.result == MatchResult.NOT_FOUND:
                    progress.console.print(f"  [yellow]?[/yellow] {info.film_title} - introuvable")

            stats = matcher.match_catalog(catalog, on_progress=on_progress)

    store = container.catalog_store(directory=output_dir) if output_dir else container.catalog_store()
    path = store.save(catalog)

    # Afficher le resume
    eligible = catalog.eligible()
    console.print("\n[bold]Resume:[/bold]")
    console.print(f"  [green]{stats.resolved}[/green] film(s) resolu(s)")
    if stats.not_found > 0:
        console.print(f"  [yellow]{stats.not_found}[/yellow] introuvable(s)")
    console.print(
        f"  {len(catalog)} serie(s), [green]{len(eligible)}[/green] avec plus de 2 films resolus"
    )
    console.print(f"  Snapshot ecrit dans [bold]{path}[/bold]")
