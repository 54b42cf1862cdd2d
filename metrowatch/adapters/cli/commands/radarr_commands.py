"""
Commandes CLI Radarr : tagging des films d'un snapshot et profils de qualite.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from metrowatch.adapters.cli.helpers import console, load_snapshot, with_container
from metrowatch.services.tagging import TaggingReport


def print_tagging_report(report: TaggingReport) -> None:
    """Affiche le bilan d'une passe de tagging."""
    console.print("\n[bold]Tagging Radarr:[/bold]")
    console.print(f"  {report.series} serie(s) traitee(s)")
    console.print(f"  [green]{report.added}[/green] film(s) ajoute(s)")
    console.print(f"  [cyan]{report.tagged}[/cyan] film(s) existant(s) tagge(s)")
    if report.unchanged > 0:
        console.print(f"  [dim]{report.unchanged} deja tagge(s)[/dim]")
    if report.failed > 0:
        console.print(f"  [red]{report.failed}[/red] echec(s)")
    if report.series_failed > 0:
        console.print(f"  [red]{report.series_failed}[/red] serie(s) sans tag")


def radarr(
    snapshot: Annotated[Path, typer.Argument(help="Snapshot JSON a synchroniser")],
) -> None:
    """Cree les tags des series et ajoute leurs films a Radarr."""
    _radarr(snapshot)


@with_container
def _radarr(container, snapshot: Path) -> None:
    """Implementation de la commande radarr."""
    data = load_snapshot(container, snapshot)
    report = container.tagging_service().tag_catalog(data.catalog)
    print_tagging_report(report)


def profiles() -> None:
    """Liste les profils de qualite Radarr."""
    _profiles()


@with_container
def _profiles(container) -> None:
    """Implementation de la commande profiles."""
    quality_profiles = container.radarr_client().list_quality_profiles()

    table = Table(title="Profils de qualite Radarr")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Nom")
    for profile in quality_profiles:
        table.add_row(str(profile.id), profile.name)
    console.print(table)
