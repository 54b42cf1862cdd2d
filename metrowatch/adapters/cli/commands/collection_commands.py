"""
Commandes CLI Agregarr : reconciliation des collections et diagnostics.
"""

from pathlib import Path
from typing import Annotated

import typer

from metrowatch.adapters.cli.commands.radarr_commands import print_tagging_report
from metrowatch.adapters.cli.helpers import console, load_snapshot, with_container
from metrowatch.services.reconciliation import ReconciliationReport


def print_reconciliation_report(report: ReconciliationReport) -> None:
    """Affiche le bilan d'une passe de reconciliation."""
    console.print("\n[bold]Collections Agregarr:[/bold]")
    for name in report.deleted:
        console.print(f"  [red]-[/red] {name}")
    for name in report.created:
        console.print(f"  [green]+[/green] {name}")
    console.print(
        f"  {len(report.deleted)} collection(s) et {len(report.deleted_tags)} tag(s) supprime(s), "
        f"{len(report.created)} collection(s) creee(s)"
    )
    if report.failures > 0:
        console.print(f"  [yellow]{report.failures}[/yellow] operation(s) en echec (voir les logs)")


def collections(
    snapshot: Annotated[Path, typer.Argument(help="Snapshot JSON de reference")],
) -> None:
    """Aligne les collections Agregarr sur le snapshot (suppression puis creation)."""
    _collections(snapshot)


@with_container
def _collections(container, snapshot: Path) -> None:
    """Implementation de la commande collections."""
    data = load_snapshot(container, snapshot)
    report = container.reconciliation_service().reconcile(data.catalog)
    print_reconciliation_report(report)


def sync(
    snapshot: Annotated[Path, typer.Argument(help="Snapshot JSON de reference")],
) -> None:
    """Tagging Radarr puis reconciliation Agregarr."""
    _sync(snapshot)


@with_container
def _sync(container, snapshot: Path) -> None:
    """Implementation de la commande sync."""
    data = load_snapshot(container, snapshot)
    print_tagging_report(container.tagging_service().tag_catalog(data.catalog))
    print_reconciliation_report(container.reconciliation_service().reconcile(data.catalog))


def test_agregarr() -> None:
    """Sonde les routes principales d'Agregarr."""
    _test_agregarr()


@with_container
def _test_agregarr(container) -> None:
    """Implementation de la commande test-agregarr."""
    client = container.agregarr_client()
    console.print(f"Test de la connexion a [bold]{client.host}[/bold]")
    for path, status in client.test_connection().items():
        if status is None:
            console.print(f"  [red]✗[/red] /{path}: injoignable")
        elif status < 300:
            console.print(f"  [green]✓[/green] /{path}: {status}")
        else:
            console.print(f"  [yellow]?[/yellow] /{path}: {status}")


def get_collections() -> None:
    """Liste les collections connues d'Agregarr."""
    _get_collections()


@with_container
def _get_collections(container) -> None:
    """Implementation de la commande get-collections."""
    existing = container.agregarr_client().list_collections()
    for collection in existing:
        console.print(f"  [dim]{collection.id}[/dim] {collection.name}")
    console.print(f"{len(existing)} collection(s) trouvee(s)")
