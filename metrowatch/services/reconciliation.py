"""
Reconciliation des collections Agregarr avec le catalogue.

ReconciliationService compare les collections attendues (une par serie
eligible, nommee "Metrograph: <serie>") aux collections existantes et
emet le minimum d'operations pour converger :

- suppression des collections "Metrograph: ..." qui ne sont plus attendues,
  et du tag Radarr designe par leur subtype
- creation des collections manquantes, apres obtention (ou creation) du tag

Seules les collections prefixees "Metrograph: " peuvent etre supprimees.
Chaque operation est independante : un echec est journalise et compte,
puis la passe continue. Seule l'impossibilite de lister les collections
existantes interrompt la passe.
"""

from dataclasses import dataclass, field

from loguru import logger

from metrowatch.core.entities.catalog import Catalog, Series
from metrowatch.core.entities.downstream import (
    CollectionSpec,
    DownstreamCollection,
    RadarrDefaults,
    collection_name,
    is_owned_collection,
    is_owned_tag,
    tag_label,
)
from metrowatch.core.ports.api_clients import ICollectionService, ITaggingService


@dataclass
class ReconciliationPlan:
    """Operations a appliquer pour converger.

    Attributes:
        expected_names: Noms des collections attendues
        to_delete: Collections existantes a supprimer (ordre de listing)
        to_create: Series sans collection (ordre de series_id)
    """

    expected_names: set[str] = field(default_factory=set)
    to_delete: list[DownstreamCollection] = field(default_factory=list)
    to_create: list[Series] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_delete and not self.to_create


@dataclass
class ReconciliationReport:
    """Bilan d'une passe de reconciliation."""

    created: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    deleted_tags: list[str] = field(default_factory=list)
    failed_creates: int = 0
    failed_deletes: int = 0
    failed_tag_deletes: int = 0

    @property
    def failures(self) -> int:
        return self.failed_creates + self.failed_deletes + self.failed_tag_deletes


def plan_reconciliation(
    catalog: Catalog, existing: list[DownstreamCollection]
) -> ReconciliationPlan:
    """
    Calcule les operations necessaires, sans effet de bord.

    Args:
        catalog: Catalogue courant (filtre ici sur les series eligibles)
        existing: Toutes les collections connues d'Agregarr

    Returns:
        ReconciliationPlan
    """
    eligible = catalog.eligible().ordered()
    plan = ReconciliationPlan(
        expected_names={collection_name(series.name) for series in eligible}
    )

    plan.to_delete = [
        collection
        for collection in existing
        if is_owned_collection(collection.name)
        and collection.name not in plan.expected_names
    ]

    known_names = {collection.name for collection in existing}
    for series in eligible:
        name = collection_name(series.name)
        if name in known_names:
            continue
        plan.to_create.append(series)
        known_names.add(name)

    return plan


class ReconciliationService:
    """
    Applique une passe de reconciliation complete.

    Example:
        service = ReconciliationService(
            collections=agregarr_client,
            tagging=radarr_client,
            defaults=settings.radarr_defaults,
        )
        report = service.reconcile(snapshot.catalog)
    """

    def __init__(
        self,
        collections: ICollectionService,
        tagging: ITaggingService,
        defaults: RadarrDefaults = RadarrDefaults(),
        library_ids: tuple[str, ...] = ("1",),
        max_items: int = 10,
    ) -> None:
        """
        Initialise le service de reconciliation.

        Args:
            collections: Client Agregarr
            tagging: Client Radarr
            defaults: Parametres d'acquisition directe des collections creees
            library_ids: Bibliotheques cibles des collections creees
            max_items: Nombre maximum d'elements par collection
        """
        self._collections = collections
        self._tagging = tagging
        self._defaults = defaults
        self._library_ids = library_ids
        self._max_items = max_items

    def build_spec(self, series: Series, tag_id: int) -> CollectionSpec:
        """Description de la collection d'une serie."""
        return CollectionSpec(
            name=collection_name(series.name),
            subtype=tag_label(series.series_id),
            radarr_tag_id=tag_id,
            defaults=self._defaults,
            library_ids=self._library_ids,
            max_items=self._max_items,
        )

    def _delete(self, collection: DownstreamCollection, report: ReconciliationReport) -> None:
        logger.info(f"Suppression de la collection '{collection.name}' (absente du catalogue)")
        try:
            self._collections.delete_collection(collection.id)
        except Exception as e:
            logger.warning(f"Echec de la suppression de la collection '{collection.name}': {e}")
            report.failed_deletes += 1
        else:
            report.deleted.append(collection.name)

        # Le subtype porte le label du tag ("metrograph-<id>")
        if not is_owned_tag(collection.subtype):
            return
        try:
            self._tagging.delete_tag(collection.subtype)
        except Exception as e:
            logger.warning(f"Echec de la suppression du tag Radarr '{collection.subtype}': {e}")
            report.failed_tag_deletes += 1
        else:
            report.deleted_tags.append(collection.subtype)

    def _create(self, series: Series, report: ReconciliationReport) -> None:
        label = tag_label(series.series_id)
        try:
            tag_id = self._tagging.create_or_get_tag(label)
        except Exception as e:
            logger.warning(f"Tag '{label}' indisponible pour la serie {series.name}: {e}")
            report.failed_creates += 1
            return

        logger.info(
            f"Creation de la collection de '{series.name}' ({series.valid_movie_count} films)"
        )
        try:
            created = self._collections.create_collection(self.build_spec(series, tag_id))
        except Exception as e:
            logger.warning(f"Echec de la creation de la collection de {series.name}: {e}")
            report.failed_creates += 1
            return

        logger.info(f"Collection '{created.name}' creee avec l'ID {created.id}")
        report.created.append(created.name)

    def apply(self, plan: ReconciliationPlan) -> ReconciliationReport:
        """Applique un plan : suppressions puis creations."""
        report = ReconciliationReport()
        for collection in plan.to_delete:
            self._delete(collection, report)
        for series in plan.to_create:
            self._create(series, report)

        logger.info(
            f"{len(report.deleted)} collection(s) et {len(report.deleted_tags)} tag(s) "
            f"supprime(s), {len(report.created)} collection(s) creee(s)"
        )
        return report

    def reconcile(self, catalog: Catalog) -> ReconciliationReport:
        """
        Liste les collections existantes puis converge vers le catalogue.

        Args:
            catalog: Catalogue courant

        Returns:
            ReconciliationReport

        Raises:
            httpx.HTTPError: Les collections existantes ne peuvent pas etre listees
        """
        existing = self._collections.list_collections()
        plan = plan_reconciliation(catalog, existing)
        logger.info(
            f"{len(existing)} collection(s) existante(s), "
            f"{len(plan.to_delete)} a supprimer, {len(plan.to_create)} a creer"
        )
        return self.apply(plan)
