"""
Exceptions du domaine metrowatch.

Les erreurs de transport et les statuts HTTP non-2xx des clients API ne sont
pas encapsules : ils remontent sous forme de httpx.HTTPError.
"""


class MetrowatchError(Exception):
    """Exception de base de l'application."""


class ConfigurationError(MetrowatchError):
    """Configuration insuffisante pour construire un client."""


class SnapshotNotFoundError(MetrowatchError):
    """Le fichier de snapshot demande n'existe pas."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Snapshot introuvable: {path}")


class SnapshotCorruptError(MetrowatchError):
    """Le fichier de snapshot existe mais ne peut pas etre decode."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Snapshot illisible {path}: {reason}")


class ScrapeError(MetrowatchError):
    """Le site source a renvoye une structure inattendue."""


class TagNotFoundError(MetrowatchError):
    """Aucun tag Radarr ne porte le label demande."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Tag '{label}' introuvable dans Radarr")
