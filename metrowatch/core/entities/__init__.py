"""
Business entities representing core domain concepts.

Exports:
- Film: A film of a series, enriched with its TMDB ID
- Series: A themed program of films
- Catalog: Series indexed by series_id
- Snapshot: Date-stamped persisted catalog
- DownstreamCollection, CollectionSpec: Agregarr collections
- Tag, QualityProfile, RadarrMovie, RadarrDefaults: Radarr objects
"""

from metrowatch.core.entities.catalog import (
    MIN_VALID_MOVIES,
    Catalog,
    Film,
    Series,
    Snapshot,
)
from metrowatch.core.entities.downstream import (
    COLLECTION_PREFIX,
    TAG_PREFIX,
    AddMovieOutcome,
    CollectionSpec,
    DownstreamCollection,
    QualityProfile,
    RadarrDefaults,
    RadarrMovie,
    Tag,
    collection_name,
    is_owned_collection,
    is_owned_tag,
    tag_label,
)

__all__ = [
    "MIN_VALID_MOVIES",
    "Catalog",
    "Film",
    "Series",
    "Snapshot",
    "COLLECTION_PREFIX",
    "TAG_PREFIX",
    "AddMovieOutcome",
    "CollectionSpec",
    "DownstreamCollection",
    "QualityProfile",
    "RadarrDefaults",
    "RadarrMovie",
    "Tag",
    "collection_name",
    "is_owned_collection",
    "is_owned_tag",
    "tag_label",
]
