"""
Services metier de metrowatch.

Pipeline : crawler -> catalog_matcher -> catalog_merger -> (stockage)
-> tagging -> reconciliation.
"""

from .catalog_matcher import CatalogMatcherService
from .crawler import CatalogCrawlerService
from .reconciliation import ReconciliationService
from .tagging import TaggingService

__all__ = [
    "CatalogCrawlerService",
    "CatalogMatcherService",
    "ReconciliationService",
    "TaggingService",
]
