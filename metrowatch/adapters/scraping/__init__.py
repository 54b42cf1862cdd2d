"""
Scraping du site du cinema (httpx + BeautifulSoup).

Le scraper implemente ISeriesSource defini dans core/ports/scraper.py.
"""

from metrowatch.adapters.scraping.metrograph_scraper import MetrographScraper

__all__ = ["MetrographScraper"]
