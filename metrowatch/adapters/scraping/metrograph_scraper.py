"""
Scraper du site metrograph.com.

Implemente ISeriesSource avec httpx et BeautifulSoup :
- la page /series/ liste les series dans des blocs .row > .movie_title
- la page d'une serie liste ses films dans des blocs .item (.title et
  .film-metadata)

Certaines pages de serie repondent par une redirection JavaScript
(window.location.replace('...')) que le scraper suit une fois.
"""

import re
from typing import Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from metrowatch.adapters.api.http import DEFAULT_TIMEOUT, build_client, send
from metrowatch.core.ports.scraper import FilmEntry, ISeriesSource, SeriesLink

JS_REDIRECT_PATTERN = re.compile(r"window\.location\.replace\(['\"]([^'\"]+)['\"]")

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def parse_series_index(html: str) -> list[SeriesLink]:
    """Extrait les liens de series de la page d'index, dans l'ordre."""
    soup = BeautifulSoup(html, "html.parser")
    links = []
    for row in soup.select(".row"):
        for block in row.select(".movie_title"):
            anchor = block.find("a", href=True)
            if anchor is None:
                continue
            links.append(SeriesLink(name=block.get_text(strip=True), url=anchor["href"]))
    return links


def parse_series_page(html: str) -> list[FilmEntry]:
    """Extrait les films d'une page de serie, dans l'ordre."""
    soup = BeautifulSoup(html, "html.parser")
    films = []
    for item in soup.select(".item"):
        title_node = item.select_one(".title")
        if title_node is None:
            continue
        title = title_node.get_text(strip=True)
        if not title:
            continue
        metadata_node = item.select_one(".film-metadata")
        metadata = metadata_node.get_text(strip=True) if metadata_node else ""
        films.append(FilmEntry(title=title, metadata=metadata))
    return films


def find_js_redirect(html: str) -> Optional[str]:
    """Retourne la cible d'une redirection window.location.replace, ou None."""
    match = JS_REDIRECT_PATTERN.search(html)
    return match.group(1) if match else None


class MetrographScraper(ISeriesSource):
    """
    Source des series publiees sur metrograph.com.

    Example:
        scraper = MetrographScraper()
        for link in scraper.list_series():
            films = scraper.list_films(link.url)
        scraper.close()
    """

    BASE_URL = "https://metrograph.com"
    SERIES_PATH = "/series/"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = build_client(
                self._base_url,
                headers={"User-Agent": USER_AGENT},
                timeout=self._timeout,
                transport=self._transport,
            )
            self._client.follow_redirects = True
        return self._client

    def _fetch(self, url: str) -> str:
        logger.debug(f"Visite de {url}")
        return send(self._get_client(), "GET", url).text

    def list_series(self) -> list[SeriesLink]:
        return parse_series_index(self._fetch(self.SERIES_PATH))

    def list_films(self, series_url: str) -> list[FilmEntry]:
        html = self._fetch(series_url)

        redirect = find_js_redirect(html)
        if redirect:
            logger.info(f"Redirection JavaScript vers {redirect}")
            html = self._fetch(urljoin(f"{self._base_url}/", redirect))

        return parse_series_page(html)

    def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None
