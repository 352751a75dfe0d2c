"""
Scraper for an anime's episode list page.

This module handles:
- Fetching the listing page
- Parsing it into an HTML document
- Extracting the episode links
- Returning them ordered by episode number
"""

from typing import Optional

import httpx
from loguru import logger

from ..api.http_client import SafeHttpClient, HttpClientError
from ..models import EpisodeList
from .document import SoupDocument, DocumentParseError
from .episodes import EPISODE_ANCHOR_SELECTOR, parse_episodes, sort_episodes_by_num


class ScrapingError(Exception):
    """Base exception for scraping-related errors."""
    pass


class AnimeDetailsFetchError(ScrapingError):
    """The listing page could not be downloaded."""
    pass


class AnimeDetailsParseError(ScrapingError):
    """The listing page could not be parsed as HTML."""
    pass


def _close_response(response: httpx.Response) -> None:
    try:
        response.close()
    except Exception as e:
        logger.error(f"Failed to close response body: {e}")


class AnimeEpisodeScraper:
    """
    Scraper for an anime's episode list.

    This class handles:
    - Fetching the anime page
    - Extracting episode links with a fixed selector
    - Sorting episodes by number
    """

    def __init__(
        self,
        client: Optional[SafeHttpClient] = None,
        selector: str = EPISODE_ANCHOR_SELECTOR,
        parser: str = 'lxml'
    ):
        """
        Initialize the scraper.

        Args:
            client: HTTP client to use; one is created (and owned) if omitted
            selector: CSS selector identifying an episode link
            parser: BeautifulSoup tree builder
        """
        self._owns_client = client is None
        self.client = client if client is not None else SafeHttpClient()
        self.selector = selector
        self.parser = parser

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close the HTTP client if we created it."""
        if self._owns_client:
            self.client.close()

    def fetch_page(self, anime_url: str) -> str:
        """
        Fetch the anime's page.

        Args:
            anime_url: Absolute URL of the anime's page

        Returns:
            Decoded HTML of the page

        Raises:
            AnimeDetailsFetchError: If the page cannot be downloaded
        """
        logger.info(f"Fetching anime details: {anime_url}")

        try:
            response = self.client.safe_get(anime_url)
        except HttpClientError as e:
            error_msg = f"failed to get anime details: {str(e)}"
            logger.error(error_msg)
            raise AnimeDetailsFetchError(error_msg) from e

        try:
            response.read()
            return response.text

        except httpx.RequestError as e:
            error_msg = f"failed to get anime details: error reading response body: {str(e)}"
            logger.error(error_msg)
            raise AnimeDetailsFetchError(error_msg) from e

        finally:
            _close_response(response)

    def parse_episode_list(self, html: str) -> EpisodeList:
        """
        Extract the episodes from page HTML, ordered by episode number.

        Args:
            html: Raw HTML content of the page

        Returns:
            Sorted list of Episode objects

        Raises:
            AnimeDetailsParseError: If the HTML cannot be parsed
        """
        try:
            document = SoupDocument.from_html(html, self.parser)
        except DocumentParseError as e:
            error_msg = f"failed to parse anime details: {str(e)}"
            logger.error(error_msg)
            raise AnimeDetailsParseError(error_msg) from e

        episodes = parse_episodes(document, self.selector)
        return sort_episodes_by_num(episodes)

    def scrape_episodes(self, anime_url: str) -> EpisodeList:
        """
        Main scraping method - fetch the page and return its episodes.

        Args:
            anime_url: Absolute URL of the anime's page

        Returns:
            List of Episode objects sorted by episode number

        Raises:
            ScrapingError: If fetching or parsing fails
        """
        html = self.fetch_page(anime_url)
        episodes = self.parse_episode_list(html)

        logger.success(f"Successfully scraped {len(episodes)} episodes")
        return episodes


# Convenience function for simple usage
def get_anime_episodes(anime_url: str, client: Optional[SafeHttpClient] = None) -> EpisodeList:
    """
    Fetch and parse the list of episodes for an anime.

    Args:
        anime_url: Absolute URL of the anime's page
        client: Optional HTTP client to reuse

    Returns:
        List of Episode objects sorted by episode number
    """
    with AnimeEpisodeScraper(client=client) as scraper:
        return scraper.scrape_episodes(anime_url)
