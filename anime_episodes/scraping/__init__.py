"""
Scraping package for the anime episode scraper.

Contains the page fetch, episode extraction and ordering.
"""

from .scraper import (
    AnimeEpisodeScraper,
    get_anime_episodes,
    ScrapingError,
    AnimeDetailsFetchError,
    AnimeDetailsParseError,
)
from .episodes import (
    EPISODE_ANCHOR_SELECTOR,
    find_episode_anchors,
    parse_episode_number,
    parse_episodes,
    sort_episodes_by_num,
)
from .document import SoupDocument, DocumentParseError

__all__ = [
    'AnimeEpisodeScraper',
    'get_anime_episodes',
    'ScrapingError',
    'AnimeDetailsFetchError',
    'AnimeDetailsParseError',
    'EPISODE_ANCHOR_SELECTOR',
    'find_episode_anchors',
    'parse_episode_number',
    'parse_episodes',
    'sort_episodes_by_num',
    'SoupDocument',
    'DocumentParseError',
]
