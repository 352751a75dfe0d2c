"""
Anime episode scraper.

Fetches an anime's listing page and returns its episodes ordered by number.
"""

from .models import Episode
from .scraping import get_anime_episodes, ScrapingError

__all__ = ['Episode', 'get_anime_episodes', 'ScrapingError']
