#!/usr/bin/env python3
"""
Anime Episode Scraper - Main Entry Point

Fetches an anime's page and prints its episodes ordered by number.

Usage:
    python main.py <anime_url>          # Print one line per episode
    python main.py <anime_url> --json   # Print episodes as a JSON array
    python main.py --help               # Show this help
"""

import json
import sys
from typing import List, Optional

from loguru import logger

from anime_episodes.config import ConfigError, get_config
from anime_episodes.logging_setup import configure_logging
from anime_episodes.models import EpisodeList
from anime_episodes.scraping import get_anime_episodes, ScrapingError


def show_help():
    """Show usage help."""
    print(__doc__)


def print_episodes(episodes: EpisodeList, as_json: bool = False) -> None:
    """Print the scraped episodes to stdout."""
    if as_json:
        print(json.dumps([episode.to_dict() for episode in episodes], indent=2, ensure_ascii=False))
        return

    for episode in episodes:
        print(f"{episode.num:>5}  {episode.number.strip()}  {episode.url}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in ['--help', '-h', 'help']:
        show_help()
        return 0 if args else 2

    as_json = '--json' in args
    positional = [arg for arg in args if arg != '--json']

    if len(positional) != 1 or positional[0].startswith('-'):
        print(f"❌ Expected exactly one anime URL, got: {' '.join(args)}")
        print("Run 'python main.py --help' for usage information.")
        return 2

    try:
        log_level = get_config().validate_log_level()
    except ConfigError as e:
        print(f"❌ Invalid configuration: {e}")
        return 2

    configure_logging(log_level, sink=sys.stderr)

    try:
        episodes = get_anime_episodes(positional[0])
    except ScrapingError as e:
        logger.error(f"❌ Scraping failed: {e}")
        return 1

    print_episodes(episodes, as_json=as_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
