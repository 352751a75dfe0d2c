"""
Episode extraction from a parsed listing page.

This module handles:
- Finding the episode anchors on the page
- Turning each anchor into an Episode
- Pulling a sortable number out of the episode label
- Ordering episodes by that number
"""

import re
from typing import Iterable, List

from loguru import logger

from ..models import Episode, EpisodeList
from .document import HtmlDocument, HtmlNode

# Every one of these classes must be present on the <a> element.
# Tied to the source site's markup.
EPISODE_ANCHOR_SELECTOR = "a.lEp.epT.divNumEp.smallbox.px-2.mx-1.text-left.d-flex"

# ASCII only, so labels with other scripts' digits fall through to the default
DIGIT_RUN_RE = re.compile(r"\d+", re.ASCII)

# Used when a label has no digits at all.
# NOTE: this labels every unnumbered entry (OVA, Special, Movie...) as episode 1.
DEFAULT_EPISODE_NUMBER = "1"


def find_episode_anchors(document: HtmlDocument, selector: str = EPISODE_ANCHOR_SELECTOR) -> List[HtmlNode]:
    """
    Find all episode links in the document, in document order.

    Args:
        document: Parsed listing page
        selector: CSS selector identifying an episode link

    Returns:
        Matching elements
    """
    return list(document.select(selector))


def parse_episode_number(episode_num: str) -> int:
    """
    Extract the first run of digits in an episode label as an integer.

    Leading zeros are fine ("007" -> 7) and only the first run counts
    ("ep3extra45" -> 3). A label without digits is treated as episode 1.

    Args:
        episode_num: Episode label as shown on the page

    Returns:
        Parsed episode number

    Raises:
        ValueError: If the digit run cannot be converted
    """
    match = DIGIT_RUN_RE.search(episode_num)
    num_str = match.group(0) if match else DEFAULT_EPISODE_NUMBER
    return int(num_str)


def parse_episodes(document: HtmlDocument, selector: str = EPISODE_ANCHOR_SELECTOR) -> EpisodeList:
    """
    Build an Episode for every episode link in the document.

    Links whose number cannot be parsed are logged and skipped. The result
    follows document order, not episode order.

    Args:
        document: Parsed listing page
        selector: CSS selector identifying an episode link

    Returns:
        List of Episode objects
    """
    anchors = find_episode_anchors(document, selector)
    logger.debug(f"Found {len(anchors)} episode anchors")

    episodes = []
    for anchor in anchors:
        episode_num = anchor.text()
        episode_url = anchor.attr('href') or ""

        try:
            num = parse_episode_number(episode_num)
        except ValueError as e:
            logger.warning(f"Error parsing episode number '{episode_num}': {e}")
            continue

        episodes.append(Episode(number=episode_num, num=num, url=episode_url))

    if len(episodes) < len(anchors):
        logger.info(f"Skipped {len(anchors) - len(episodes)} of {len(anchors)} episode anchors")

    return episodes


def sort_episodes_by_num(episodes: Iterable[Episode]) -> EpisodeList:
    """
    Order episodes by episode number, ascending.

    The sort is stable: episodes sharing a number keep their page order.

    Args:
        episodes: Episodes to order

    Returns:
        New sorted list
    """
    return sorted(episodes, key=lambda episode: episode.num)
