from typing import Callable, List

import httpx
import pytest
from loguru import logger

from anime_episodes.api.http_client import SafeHttpClient

EPISODE_CLASSES = "lEp epT divNumEp smallbox px-2 mx-1 text-left d-flex"


def episode_anchor(text: str, href: str = None, classes: str = EPISODE_CLASSES) -> str:
    href_attr = f' href="{href}"' if href is not None else ''
    return f'<a class="{classes}"{href_attr}>{text}</a>'


def listing_page(*anchors: str) -> str:
    return (
        "<html><body><div class=\"episodes\">"
        + "".join(anchors)
        + "</div></body></html>"
    )


@pytest.fixture
def log_messages() -> List[str]:
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], SafeHttpClient]:
    """Build SafeHttpClients backed by an in-memory transport."""
    clients = []

    def factory(handler):
        client = SafeHttpClient(timeout=5.0, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
