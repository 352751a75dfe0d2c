"""
Minimal HTML query interface used by the episode extractor.

The extractor only needs three things from a parsed page: select elements
with a CSS selector, read an element's text, and read one of its
attributes. Anything providing those can stand in for the real document,
which is backed by BeautifulSoup.
"""

from typing import List, Optional, Protocol, Union

from bs4 import BeautifulSoup
from bs4.element import Tag


class DocumentParseError(Exception):
    """Raised when markup cannot be turned into a document."""
    pass


class HtmlNode(Protocol):
    def text(self) -> str:
        ...

    def attr(self, name: str) -> Optional[str]:
        ...


class HtmlDocument(Protocol):
    def select(self, selector: str) -> List[HtmlNode]:
        ...


class SoupNode:
    """An element of a SoupDocument."""

    def __init__(self, tag: Tag):
        self.tag = tag

    def text(self) -> str:
        # Unstripped, as rendered
        return self.tag.get_text()

    def attr(self, name: str) -> Optional[str]:
        return self.tag.get(name)


class SoupDocument:
    """HtmlDocument backed by a BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: Union[str, bytes], parser: str = 'lxml') -> 'SoupDocument':
        """
        Parse markup into a document.

        Args:
            html: Raw page content
            parser: BeautifulSoup tree builder to use

        Returns:
            Parsed document

        Raises:
            DocumentParseError: If the markup cannot be parsed
        """
        if not isinstance(html, (str, bytes)):
            raise DocumentParseError(f"Expected str or bytes markup, got {type(html).__name__}")

        try:
            return cls(BeautifulSoup(html, parser))
        except Exception as e:
            raise DocumentParseError(f"Could not parse HTML: {str(e)}") from e

    def select(self, selector: str) -> List[SoupNode]:
        return [SoupNode(tag) for tag in self.soup.select(selector)]
