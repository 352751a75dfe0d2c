"""
HTTP package for the anime episode scraper.

Contains the GET primitive used to download listing pages.
"""

from .http_client import SafeHttpClient, HttpClientError

__all__ = ['SafeHttpClient', 'HttpClientError']
