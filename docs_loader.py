#!/usr/bin/env python3
"""
Keycloak Docs Loader - reads the REST API documentation page.

The page can come from a local file, standard input ("-") or an
http(s) URL such as
https://www.keycloak.org/docs-api/6.0/rest-api/index.html
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"
DEFAULT_TIMEOUT = 30.0


def parse_document(html_content: str) -> BeautifulSoup:
    """Parse raw HTML into a queryable document tree."""
    return BeautifulSoup(html_content, 'html.parser')


class KeycloakDocsLoader:
    """
    Loads the Keycloak REST API documentation page.
    """

    def __init__(self,
                 source: Optional[str] = None,
                 timeout: Optional[float] = None):
        """
        Initialize loader.

        Args:
            source: File path, URL or "-" for stdin (or from env KEYCLOAK_DOCS_SOURCE)
            timeout: HTTP timeout in seconds (or from env KEYCLOAK_DOCS_TIMEOUT)
        """
        self.source = source or os.getenv("KEYCLOAK_DOCS_SOURCE") or STDIN_SOURCE
        if timeout is None:
            timeout = float(os.getenv("KEYCLOAK_DOCS_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout

    @property
    def is_url(self) -> bool:
        return self.source.startswith(('http://', 'https://'))

    def fetch_html(self) -> str:
        """
        Read the raw HTML from the configured source.

        Returns:
            str: Raw HTML content

        Raises:
            requests.RequestException: URL could not be fetched
            OSError: File could not be read
        """
        if self.is_url:
            return self._fetch_url(self.source)
        if self.source == STDIN_SOURCE:
            logger.info("Reading documentation from stdin")
            return sys.stdin.read()

        path = Path(self.source)
        logger.info(f"Reading documentation from {path}")
        return path.read_text(encoding='utf-8')

    def _fetch_url(self, url: str) -> str:
        logger.info(f"Fetching documentation from {url}")
        with requests.Session() as session:
            session.headers.update({
                'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36',
                'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            })
            try:
                response = session.get(url, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                logger.error(f"Error fetching {url}: {e}")
                raise

        logger.debug(f"GET {url} -> {response.status_code} ({len(response.text)} chars)")
        return response.text

    def load_document(self) -> BeautifulSoup:
        """Fetch and parse the documentation page."""
        return parse_document(self.fetch_html())
