"""Random quotes for quote mode, fetched from a JSON API."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

QUOTE_URL = "https://api.quotable.io/random"
REQUEST_TIMEOUT = 10.0


class QuoteError(Exception):
    """A quote could not be obtained."""

    reason = "the quote service failed"

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not get quote because {self.reason.format(url=url)}")
        self.url = url


class QuoteConnectionError(QuoteError):
    reason = 'the url "{url}" cannot be fetched.'


class QuoteFormatError(QuoteError):
    reason = 'the url "{url}" returned an unexpected result.'


def fetch_random_quote(url: str = QUOTE_URL, timeout: float = REQUEST_TIMEOUT) -> str:
    """Return the text of one random quote.

    Raises QuoteConnectionError when the request fails and QuoteFormatError
    when the body is not a JSON object with a string ``content``.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error("Quote request to %s failed: %s", url, e)
        raise QuoteConnectionError(url) from e

    try:
        payload = response.json()
    except ValueError as e:
        logger.error("Quote response from %s is not JSON: %s", url, e)
        raise QuoteFormatError(url) from e

    content = payload.get("content") if isinstance(payload, dict) else None
    if not isinstance(content, str):
        logger.error("Quote response from %s has no 'content' string", url)
        raise QuoteFormatError(url)

    logger.info("Fetched quote of %d words", len(content.split()))
    return content
