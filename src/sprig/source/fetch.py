"""Download documents over HTTP with httpx."""
from __future__ import annotations

import logging

import httpx

from ..dammit import decode_markup
from ..errors import FetchError, InvalidArgument
from ..models import Record
from .locators import has_scheme

__all__ = ["FetchedDocument", "Fetcher", "fetch"]


class FetchedDocument(Record):
    url: str
    text: str
    content_type: str | None = None

    @property
    def is_xml(self) -> bool:
        """Did the server say this is XML (and not XHTML)?"""
        if not self.content_type:
            return False
        mime = self.content_type.split(";", 1)[0].strip().lower()
        return "xml" in mime and "html" not in mime


class Fetcher:
    """Performs GET requests for documents.

    A URL without a scheme is tried over https first. If that can't connect
    or times out, it is tried once more over http. Error statuses are never
    retried.
    """

    DEFAULT_TIMEOUT = 10.0
    FALLBACK_ERRORS = (httpx.NetworkError, httpx.TimeoutException)

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ):
        """Constructor.

        :param client: An httpx.AsyncClient to send requests with. If None, a
            client is opened for each fetch and closed after it.
        :param timeout: Seconds to wait on the network, or an httpx.Timeout.
        :param headers: Extra request headers.
        """
        self.client = client
        self.timeout = timeout
        self.headers = headers or {}
        self.log = logging.getLogger(__name__)

    async def _get(self, url: str) -> FetchedDocument:
        if self.client is not None:
            response = await self.client.get(
                url,
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
        else:
            async with httpx.AsyncClient(
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
        response.raise_for_status()
        content_type = response.headers.get("content-type")
        document = FetchedDocument(
            url=str(response.url),
            text=decode_markup(
                response.content,
                known_definite_encodings=[response.charset_encoding],
                is_html="xml" not in (content_type or "").lower(),
            ),
            content_type=content_type,
        )
        self.log.debug("Fetched %s (%s)", document.url, content_type)
        return document

    async def _get_or_fail(self, url: str) -> FetchedDocument:
        try:
            return await self._get(url)
        except httpx.HTTPError as e:
            raise FetchError(url, e) from e

    async def fetch(self, url: str) -> FetchedDocument:
        """Download a document.

        :param url: A URL, with or without its http(s) scheme.
        :raise FetchError: If no response could be had, or the response was an
            error status.
        """
        if not isinstance(url, str):
            raise InvalidArgument("Expected url to be a string.")
        if has_scheme(url):
            return await self._get_or_fail(url)
        try:
            return await self._get(f"https://{url}")
        except self.FALLBACK_ERRORS as e:
            self.log.warning(
                "https://%s could not be reached (%s), falling back to http.",
                url,
                e,
            )
        except httpx.HTTPError as e:
            raise FetchError(f"https://{url}", e) from e
        return await self._get_or_fail(f"http://{url}")


async def fetch(url: str, **kwargs) -> str:
    """Download a document and return its text. See `Fetcher`."""
    return (await Fetcher(**kwargs).fetch(url)).text
