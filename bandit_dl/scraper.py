import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from bs4 import BeautifulSoup, ParserRejectedMarkup

from .constants import REQUEST_TIMEOUT_SECONDS, USER_AGENT
from .decorators import log_errors
from .enums import Step
from .exceptions import DecodeError, ParseError, TransportError
from .models import Album
from .parser import (
    extract_tralbum_json,
    parse_html,
    parse_storefront_album_paths,
)
from .tralbum import decode_tralbum
from .url import resolve_album_url

logger = logging.getLogger('bandit-scraper')


def create_client() -> httpx.Client:
    """Create http client used for all requests."""
    return httpx.Client(
        headers={'User-Agent': USER_AGENT},
        timeout=REQUEST_TIMEOUT_SECONDS,
        follow_redirects=True,
    )


@contextmanager
def client_session(
    client: httpx.Client | None = None,
) -> Iterator[httpx.Client]:
    """Use provided client or create one closed on exit."""
    if client is not None:
        yield client
        return

    with create_client() as new_client:
        yield new_client


@contextmanager
def stream_response(
    client: httpx.Client,
    url: str,
    step: Step,
) -> Iterator[httpx.Response]:
    """Send GET request and hold response open without reading its body.

    :param Client client: Http client.
    :param str url: Resource url.
    :param Step step: Download step reported if request fails.
    :return Iterator[Response]: Response with successful status.
    :raises TransportError: Request failed or got error status.
    """
    try:
        response = client.send(client.build_request('GET', url), stream=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f'Could not fetch {url}: {e}', step=step) from e

    try:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f'Could not fetch {url}: {e}', step=step
            ) from e
        yield response
    finally:
        response.close()


def fetch_bytes(
    client: httpx.Client,
    url: str,
    step: Step,
    read_step: Step | None = None,
) -> bytes:
    """Fetch whole resource into memory.

    :param Client client: Http client.
    :param str url: Resource url.
    :param Step step: Download step reported if request fails.
    :param Step | None read_step: Download step reported if reading
        response body fails. Default is the same as `step`.
    :return bytes: Response body.
    :raises TransportError: Request or reading response body failed.
    """
    with stream_response(client, url, step) as response:
        try:
            return response.read()
        except httpx.HTTPError as e:
            raise TransportError(
                f'Could not read {url}: {e}', step=read_step or step
            ) from e


@log_errors(logger=logger, level=logging.DEBUG)
def fetch_page(client: httpx.Client, url: str) -> BeautifulSoup:
    """Fetch page html and parse it.

    :raises TransportError: Page could not be fetched.
    :raises ParseError: Page html could not be parsed.
    """
    content = fetch_bytes(client, url, Step.FETCH_PAGE)

    try:
        return parse_html(content)
    except ParserRejectedMarkup as e:
        raise ParseError(
            f'Could not parse page {url}: {e}', step=Step.FETCH_PAGE
        ) from e


def scrape_album_page(client: httpx.Client, album_url: str) -> Album:
    """Fetch album page and decode album data from it.

    :param Client client: Http client.
    :param str album_url: Album page url.
    :return Album: Album instance.
    :raises NotFoundError: Page has no album data.
    :raises DecodeError: Album data could not be decoded.
    """
    soup = fetch_page(client, album_url)
    tralbum_json = extract_tralbum_json(soup)

    try:
        album = decode_tralbum(tralbum_json)
    except DecodeError as e:
        raise DecodeError(
            f'Could not parse album JSON: {e}', step=Step.DECODE
        ) from e

    logger.debug(f'Scraped album: {album!r}')
    return album


def scrape_storefront_page(
    client: httpx.Client,
    storefront_url: str,
) -> list[str]:
    """Fetch storefront page and collect album page urls from it.

    :param Client client: Http client.
    :param str storefront_url: Storefront listing url.
    :return list[str]: Absolute album page urls in listing order.
    """
    soup = fetch_page(client, storefront_url)

    return [
        resolve_album_url(storefront_url, path)
        for path in parse_storefront_album_paths(soup)
    ]
