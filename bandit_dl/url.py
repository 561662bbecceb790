from urllib.parse import urljoin, urlsplit, urlunsplit

from .constants import (
    ALBUM_PATH_PREFIX,
    LARGE_ART_URL,
    SMALL_ART_URL,
    STOREFRONT_PATH,
)
from .enums import PageKind
from .exceptions import InvalidUrl


def small_art_url(art_id: int) -> str:
    """Url of small album art used for embedding into tags."""
    return SMALL_ART_URL.format(art_id=art_id)


def large_art_url(art_id: int) -> str:
    """Url of full-sized album art."""
    return LARGE_ART_URL.format(art_id=art_id)


def parse_page_url(url: str) -> tuple[PageKind, str]:
    """Find out which kind of page url points to.

    Bare site urls are treated as storefront urls.

    :param str url: Album or storefront url.
    :return tuple[PageKind, str]: (Page kind, url to fetch)
    :raises InvalidUrl: Url is neither album nor storefront url.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidUrl(f'Invalid URL {url}: {e}') from e

    if parts.path in ('', '/'):
        parts = parts._replace(path=STOREFRONT_PATH)

    if parts.path in (STOREFRONT_PATH, f'{STOREFRONT_PATH}/'):
        return PageKind.STOREFRONT, urlunsplit(parts)

    if parts.path.startswith(ALBUM_PATH_PREFIX):
        return PageKind.ALBUM, url

    raise InvalidUrl(f'Invalid URL {url}')


def resolve_album_url(storefront_url: str, album_path: str) -> str:
    """Join album page path found on storefront with storefront origin."""
    return urljoin(storefront_url, album_path)
