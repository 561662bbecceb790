import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

from .constants import ALBUM_PATH_PREFIX, ITEM_ID_ATTRIBUTE, TRALBUM_ATTRIBUTE
from .enums import Step
from .exceptions import NotFoundError

logger = logging.getLogger('bandit-parser')


def parse_html(content: bytes | str) -> BeautifulSoup:
    """Parse html into a tree of tags."""
    return BeautifulSoup(content, 'lxml')


def iter_elements_with_attribute(root: Tag, key: str) -> Iterator[Tag]:
    """Iterate over elements carrying an attribute in document order.

    Element is yielded before its children.
    Value of the attribute does not matter.

    :param Tag root: Tree or element to search. Included in the search.
    :param str key: Attribute name.
    :return Iterator[Tag]: Matching elements.
    """
    if root.has_attr(key):
        yield root

    for element in root.descendants:
        if isinstance(element, Tag) and element.has_attr(key):
            yield element


def find_elements_with_attribute(root: Tag, key: str) -> list[Tag]:
    """Find all elements carrying an attribute in document order.

    :param Tag root: Tree or element to search. Included in the search.
    :param str key: Attribute name.
    :return list[Tag]: Matching elements. Empty if nothing matches.
    """
    return list(iter_elements_with_attribute(root, key))


def get_attribute_value(element: Tag, key: str) -> str:
    """Get raw attribute value, or empty string if element lacks it."""
    value = element.get(key)
    if value is None:
        return ''
    if isinstance(value, list):
        return ' '.join(value)
    return value


def extract_tralbum_json(soup: Tag) -> str:
    """Extract album json from album page.

    :param Tag soup: Parsed album page.
    :return str: Album json from the first element carrying it.
    :raises NotFoundError: No element carries album json.
    """
    elements = find_elements_with_attribute(soup, TRALBUM_ATTRIBUTE)
    if not elements:
        err_msg = 'Could not find album'
        logger.debug(err_msg)
        raise NotFoundError(err_msg, step=Step.ALBUM_NOT_FOUND)

    return get_attribute_value(elements[0], TRALBUM_ATTRIBUTE)


def parse_storefront_album_paths(soup: Tag) -> list[str]:
    """Parse album page paths from storefront listing.

    Every listed item links to its page with its first child anchor.
    Items other than albums (e.g. single tracks) are skipped.

    :param Tag soup: Parsed storefront page.
    :return list[str]: Album page paths, e.g. `/album/some-album`.
    """
    album_paths: list[str] = []

    for item in iter_elements_with_attribute(soup, ITEM_ID_ATTRIBUTE):
        if not (anchor := item.find('a', href=True, recursive=False)):
            logger.warning(f'No link found in storefront item: {item.name}')
            continue

        href = get_attribute_value(anchor, 'href')
        if not href.startswith(ALBUM_PATH_PREFIX):
            logger.debug(f'Skipping storefront item: {href}')
            continue

        album_paths.append(href)

    if not album_paths:
        logger.warning('Album urls not found in storefront html')

    return album_paths
