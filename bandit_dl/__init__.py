"""Album downloader.

Downloads albums with their cover art from bandcamp album
and storefront pages and tags the tracks.
"""

from .constants import (
    DOWNLOADS_PATH,
    LARGE_ART_URL,
    SMALL_ART_URL,
)
from .enums import PageKind, Step
from .exceptions import (
    AlbumError,
    BanditError,
    DecodeError,
    FilesystemError,
    InvalidUrl,
    NotFoundError,
    ParseError,
    TagError,
    TransportError,
)
from .files import (
    AlbumFailure,
    StorefrontReport,
    download_album,
    download_many,
    download_storefront,
)
from .models import (
    Album,
    Track,
)
from .parser import (
    find_elements_with_attribute,
    get_attribute_value,
)
from .tralbum import (
    decode_tralbum,
    encode_tralbum,
)
from .url import (
    large_art_url,
    parse_page_url,
    small_art_url,
)
from .util import (
    sanitize_name,
)

__all__ = [
    'DOWNLOADS_PATH',
    'LARGE_ART_URL',
    'SMALL_ART_URL',
    'Album',
    'AlbumError',
    'AlbumFailure',
    'BanditError',
    'DecodeError',
    'FilesystemError',
    'InvalidUrl',
    'NotFoundError',
    'PageKind',
    'ParseError',
    'Step',
    'StorefrontReport',
    'TagError',
    'Track',
    'TransportError',
    'decode_tralbum',
    'download_album',
    'download_many',
    'download_storefront',
    'encode_tralbum',
    'find_elements_with_attribute',
    'get_attribute_value',
    'large_art_url',
    'parse_page_url',
    'sanitize_name',
    'small_art_url',
]
