from enum import StrEnum


class PageKind(StrEnum):
    """Kinds of pages which can be downloaded."""

    ALBUM = 'album'
    """Single album page."""
    STOREFRONT = 'storefront'
    """Artist or label listing with many albums."""


class Step(StrEnum):
    """Album download steps which can fail."""

    FETCH_PAGE = 'fetch-page'
    ALBUM_NOT_FOUND = 'album-not-found'
    DECODE = 'decode'
    ART_FETCH = 'art-fetch'
    ART_READ = 'art-read'
    MKDIR = 'mkdir'
    WRITE_COVER = 'write-cover'
    FETCH_TRACK = 'fetch-track'
    WRITE_TRACK = 'write-track'
    TAG_OPEN = 'tag-open'
    TAG_SAVE = 'tag-save'
