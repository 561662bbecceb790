"""Album json embedded into album pages.

Album pages carry all album data as json in the `data-tralbum`
attribute of some element. Decoding is a plain structural json decode
with one exception: release date comes as a formatted string
which is parsed by :func:`parse_release_date`.
"""

import json
from datetime import UTC, datetime
from typing import Any

from ._types import TrackInfoJson, TralbumJson
from .constants import MONTH_ABBREVIATIONS, RELEASE_DATE_REGEX
from .exceptions import DecodeError
from .models import Album, Track


def parse_release_date(date_string: str) -> datetime:
    """Parse album release date, e.g. `01 Jan 2020 00:00:00 GMT`.

    :param str date_string: Release date without surrounding quotes.
    :return datetime: Timezone-aware release date in UTC.
    :raises DecodeError: Date string does not match the format.
    """
    if not (match := RELEASE_DATE_REGEX.fullmatch(date_string)):
        raise DecodeError(f'Invalid release date: {date_string!r}')

    month_name = match[2].title()
    if month_name not in MONTH_ABBREVIATIONS:
        raise DecodeError(f'Invalid release date month: {date_string!r}')

    day, _, year, hour, minute, second = match.groups()
    try:
        return datetime(
            int(year),
            MONTH_ABBREVIATIONS.index(month_name) + 1,
            int(day),
            int(hour),
            int(minute),
            int(second),
            tzinfo=UTC,
        )
    except ValueError as e:
        raise DecodeError(
            f'Invalid release date: {date_string!r}: {e}'
        ) from e


def format_release_date(date: datetime) -> str:
    """Format release date the way album pages do.

    Sub-second precision is lost.

    :param datetime date: Timezone-aware release date.
    :return str: Formatted date, e.g. `01 Jan 2020 00:00:00 GMT`.
    """
    date = date.astimezone(UTC)
    return (
        f'{date.day:02d} {MONTH_ABBREVIATIONS[date.month - 1]} '
        f'{date.year:04d} {date:%H:%M:%S} GMT'
    )


def _get_field(
    data: dict[str, Any],
    key: str,
    type_: type,
    default: Any,
) -> Any:
    value = data.get(key)
    if value is None:
        return default

    # bool is a subclass of int, but never a valid json number here
    if not isinstance(value, type_) or (
        type_ is int and isinstance(value, bool)
    ):
        raise DecodeError(
            f'Field "{key}" must be {type_.__name__}, '
            f'got {type(value).__name__}'
        )
    return value


def _decode_track(track_json: TrackInfoJson) -> Track:
    if not isinstance(track_json, dict):
        raise DecodeError(
            f'Track info must be dict, got {type(track_json).__name__}'
        )

    track_file = _get_field(track_json, 'file', dict, {})

    return Track(
        title=_get_field(track_json, 'title', str, ''),
        track_number=_get_field(track_json, 'track_num', int, 0),
        audio_url=_get_field(track_file, 'mp3-128', str, ''),
    )


def decode_tralbum(json_text: str) -> Album:
    """Decode album json from album page.

    Unknown fields are ignored, missing fields get empty values.
    Release date is required.

    :param str json_text: Value of `data-tralbum` attribute.
    :return Album: Decoded album.
    :raises DecodeError: Json is malformed, some field has unexpected type
        or release date could not be parsed.
    """
    try:
        tralbum: TralbumJson = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise DecodeError(f'Malformed album json: {e}') from e

    if not isinstance(tralbum, dict):
        raise DecodeError(
            f'Album json must be object, got {type(tralbum).__name__}'
        )

    current = _get_field(tralbum, 'current', dict, {})

    release_date = tralbum.get('album_release_date')
    if not isinstance(release_date, str):
        raise DecodeError(f'Invalid release date: {release_date!r}')

    return Album(
        artist=_get_field(tralbum, 'artist', str, ''),
        title=_get_field(current, 'title', str, ''),
        art_id=_get_field(current, 'art_id', int, 0),
        item_type=_get_field(tralbum, 'item_type', str, ''),
        free_download_page=_get_field(tralbum, 'freeDownloadPage', str, ''),
        release_date=parse_release_date(release_date),
        tracks=[
            _decode_track(track_json)
            for track_json in _get_field(tralbum, 'trackinfo', list, [])
        ],
    )


def encode_tralbum(album: Album) -> str:
    """Encode album into json shaped like the one on album pages.

    :param Album album: Album to encode.
    :return str: Album json.
    """
    tralbum: TralbumJson = {
        'artist': album.artist,
        'current': {
            'title': album.title,
            'art_id': album.art_id,
        },
        'item_type': album.item_type,
        'freeDownloadPage': album.free_download_page,
        'album_release_date': format_release_date(album.release_date),
        'trackinfo': [
            {
                'title': track.title,
                'track_num': track.track_number,
                'file': {'mp3-128': track.audio_url},
            }
            for track in album.tracks
        ],
    }
    return json.dumps(tralbum, ensure_ascii=False)
