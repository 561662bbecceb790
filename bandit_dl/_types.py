from __future__ import annotations

from typing import TypedDict

TrackFileJson = TypedDict('TrackFileJson', {'mp3-128': str}, total=False)


class TrackInfoJson(TypedDict, total=False):
    title: str
    track_num: int
    file: TrackFileJson


class TralbumCurrentJson(TypedDict, total=False):
    title: str
    art_id: int


class TralbumJson(TypedDict, total=False):
    artist: str
    current: TralbumCurrentJson
    item_type: str
    freeDownloadPage: str
    album_release_date: str
    trackinfo: list[TrackInfoJson]
