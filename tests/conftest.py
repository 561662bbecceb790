import html
import json
import time
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

Route = bytes | int | Exception | Callable[[httpx.Request], httpx.Response]


class FakeWeb:
    """In-memory web serving canned responses by url."""

    def __init__(self) -> None:
        self.routes: dict[str, Route] = {}
        self.requested_urls: list[str] = []

    def add(self, url: str, route: Route) -> None:
        self.routes[url] = route

    def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested_urls.append(url)

        route = self.routes.get(url, 404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, int):
            return httpx.Response(route)
        if isinstance(route, bytes):
            return httpx.Response(200, content=route)
        return route(request)


class FailingStream(httpx.SyncByteStream):
    def __iter__(self) -> Iterator[bytes]:
        yield b'partial'
        raise httpx.ReadError('connection reset')


def tralbum_page(tralbum: dict[str, Any]) -> bytes:
    """Album page html carrying album json."""
    tralbum_json = html.escape(json.dumps(tralbum))
    return (
        '<html><head><title>Album</title></head><body>'
        f'<script data-tralbum="{tralbum_json}"></script>'
        '<h2 class="trackTitle">Album</h2>'
        '</body></html>'
    ).encode()


def make_tralbum(
    *tracks: tuple[int, str],
    artist: str = 'A',
    title: str = 'T',
    art_id: int = 0,
    **extra: Any,
) -> dict[str, Any]:
    """Album json with tracks given as (track number, title) pairs."""
    return {
        'artist': artist,
        'current': {'title': title, 'art_id': art_id},
        'item_type': 'album',
        'freeDownloadPage': '',
        'album_release_date': '01 Jan 2020 00:00:00 GMT',
        'trackinfo': [
            {
                'title': track_title,
                'track_num': track_num,
                'file': {'mp3-128': f'http://x/{track_num}.mp3'},
            }
            for track_num, track_title in tracks
        ],
        **extra,
    }


@pytest.fixture(autouse=True)
def utc_local_time(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv('TZ', 'UTC')
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def client(web: FakeWeb) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(web.handle)) as client:
        yield client
