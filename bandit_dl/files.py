import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from .constants import COVER_FILENAME, DOWNLOADS_PATH
from .decorators import log_time
from .enums import PageKind, Step
from .exceptions import BanditError, FilesystemError
from .models import Album, Track
from .scraper import (
    client_session,
    fetch_bytes,
    scrape_album_page,
    scrape_storefront_page,
    stream_response,
)
from .tagger import tag_track
from .url import large_art_url, parse_page_url, small_art_url

logger = logging.getLogger('bandit-files')


@dataclass
class AlbumFailure:
    """Album which could not be downloaded."""

    url: str
    error: BanditError

    def __str__(self) -> str:
        return f'{self.url}: {self.error}'


@dataclass
class StorefrontReport:
    """Outcome of downloading every album from a storefront."""

    url: str
    downloaded: list[Path] = field(default_factory=list)
    failures: list[AlbumFailure] = field(default_factory=list)


def _fetch_album_art(
    client: httpx.Client,
    album: Album,
) -> tuple[bytes, bytes]:
    """Fetch small art for embedding and full-sized art for saving."""
    small_art = fetch_bytes(
        client,
        small_art_url(album.art_id),
        Step.ART_FETCH,
        read_step=Step.ART_READ,
    )
    large_art = fetch_bytes(
        client,
        large_art_url(album.art_id),
        Step.ART_FETCH,
        read_step=Step.ART_READ,
    )
    return small_art, large_art


def _create_album_dir(download_path: Path, album: Album) -> Path:
    album_path = download_path / album.directory

    try:
        album_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            f'Could not create album directory {album_path}: {e}',
            step=Step.MKDIR,
        ) from e

    return album_path


def _write_cover(album_path: Path, cover: bytes) -> Path:
    cover_path = album_path / COVER_FILENAME

    try:
        cover_path.write_bytes(cover)
    except OSError as e:
        raise FilesystemError(
            f'Could not write album art file {cover_path}: {e}',
            step=Step.WRITE_COVER,
        ) from e

    return cover_path


def download_track_file(
    client: httpx.Client,
    track: Track,
    album_path: Path,
) -> Path:
    """Download track audio into album directory.

    :param Client client: Http client.
    :param Track track: Track to download.
    :param Path album_path: Album directory.
    :return Path: Downloaded track file.
    :raises TransportError: Track could not be fetched.
    :raises FilesystemError: Track file could not be written.
    """
    file_path = album_path / track.filename

    with stream_response(
        client, track.audio_url, Step.FETCH_TRACK
    ) as response:
        try:
            with file_path.open('wb') as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
        except (OSError, httpx.HTTPError) as e:
            raise FilesystemError(
                f'Could not write track file {file_path}: {e}',
                step=Step.WRITE_TRACK,
            ) from e

    return file_path


@log_time
def download_album(
    url: str,
    download_path: Path = DOWNLOADS_PATH,
    safe_names: bool = True,
    client: httpx.Client | None = None,
) -> Path:
    """Download album tracks and cover into `<artist>/<title> (<year>)`.

    Album is downloaded as a whole: any failure stops the download.
    Files written before the failure are kept.

    :param str url: Album page url.
    :param Path download_path: Directory to create album directory in.
    :param bool safe_names: Replace characters unsafe for filesystems
        in artist, album and track names. Default is True.
    :param Client | None client: Http client to use.
        Default is a new client closed after the download.
    :return Path: Album directory.
    :raises AlbumError: Some download step failed.
    """
    with client_session(client) as session:
        album = scrape_album_page(session, url)

        if safe_names:
            album.sanitize_names()

        if album.free_download_page:
            logger.info(
                'This album is free to download in higher quality formats!'
            )
            logger.info(f'  {album.free_download_page}')

        logger.info(f'Downloading {album}')

        small_art: bytes | None = None
        large_art: bytes | None = None
        if album.has_art:
            small_art, large_art = _fetch_album_art(session, album)

        album_path = _create_album_dir(download_path, album)

        if large_art is not None:
            _write_cover(album_path, large_art)

        for track in album.tracks:
            file_path = download_track_file(session, track, album_path)
            tag_track(file_path, album, track, cover=small_art)
            logger.info(f' {track} ✔️')

    return album_path


def download_storefront(
    url: str,
    download_path: Path = DOWNLOADS_PATH,
    safe_names: bool = True,
    client: httpx.Client | None = None,
) -> StorefrontReport:
    """Download every album listed on a storefront page.

    Unlike :func:`download_album` a failed album does not stop
    the download: remaining albums are still downloaded
    and the failure is recorded in the report.

    :param str url: Storefront listing url.
    :param Path download_path: Directory to create album directories in.
    :param bool safe_names: See :func:`download_album`.
    :param Client | None client: Http client to use.
    :return StorefrontReport: Downloaded album directories and failures.
    :raises TransportError: Storefront page could not be fetched.
    """
    report = StorefrontReport(url=url)

    with client_session(client) as session:
        for album_url in scrape_storefront_page(session, url):
            try:
                report.downloaded.append(
                    download_album(
                        album_url,
                        download_path=download_path,
                        safe_names=safe_names,
                        client=session,
                    )
                )
            except BanditError as e:
                logger.error(f'❌ {album_url}: {e}')
                report.failures.append(AlbumFailure(url=album_url, error=e))

    return report


def download_many(
    *urls: str,
    download_path: Path = DOWNLOADS_PATH,
    safe_names: bool = True,
    client: httpx.Client | None = None,
) -> Iterator[Path | None]:
    """Download albums from album and storefront urls one by one.

    Failure of one url does not stop the others.

    :return Iterator[Path | None]: Album directory for every downloaded
        album and None for every album which failed.
    """
    with client_session(client) as session:
        for url in urls:
            try:
                kind, page_url = parse_page_url(url)

                if kind is PageKind.ALBUM:
                    yield download_album(
                        page_url,
                        download_path=download_path,
                        safe_names=safe_names,
                        client=session,
                    )
                    continue

                report = download_storefront(
                    page_url,
                    download_path=download_path,
                    safe_names=safe_names,
                    client=session,
                )
            except BanditError as e:
                logger.error(f'❌ {e}')
                yield None
                continue

            yield from report.downloaded
            yield from (None for _ in report.failures)
