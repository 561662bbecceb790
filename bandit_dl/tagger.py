"""Writes album and track data as ID3 tags to downloaded tracks."""

import logging
from pathlib import Path

import mutagen.id3 as id3
from mutagen import MutagenError
from mutagen.id3 import Encoding, ID3NoHeaderError, PictureType

from .constants import COVER_DESCRIPTION, COVER_MIME_TYPE
from .enums import Step
from .exceptions import TagError
from .models import Album, Track

logger = logging.getLogger('bandit-tagger')


def _open_tags(file_path: Path) -> id3.ID3:
    try:
        return id3.ID3(file_path)
    except ID3NoHeaderError:
        return id3.ID3()
    except (MutagenError, OSError) as e:
        raise TagError(
            f'Could not open track file {file_path}: {e}', step=Step.TAG_OPEN
        ) from e


def tag_track(
    file_path: Path,
    album: Album,
    track: Track,
    cover: bytes | None = None,
) -> None:
    """Write album and track data to track file tags.

    Existing tags are kept unless overwritten.

    :param Path file_path: Downloaded track file.
    :param Album album: Album to which track belongs.
    :param Track track: Track data.
    :param bytes | None cover: Image to embed as front cover.
        Nothing is embedded if None.
    :raises TagError: Tags could not be read from or saved to the file.
    """
    tags = _open_tags(file_path)

    tags.add(id3.TPE1(encoding=Encoding.UTF8, text=album.artist))
    tags.add(id3.TALB(encoding=Encoding.UTF8, text=album.title))
    tags.add(id3.TDRC(encoding=Encoding.UTF8, text=album.year))
    tags.add(id3.TIT2(encoding=Encoding.UTF8, text=track.title))
    tags.add(id3.TRCK(encoding=Encoding.UTF8, text=str(track.track_number)))

    if cover is not None:
        tags.add(
            id3.APIC(
                encoding=Encoding.UTF8,
                mime=COVER_MIME_TYPE,
                type=PictureType.COVER_FRONT,
                desc=COVER_DESCRIPTION,
                data=cover,
            )
        )

    try:
        tags.save(file_path)
    except (MutagenError, OSError) as e:
        raise TagError(
            f'Could not save track file {file_path}: {e}', step=Step.TAG_SAVE
        ) from e

    logger.debug(f'Tagged track {track} in {file_path}')
