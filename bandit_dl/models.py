from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .util import sanitize_name


@dataclass
class Track:
    """Some album track."""

    title: str
    track_number: int
    audio_url: str = field(repr=False)

    def __str__(self) -> str:
        return f'{self.track_number} {self.title}'

    @property
    def filename(self) -> str:
        """Track's filename with zero-padded track number."""
        return f'{self.track_number:02d} {self.title}.mp3'


@dataclass
class Album:
    """Some album decoded from page data."""

    artist: str
    title: str
    art_id: int
    item_type: str
    free_download_page: str
    release_date: datetime

    tracks: list[Track] = field(
        repr=False,
        default_factory=list,
    )

    def __str__(self) -> str:
        return f'{self.artist} {self.title} {self.year}'

    @property
    def year(self) -> str:
        """Release year in local time.

        Falls back to UTC year for dates at the edges of datetime range.
        """
        try:
            release_date = self.release_date.astimezone()
        except OverflowError:
            release_date = self.release_date
        return f'{release_date.year:04d}'

    @property
    def has_art(self) -> bool:
        """Whether album has cover art."""
        return self.art_id != 0

    @property
    def directory(self) -> Path:
        """Album directory relative to downloads path."""
        return Path(self.artist) / f'{self.title} ({self.year})'

    def sanitize_names(self) -> None:
        """Make artist, album and track names safe to use in paths."""
        self.artist = sanitize_name(self.artist)
        self.title = sanitize_name(self.title)
        for track in self.tracks:
            track.title = sanitize_name(track.title)
