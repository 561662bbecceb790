from .enums import Step


class BanditError(Exception):
    """Base class for bandit-dl errors."""


class InvalidUrl(BanditError):
    """Requested url is neither album nor storefront url."""


class AlbumError(BanditError):
    """Album could not be downloaded.

    :param str message: Error description.
    :param Step | None step: Download step which failed.
        None if error was raised outside of album download.
    """

    def __init__(self, message: str, step: Step | None = None) -> None:
        super().__init__(message)
        self.step = step


class TransportError(AlbumError):
    """Resource could not be fetched."""


class ParseError(AlbumError):
    """Html or json is structurally invalid."""


class DecodeError(ParseError):
    """Album json could not be decoded into album data."""


class NotFoundError(AlbumError):
    """Requested data is missing from provided html."""


class FilesystemError(AlbumError):
    """Directory or file could not be created or written."""


class TagError(AlbumError):
    """Track tags could not be opened or saved."""
