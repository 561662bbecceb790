import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from bandit_dl.constants import DOWNLOADS_PATH
from bandit_dl.decorators import log_time
from bandit_dl.files import download_many

logger = logging.getLogger('bandit')


def _construct_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bandit-dl',
        description='Download albums with tags and cover art.',
    )
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        '--file',
        '-f',
        help='File containing album or storefront urls',
        required=False,
    )
    input_group.add_argument(
        'URLS',
        help='Album or storefront urls',
        nargs='*',
        default=[],
    )
    parser.add_argument(
        '--output',
        '-o',
        help='Directory to download albums into',
        type=Path,
        default=DOWNLOADS_PATH,
    )
    parser.add_argument(
        '--safe-names',
        help=(
            'Convert artist, album and track names to be safe '
            'in filesystems like NTFS'
        ),
        action=argparse.BooleanOptionalAction,
        default=True,
    )
    parser.add_argument(
        '--log-file',
        help='File to append detailed log to',
        required=False,
    )

    return parser


def _configure_logging(log_file: str | None) -> None:
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(logging.INFO)
    stream_handler.setFormatter(logging.Formatter('%(message)s'))

    handlers: list[logging.Handler] = [stream_handler]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if log_file else logging.INFO,
        handlers=handlers,
        format='%(asctime)s, %(levelname)s, %(message)s, %(name)s',
        force=True,
    )
    if not log_file:
        logging.getLogger('httpx').setLevel(logging.WARNING)


def _summarize_download(downloads: Sequence[Path | None]) -> None:
    download_count = len(downloads)
    success_count = len(list(filter(None, downloads)))

    logger.info(f'Downloaded {success_count}/{download_count} albums')


@log_time
def main_cli(argv: Sequence[str] | None = None) -> None:
    parser = _construct_argparser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_file)

    urls = args.URLS
    if args.file:
        try:
            urls = Path(args.file).read_text().splitlines()
        except OSError as e:
            logger.error(f'❌ Could not read {args.file}: {e}')
            return

    urls = [url.strip() for url in urls if url.strip()]
    if not urls:
        parser.print_usage(sys.stdout)
        return

    logger.debug('Started cli script')
    logger.debug(f'Urls: {urls}')
    logger.debug(f'Output: {args.output}')
    logger.debug(f'Safe names: {args.safe_names}')

    downloads = tuple(
        download_many(
            *urls,
            download_path=args.output,
            safe_names=args.safe_names,
        )
    )
    _summarize_download(downloads)

    logger.info(
        '🎶 Thanks for using this tool and remember to support the musicians!'
    )


if __name__ == '__main__':
    main_cli()
