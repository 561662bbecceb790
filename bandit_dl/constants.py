import re
from pathlib import Path

ART_BASE_URL = 'https://f4.bcbits.com/img'
"""Album art host with protocol and without trailing slash."""
SMALL_ART_URL = ART_BASE_URL + '/a{art_id}_16.jpg'
"""Small album art, embedded into track tags."""
LARGE_ART_URL = ART_BASE_URL + '/a{art_id}_0.jpg'
"""Full-sized album art, saved next to the tracks."""

ALBUM_PATH_PREFIX = '/album'
"""Path prefix of every album page."""
STOREFRONT_PATH = '/music'
"""Path of the storefront listing page."""

TRALBUM_ATTRIBUTE = 'data-tralbum'
"""Html attribute holding album json."""
ITEM_ID_ATTRIBUTE = 'data-item-id'
"""Html attribute marking an item on the storefront listing."""

DOWNLOADS_PATH = Path()
"""Default file downloads path"""
COVER_FILENAME = 'cover.jpg'
COVER_MIME_TYPE = 'image/jpeg'
COVER_DESCRIPTION = 'Front cover'

REQUEST_TIMEOUT_SECONDS = 60.0
"""Maximum number of seconds to wait for any single network operation."""
USER_AGENT = 'bandit-dl/0.1'

MONTH_ABBREVIATIONS = (
    'Jan',
    'Feb',
    'Mar',
    'Apr',
    'May',
    'Jun',
    'Jul',
    'Aug',
    'Sep',
    'Oct',
    'Nov',
    'Dec',
)

RELEASE_DATE_REGEX = re.compile(
    r'(\d{2}) ([A-Za-z]{3}) (\d{4}) (\d{1,2}):(\d{2}):(\d{2}) GMT',
    re.ASCII,
)
"""
Regex to parse album release date,
e.g. `01 Jan 2020 00:00:00 GMT`.
"""
