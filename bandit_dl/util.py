_SAFE_NAME_TABLE = str.maketrans(
    {
        '<': '﹤',
        '>': '﹥',
        ':': 'ː',
        '/': '⁄',
        '\\': '∖',
        '|': '⼁',
        '?': '﹖',
        '*': '﹡',
    }
)


def sanitize_name(name: str) -> str:
    """Replace filesystem-unsafe characters with similar looking ones.

    Every replaced character maps onto exactly one character,
    so the name keeps its length and stays readable.

    :param str name: Artist, album or track name.
    :return str: Name safe to use as a path component on NTFS and alike.
    """
    return name.translate(_SAFE_NAME_TABLE)
