"""Text segmentation helpers."""

import unicodedata
from collections.abc import Iterator


def iter_clusters(text: str) -> Iterator[str]:
    """Iterate over user-perceived characters.

    The text is NFC-normalized first so precomposed forms are used where
    they exist; any remaining combining marks stay attached to the preceding
    base character. A leading combining mark forms its own cluster.

    Args:
        text: Input string

    Yields:
        One grapheme cluster at a time

    Examples:
        >>> list(iter_clusters("Café x"))
        ['C', 'a', 'f', 'é', ' ', 'x']
    """
    cluster = ""
    for char in unicodedata.normalize("NFC", text):
        if cluster and unicodedata.combining(char):
            cluster += char
            continue
        if cluster:
            yield cluster
        cluster = char
    if cluster:
        yield cluster


def is_whitespace(cluster: str) -> bool:
    """Whether a cluster only advances the cursor."""
    return cluster.isspace()
