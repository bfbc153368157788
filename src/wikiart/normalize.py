"""
Conversions between WikiArt URL slugs and human-readable names.

    >>> to_canonical_name("pablo-picasso")
    'Pablo Picasso'
    >>> to_slug("Pablo Picasso")
    'pablo-picasso'
    >>> title_and_year_from_slug("girl-with-a-pearl-earring-1665")
    ('Girl With A Pearl Earring', 1665)
"""

from typing import Optional, Tuple
from urllib.parse import unquote, urlparse

SLUG_SEPARATOR = "-"
ARTIST_PATH_MARKER = "/en/"


def _title_word(word: str) -> str:
    # Words written entirely in capitals are treated as acronyms.
    if word.isupper():
        return word
    return word[:1].upper() + word[1:].lower()


def to_canonical_name(slug: str) -> str:
    """Percent-decode a slug, turn separators into spaces and title-case it."""
    text = unquote(slug).replace(SLUG_SEPARATOR, " ")
    return " ".join(_title_word(w) for w in text.split(" "))


def to_slug(name: str) -> str:
    return name.lower().replace(" ", SLUG_SEPARATOR)


def canonical_key(name: str) -> str:
    """Key under which a name is stored in a Catalog."""
    return to_canonical_name(to_slug(name.strip()))


def title_and_year_from_slug(slug: str) -> Tuple[str, Optional[int]]:
    """
    Split a trailing year off an artwork slug.

    A title that genuinely ends in a number ("composition-8") is read as
    a title plus a year.
    """
    slug = unquote(slug)
    head, sep, tail = slug.rpartition(SLUG_SEPARATOR)
    if sep:
        try:
            year = int(tail)
        except ValueError:
            pass
        else:
            return to_canonical_name(head), year
    return to_canonical_name(slug), None


def slug_from_url(url: str) -> str:
    """Last path segment of a URL."""
    path = urlparse(url).path.rstrip("/")
    return path.rsplit("/", 1)[-1]


def name_from_url(url: str) -> str:
    """Canonical artist name from an artist page URL (`.../en/claude-monet`)."""
    path = urlparse(url).path.rstrip("/")
    idx = path.rfind(ARTIST_PATH_MARKER)
    slug = path[idx + len(ARTIST_PATH_MARKER):] if idx != -1 else path.rsplit("/", 1)[-1]
    return to_canonical_name(slug)
