"""wikiart - A small read-only client for artists and artworks on WikiArt.org."""

import logging

from .catalog import Catalog
from .client import WikiArtClient
from .entities.artists import Artist
from .entities.artworks import Artwork
from .exceptions import (
    ExtractionError,
    FetchError,
    NotFoundError,
    ParseError,
    WikiArtError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Catalog",
    "WikiArtClient",
    "Artist",
    "Artwork",
    "WikiArtError",
    "FetchError",
    "NotFoundError",
    "ExtractionError",
    "ParseError",
]
__version__ = "0.1.0"
