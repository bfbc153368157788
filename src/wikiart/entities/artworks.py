# entities/artworks.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, BinaryIO, Dict, List, Optional, Tuple

from ..extract import ARTWORK_FIELDS
from ..normalize import slug_from_url, title_and_year_from_slug
from .base import BaseEntity, LazyField

if TYPE_CHECKING:
    from .artists import Artist


class Artwork(BaseEntity):
    """
    An artwork page on WikiArt.

    Title and year come from the URL slug at construction and never
    change. Everything else is pulled from the artwork page on first use.
    """

    FIELDS = ARTWORK_FIELDS

    style: Optional[str] = LazyField()
    genre: Optional[str] = LazyField()
    tags: List[str] = LazyField(default_factory=list)
    media: List[str] = LazyField(default_factory=list)
    dimensions_cm: Optional[Tuple[float, float]] = LazyField()
    image_url: Optional[str] = LazyField()

    def __init__(self, artist: "Artist", page_url: str) -> None:
        super().__init__(artist.catalog)
        self._artist = artist
        self._page_url = page_url
        self._title, self._year = title_and_year_from_slug(slug_from_url(page_url))

    @property
    def artist(self) -> "Artist":
        return self._artist

    @property
    def page_url(self) -> str:
        return self._page_url

    @property
    def title(self) -> str:
        return self._title

    @property
    def year(self) -> Optional[int]:
        return self._year

    # ------------------------------------------------------------------ #
    # Image
    # ------------------------------------------------------------------ #

    def get_image_stream(self) -> BinaryIO:
        """Download the artwork image and return it as a binary stream."""
        return self.client.open_stream(self.image_url)

    def get_image_bytes(self) -> bytes:
        with self.get_image_stream() as stream:
            return stream.read()

    # ------------------------------------------------------------------ #
    # Representation
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        dims = self.dimensions_cm
        return {
            "title": self.title,
            "year": self.year,
            "artist": self.artist.name,
            "url": self.page_url,
            "style": self.style,
            "genre": self.genre,
            "tags": self.tags,
            "media": self.media,
            "dimensions_cm": list(dims) if dims else None,
            "image_url": self.image_url,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} title='{self.title}' year={self.year}>"

    def __str__(self) -> str:
        if self.year is None:
            return f"{self.title} ({self.artist.name})"
        return f"{self.title}, {self.year} ({self.artist.name})"
