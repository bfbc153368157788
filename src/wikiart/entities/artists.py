# entities/artists.py
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..extract import ARTIST_FIELDS, WORKS_LISTING_SKIP, listing_links
from ..normalize import to_slug
from .artworks import Artwork
from .base import BaseEntity, LazyField

if TYPE_CHECKING:
    from ..catalog import Catalog

logger = logging.getLogger(__name__)


class Artist(BaseEntity):
    """
    An artist page on WikiArt (`/en/{slug}`).

    Detail attributes are pulled together from the artist page the first
    time any of them is read. `works` is pulled separately from the
    artist's text listing. Referenced artists (teachers, pupils,
    influences) come from the same catalog and are not expanded.

    Obtain artists through `Catalog.get_artist` or `Catalog.resolve_artist`.
    Calling the constructor directly bypasses the catalog, so the new
    object is not shared with anything that catalog hands out.
    """

    FIELDS = ARTIST_FIELDS

    movement: Optional[str] = LazyField()
    genre: Optional[str] = LazyField()
    school: Optional[str] = LazyField()
    born: Optional[str] = LazyField()
    died: Optional[str] = LazyField()
    image_url: Optional[str] = LazyField()

    nationalities: List[str] = LazyField(default_factory=list)
    fields: List[str] = LazyField(default_factory=list)

    influenced_by: List["Artist"] = LazyField(default_factory=list)
    influenced_on: List["Artist"] = LazyField(default_factory=list)
    teachers: List["Artist"] = LazyField(default_factory=list)
    pupils: List["Artist"] = LazyField(default_factory=list)

    def __init__(self, catalog: "Catalog", name: str, *, validate: bool = False) -> None:
        super().__init__(catalog)
        self._name = name
        self._works: List[Artwork] = []
        self._works_loaded = False
        self._works_lock = threading.Lock()

        if validate:
            logger.debug("Checking that %s exists", self.page_url)
            self.client.check(self.page_url)

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> str:
        return to_slug(self._name)

    @property
    def page_url(self) -> str:
        return self.client.endpoint(f"/en/{self.slug}")

    @property
    def works_url(self) -> str:
        return self.client.endpoint(f"/en/{self.slug}/all-works/text-list")

    # ------------------------------------------------------------------ #
    # Works
    # ------------------------------------------------------------------ #

    @property
    def works_loaded(self) -> bool:
        return self._works_loaded

    @property
    def works(self) -> List[Artwork]:
        self.load_works()
        return self._works

    def load_works(self) -> None:
        """Pull the works listing unless that already happened."""
        if self._works_loaded:
            return
        with self._works_lock:
            if self._works_loaded:
                return
            logger.debug("Pulling works of %r from %s", self, self.works_url)
            doc = self.client.fetch(self.works_url)

            works = []
            for href in listing_links(doc, WORKS_LISTING_SKIP):
                url = self.client.endpoint(href)
                if not self.client.is_site_url(url):
                    continue
                works.append(Artwork(self, url))

            self._works = works
            self._works_loaded = True

    # ------------------------------------------------------------------ #
    # Representation
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "url": self.page_url,
            "born": self.born,
            "died": self.died,
            "nationalities": self.nationalities,
            "movement": self.movement,
            "genre": self.genre,
            "school": self.school,
            "fields": self.fields,
            "image_url": self.image_url,
            "influenced_by": [a.name for a in self.influenced_by],
            "influenced_on": [a.name for a in self.influenced_on],
            "teachers": [a.name for a in self.teachers],
            "pupils": [a.name for a in self.pupils],
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name='{self.name}'>"

    def __str__(self) -> str:
        return self.name
