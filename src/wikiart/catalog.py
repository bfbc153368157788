"""
Registry of WikiArt artists.

A Catalog hands out exactly one Artist object per canonical name for as
long as it lives, which keeps the teacher/pupil/influence graph finite.
Artists and artworks hold a reference to the catalog that created them;
there is no module-level registry.
"""
from __future__ import annotations

import logging
import string
import threading
from typing import Dict, Iterator, List, Optional, Set

from .client import WikiArtClient
from .entities.artists import Artist
from .extract import LETTER_LISTING_SKIP, listing_links
from .normalize import canonical_key, name_from_url

logger = logging.getLogger(__name__)

LISTING_LETTERS = string.ascii_lowercase


class Catalog:
    """
    Indexable view over the artists known so far.

    Supports:
      - catalog.get_artist("Claude Monet")   -> validated Artist
      - catalog["Claude Monet"]              -> same as get_artist
      - catalog.get_artists_by_letter("c")   -> pulls one listing page
      - catalog.get_all_artists()            -> pulls every listing page
      - len(catalog), iter(catalog), "Claude Monet" in catalog
        -> over the artists already cached, without network access
    """

    def __init__(self, client: Optional[WikiArtClient] = None) -> None:
        self.client = client if client is not None else WikiArtClient()
        self._artists: Dict[str, Artist] = {}
        self._pulled_letters: Set[str] = set()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------ #
    # Artist lookup
    # ------------------------------------------------------------------ #

    @staticmethod
    def _key(name: str) -> str:
        key = canonical_key(name)
        if not key.strip():
            raise ValueError(f"Expected an artist name, got {name!r}")
        return key

    def get_artist(self, name: str) -> Artist:
        """
        Return the artist called `name`, checking the site the first time.

        Raises:
            ValueError: if `name` is empty
            NotFoundError: if the site has no page for that name
        """
        key = self._key(name)
        with self._lock:
            artist = self._artists.get(key)
            if artist is None:
                artist = Artist(self, key, validate=True)
                self._artists[key] = artist
            return artist

    def resolve_artist(self, name: str) -> Artist:
        """Return the artist called `name`, creating it without network access."""
        key = self._key(name)
        with self._lock:
            artist = self._artists.get(key)
            if artist is None:
                artist = Artist(self, key)
                self._artists[key] = artist
            return artist

    def get_all_artists(self) -> List[Artist]:
        """Pull every letter listing not pulled yet and return all cached artists."""
        for letter in LISTING_LETTERS:
            self.pull_listing_letter(letter)
        with self._lock:
            return list(self._artists.values())

    def get_artists_by_letter(self, letter: str) -> List[Artist]:
        """Pull one letter listing (once) and return the cached artists starting with it."""
        letter = self._normalize_letter(letter)
        self.pull_listing_letter(letter)
        with self._lock:
            return [
                artist
                for key, artist in self._artists.items()
                if key.lower().startswith(letter)
            ]

    # ------------------------------------------------------------------ #
    # Listing pages
    # ------------------------------------------------------------------ #

    @staticmethod
    def _normalize_letter(letter: str) -> str:
        if len(letter) != 1 or letter.lower() not in LISTING_LETTERS:
            raise ValueError(f"Expected a single letter a-z, got {letter!r}")
        return letter.lower()

    def listing_url(self, letter: str) -> str:
        return self.client.endpoint(f"/en/Alphabet/{letter}/text-list")

    def pull_listing_letter(self, letter: str) -> None:
        """
        Fetch the artist listing for one letter and cache every artist on it.

        Listed artists are not validated. A letter is marked as pulled
        even if its page lists nobody, so it is never fetched twice.
        """
        letter = self._normalize_letter(letter)
        with self._lock:
            if letter in self._pulled_letters:
                return

            url = self.listing_url(letter)
            logger.debug("Pulling artist listing for %r from %s", letter, url)
            doc = self.client.fetch(url)

            added = 0
            for href in listing_links(doc, LETTER_LISTING_SKIP):
                key = canonical_key(name_from_url(self.client.endpoint(href)))
                if key and key not in self._artists:
                    self._artists[key] = Artist(self, key)
                    added += 1

            self._pulled_letters.add(letter)
            logger.debug("Letter %r added %d artists", letter, added)

    @property
    def pulled_letters(self) -> Set[str]:
        with self._lock:
            return set(self._pulled_letters)

    # ------------------------------------------------------------------ #
    # Python container protocol
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self._artists)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_key(name) in self._artists

    def __iter__(self) -> Iterator[Artist]:
        with self._lock:
            artists = list(self._artists.values())
        return iter(artists)

    def __getitem__(self, name: str) -> Artist:
        if not isinstance(name, str):
            raise TypeError(f"Unsupported key type: {type(name)!r}")
        return self.get_artist(name)

    # ------------------------------------------------------------------ #
    # Helpers for editor / IPython completion
    # ------------------------------------------------------------------ #

    def names(self) -> List[str]:
        """Canonical names of the artists cached so far."""
        with self._lock:
            return list(self._artists)

    def _ipython_key_completions_(self):
        return self.names()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} artists={len(self)} letters={''.join(sorted(self._pulled_letters))!r}>"
