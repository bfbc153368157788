# entities/base.py
from __future__ import annotations

import json
import logging
import threading
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Dict,
    Generic,
    Optional,
    Sequence,
    TypeVar,
)

from ..extract import FieldSpec, extract_fields

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

    from ..catalog import Catalog

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LazyField(Generic[T]):
    """
    Descriptor mapping an attribute to a key in `entity.data`.

    Reading the attribute on an entity whose details have not been
    pulled yet triggers `entity.load()` first.

    Example:
        genre: Optional[str] = LazyField()
    """

    def __init__(
        self,
        key: Optional[str] = None,
        *,
        default: Optional[T] = None,
        default_factory: Optional[Callable[[], T]] = None,
    ) -> None:
        self.key = key
        self.default = default
        self.default_factory = default_factory
        self.name: Optional[str] = None

    def __set_name__(self, owner, name: str) -> None:
        if self.key is None:
            self.key = name
        self.name = name

    def __get__(self, instance, owner=None) -> T:
        if instance is None:
            return self

        key = self.key
        assert key is not None

        instance.load()

        if key in instance.data:
            return instance.data[key]

        if self.default_factory is not None:
            return self.default_factory()

        return self.default

    def __set__(self, instance, value: T) -> None:
        raise AttributeError(f"Field '{self.name}' is read-only")


class BaseEntity:
    """
    Lazily populated proxy for one WikiArt detail page.

    An entity is either unloaded (only its identity is known) or loaded
    (every field of `FIELDS` was extracted from one page pull). The
    transition happens once, under a per-entity lock, and commits all
    fields together. A failed pull leaves the entity unloaded.

    Subclasses must define:
      - FIELDS    the field table applied to the detail page
      - page_url  absolute URL of the detail page
    """

    FIELDS: ClassVar[Sequence[FieldSpec]] = ()

    def __init__(self, catalog: "Catalog") -> None:
        self.catalog = catalog
        self.data: Dict[str, Any] = {}
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def client(self):
        return self.catalog.client

    @property
    def page_url(self) -> str:
        raise NotImplementedError

    @property
    def loaded(self) -> bool:
        """Whether the detail page has been pulled."""
        return self._loaded

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def _pull(self) -> Dict[str, Any]:
        logger.debug("Pulling details for %r from %s", self, self.page_url)
        doc = self.client.fetch(self.page_url)
        return self._extract(doc)

    def _extract(self, doc: "BeautifulSoup") -> Dict[str, Any]:
        return extract_fields(self.catalog, doc, self.FIELDS)

    def load(self) -> None:
        """Pull the detail page unless that already happened."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            values = self._pull()
            self.data.update(values)
            self._loaded = True

    def refresh(self) -> None:
        """Pull the detail page again and replace every detail field."""
        with self._lock:
            values = self._pull()
            self.data.update(values)
            self._loaded = True

    # ------------------------------------------------------------------ #
    # Representation / display helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def show(self) -> None:
        """Pretty-print the entity (pulls details if needed)."""
        print(json.dumps(self.to_dict(), indent=2, ensure_ascii=False))
