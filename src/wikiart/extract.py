"""
Field extraction from WikiArt detail and listing pages.

Detail pages list most of their facts as "dictionary values":

    <li class="dictionary-values">
        <s>Art Movement:</s>
        <span><a href="/en/artists-by-art-movement/impressionism">Impressionism</a></span>
    </li>

Each entity declares which facts it wants in a field table (see
`ARTIST_FIELDS` and `ARTWORK_FIELDS`), so adapting to a markup change
means editing one row instead of per-field code.
"""
from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from .exceptions import ExtractionError, ParseError

if TYPE_CHECKING:
    from .catalog import Catalog
    from .entities.artists import Artist

logger = logging.getLogger(__name__)

MOVEMENT_URL_MARKER = "by-art-movement"

# Leading navigation anchors inside <main> on listing pages.
LETTER_LISTING_SKIP = 4
WORKS_LISTING_SKIP = 5

# Field kinds
SCALAR = "scalar"
LIST = "list"
ARTISTS = "artists"
DIMENSIONS = "dimensions"
KEYWORDS = "keywords"
ITEMPROP = "itemprop"
ITEMPROP_LIST = "itemprop_list"
IMAGE = "image"


@dataclass(frozen=True)
class FieldSpec:
    """One row of a field table: attribute name, page label, extraction kind."""

    name: str
    label: Optional[str]
    kind: str


ARTIST_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("image_url", None, IMAGE),
    FieldSpec("born", "birthDate", ITEMPROP),
    FieldSpec("died", "deathDate", ITEMPROP),
    FieldSpec("nationalities", "nationality", ITEMPROP_LIST),
    FieldSpec("fields", "Field:", LIST),
    FieldSpec("school", "Painting School:", SCALAR),
    FieldSpec("genre", "Genre:", SCALAR),
    FieldSpec("movement", "Art Movement:", SCALAR),
    FieldSpec("influenced_by", "Influenced by:", ARTISTS),
    FieldSpec("influenced_on", "Influenced on:", ARTISTS),
    FieldSpec("teachers", "Teachers:", ARTISTS),
    FieldSpec("pupils", "Pupils:", ARTISTS),
)

ARTWORK_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("image_url", None, IMAGE),
    FieldSpec("style", "Style:", SCALAR),
    FieldSpec("genre", "Genre:", SCALAR),
    FieldSpec("tags", None, KEYWORDS),
    FieldSpec("media", "Media:", LIST),
    FieldSpec("dimensions_cm", "Dimensions:", DIMENSIONS),
)


# ---------------------------------------------------------------------------
# Node collections
# ---------------------------------------------------------------------------

def dictionary_nodes(doc: BeautifulSoup) -> List[Tag]:
    return doc.find_all("li", class_="dictionary-values")


def keyword_nodes(doc: BeautifulSoup) -> List[Tag]:
    return doc.find_all("span", itemprop="keywords")


def _find_labeled(nodes: Iterable[Tag], label: str) -> Optional[Tag]:
    for node in nodes:
        if label in node.get_text():
            return node
    return None


def _link_texts(node: Tag) -> List[str]:
    return [a.get_text(strip=True) for a in node.find_all("a")]


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------

def extract_scalar(nodes: Iterable[Tag], label: str) -> Optional[str]:
    """Text of the first link inside the first node mentioning `label`."""
    node = _find_labeled(nodes, label)
    if node is None:
        return None
    link = node.find("a")
    if link is None:
        return None
    return link.get_text(strip=True)


def extract_list(nodes: Iterable[Tag], label: str) -> List[str]:
    """Texts of every link inside the first node mentioning `label`."""
    node = _find_labeled(nodes, label)
    if node is None:
        return []
    return _link_texts(node)


def is_artist_page_url(url: str) -> bool:
    """False for links that point at something else, like a movement index."""
    return MOVEMENT_URL_MARKER not in url


def extract_artist_refs(catalog: "Catalog", nodes: Iterable[Tag], label: str) -> List["Artist"]:
    """
    Resolve the links of a labeled node to Artist objects.

    Artists are obtained through the catalog without validation, and
    their own pages are not fetched here.
    """
    node = _find_labeled(nodes, label)
    if node is None:
        return []

    artists = []
    for link in node.find_all("a"):
        url = catalog.client.endpoint(link.get("href", ""))
        if not is_artist_page_url(url):
            continue
        name = link.get_text(strip=True)
        if not name:
            continue
        artists.append(catalog.resolve_artist(name))
    return artists


def parse_dimensions(text: str, label: str = "") -> Tuple[float, float]:
    """
    Parse "Dimensions: 73 x 91 cm" into (73.0, 91.0).

    Raises:
        ParseError: if the text is not two numbers separated by 'x'
    """
    raw = re.sub(r"\s+", "", text.replace(label, "")).replace("cm", "")
    parts = raw.split("x")
    if len(parts) != 2:
        raise ParseError(f"Cannot read dimensions from {text.strip()!r}")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise ParseError(f"Cannot read dimensions from {text.strip()!r}") from exc


def extract_dimensions(nodes: Iterable[Tag], label: str) -> Optional[Tuple[float, float]]:
    node = _find_labeled(nodes, label)
    if node is None:
        return None
    return parse_dimensions(node.get_text(), label)


def extract_image_url(doc: BeautifulSoup) -> str:
    """
    Source of the page's main image.

    Raises:
        ExtractionError: if the page has no `<img itemprop="image">`
    """
    img = doc.find("img", itemprop="image")
    if img is None or not img.get("src"):
        raise ExtractionError("Page has no main image")
    return html.unescape(img["src"])


def extract_itemprop_text(doc: BeautifulSoup, prop: str) -> Optional[str]:
    span = doc.find("span", itemprop=prop)
    if span is None:
        return None
    return span.get_text(strip=True)


def extract_itemprop_list(doc: BeautifulSoup, prop: str) -> List[str]:
    return [span.get_text(strip=True) for span in doc.find_all("span", itemprop=prop)]


def extract_keywords(nodes: Iterable[Tag]) -> List[str]:
    tags: List[str] = []
    for node in nodes:
        tags.extend(_link_texts(node))
    return tags


def listing_links(doc: BeautifulSoup, skip: int) -> List[str]:
    """
    Hrefs of the anchors inside `<main>` after the first `skip` ones.

    Raises:
        ExtractionError: if the page has no `<main>` element
    """
    main = doc.find("main")
    if main is None:
        raise ExtractionError("Listing page has no <main> element")
    anchors = main.find_all("a")[skip:]
    return [a["href"] for a in anchors if a.get("href")]


# ---------------------------------------------------------------------------
# Table driver
# ---------------------------------------------------------------------------

def extract_fields(
    catalog: "Catalog",
    doc: BeautifulSoup,
    table: Sequence[FieldSpec],
) -> Dict[str, Any]:
    """
    Apply a field table to a detail page.

    Either every field is extracted or an exception propagates; the
    caller commits the returned dict as a whole.
    """
    dict_nodes = dictionary_nodes(doc)
    values: Dict[str, Any] = {}

    for spec in table:
        if spec.kind == SCALAR:
            values[spec.name] = extract_scalar(dict_nodes, spec.label)
        elif spec.kind == LIST:
            values[spec.name] = extract_list(dict_nodes, spec.label)
        elif spec.kind == ARTISTS:
            values[spec.name] = extract_artist_refs(catalog, dict_nodes, spec.label)
        elif spec.kind == DIMENSIONS:
            values[spec.name] = extract_dimensions(doc.find_all("li"), spec.label)
        elif spec.kind == KEYWORDS:
            values[spec.name] = extract_keywords(keyword_nodes(doc))
        elif spec.kind == ITEMPROP:
            values[spec.name] = extract_itemprop_text(doc, spec.label)
        elif spec.kind == ITEMPROP_LIST:
            values[spec.name] = extract_itemprop_list(doc, spec.label)
        elif spec.kind == IMAGE:
            values[spec.name] = extract_image_url(doc)
        else:
            raise ValueError(f"Unknown field kind {spec.kind!r} for {spec.name!r}")

    logger.debug("Extracted %d fields", len(values))
    return values
