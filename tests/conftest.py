import io
import sys
import string
from pathlib import Path
from urllib.parse import urljoin, urlparse

import pytest
from bs4 import BeautifulSoup

# Allow tests to import the package from src without installation
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wikiart.catalog import Catalog  # noqa: E402
from wikiart.exceptions import NotFoundError  # noqa: E402

SITE = "https://www.wikiart.org"


class StubResponse:
    def __init__(self, status_code=200, text="", content=b"", url="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.content = content
        self.url = url
        self.reason = reason


class StubSession:
    def __init__(self):
        self.headers = {}
        self.mounted = {}
        self.request_calls = []
        self.request_response = StubResponse()
        self.request_exception = None
        self.closed = False

    def mount(self, prefix, adapter):
        self.mounted[prefix] = adapter

    def request(self, method, url, headers=None, verify=None, timeout=None, **kwargs):
        self.request_calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers or {},
                "verify": verify,
                "timeout": timeout,
                "kwargs": kwargs,
            }
        )
        if self.request_exception is not None:
            raise self.request_exception
        return self.request_response

    def close(self):
        self.closed = True


class DummyClient:
    """
    Lightweight stand-in for WikiArtClient serving canned HTML per URL.
    """

    def __init__(self, pages=None, missing=(), images=None, base_url=SITE):
        self.base_url = base_url
        self.pages = dict(pages or {})
        self.missing = set(missing)
        self.images = dict(images or {})
        self.calls = []

    def endpoint(self, path):
        if urlparse(path).scheme:
            return path
        return urljoin(self.base_url + "/", path.lstrip("/"))

    def is_site_url(self, url):
        return urlparse(self.endpoint(url)).netloc == urlparse(self.base_url).netloc

    def fetch(self, url):
        self.calls.append(("fetch", url))
        if url not in self.pages:
            raise NotFoundError(url=url, status_code=404)
        return BeautifulSoup(self.pages[url], "lxml")

    def check(self, url):
        self.calls.append(("check", url))
        if url in self.missing:
            raise NotFoundError(url=url, status_code=404)

    def open_stream(self, url):
        self.calls.append(("open_stream", url))
        return io.BytesIO(self.images[url])

    def count(self, kind, url=None):
        return sum(
            1 for k, u in self.calls if k == kind and (url is None or u == url)
        )


# ---------------------------------------------------------------------------
# Canned pages
# ---------------------------------------------------------------------------

MONET_URL = f"{SITE}/en/claude-monet"
MONET_WORKS_URL = f"{SITE}/en/claude-monet/all-works/text-list"
SUNRISE_URL = f"{SITE}/en/claude-monet/impression-sunrise-1872"
WATER_LILIES_URL = f"{SITE}/en/claude-monet/water-lilies"
SUNRISE_IMAGE = "https://uploads.wikiart.org/images/claude-monet/impression-sunrise.jpg"

MONET_PAGE = """
<html><body><main>
  <img itemprop="image" src="https://uploads.wikiart.org/images/claude-monet.jpg" alt="Claude Monet">
  <ul>
    <li><s>Born:</s> <span itemprop="birthDate">November 14, 1840</span></li>
    <li><s>Died:</s> <span itemprop="deathDate">December 5, 1926</span></li>
    <li><s>Nationality:</s> <span itemprop="nationality">French</span></li>
    <li class="dictionary-values">
      <s>Art Movement:</s>
      <span><a href="/en/artists-by-art-movement/impressionism">Impressionism</a></span>
    </li>
    <li class="dictionary-values">
      <s>Painting School:</s>
      <span><a href="/en/paintings-by-painting-school/barbizon-school">Barbizon School</a></span>
    </li>
    <li class="dictionary-values">
      <s>Genre:</s>
      <span><a href="/en/paintings-by-genre/landscape">landscape</a></span>
    </li>
    <li class="dictionary-values">
      <s>Field:</s>
      <span><a href="/en/artists-by-field/painting">painting</a>,
            <a href="/en/artists-by-field/drawing">drawing</a></span>
    </li>
    <li class="dictionary-values">
      <s>Influenced by:</s>
      <span><a href="/en/eugene-boudin">Eugene Boudin</a>,
            <a href="/en/artists-by-art-movement/realism">Realism</a></span>
    </li>
    <li class="dictionary-values">
      <s>Influenced on:</s>
      <span><a href="/en/pierre-auguste-renoir">Pierre-Auguste Renoir</a></span>
    </li>
    <li class="dictionary-values">
      <s>Teachers:</s>
      <span><a href="/en/eugene-boudin">Eugene Boudin</a>,
            <a href="/en/charles-gleyre">Charles Gleyre</a></span>
    </li>
  </ul>
</main></body></html>
"""

MONET_WORKS_PAGE = """
<html><body><main>
  <a href="/en/claude-monet">Claude Monet</a>
  <a href="/en/claude-monet/all-works">All works</a>
  <a href="/en/claude-monet/all-works/text-list">Text list</a>
  <a href="/en/claude-monet/mode/featured">Featured</a>
  <a href="/en/claude-monet/mode/all-paintings">All paintings</a>
  <ul class="painting-list-text">
    <li><a href="/en/claude-monet/impression-sunrise-1872">Impression, sunrise</a>, 1872</li>
    <li><a href="/en/claude-monet/water-lilies">Water Lilies</a></li>
    <li><a href="https://shop.example.com/prints/monet">Buy a print</a></li>
  </ul>
</main></body></html>
"""

SUNRISE_PAGE = """
<html><body><main>
  <img itemprop="image" src="https://uploads.wikiart.org/images/claude-monet/impression-sunrise.jpg">
  <ul>
    <li class="dictionary-values">
      <s>Style:</s> <span><a href="/en/paintings-by-style/impressionism">Impressionism</a></span>
    </li>
    <li class="dictionary-values">
      <s>Genre:</s> <span><a href="/en/paintings-by-genre/marina">marina</a></span>
    </li>
    <li class="dictionary-values">
      <s>Media:</s> <span><a href="/en/paintings-by-media/oil">oil</a>,
                          <a href="/en/paintings-by-media/canvas">canvas</a></span>
    </li>
    <li><s>Dimensions:</s> 63 x 48 cm</li>
  </ul>
  <div class="tags-cheaps">
    <span itemprop="keywords"><a href="/en/paintings-by-tag/boats">boats</a></span>
    <span itemprop="keywords"><a href="/en/paintings-by-tag/sunrise">sunrise</a></span>
  </div>
</main></body></html>
"""

EMPTY_LISTING_PAGE = """
<html><body><main>
  <a href="/en/alphabet">Artists</a>
  <a href="/en/artists-by-art-movement">Art movements</a>
  <a href="/en/artists-by-nation">Nations</a>
  <a href="/en/artists-by-century">Centuries</a>
</main></body></html>
"""

C_LISTING_PAGE = """
<html><body><main>
  <a href="/en/alphabet">Artists</a>
  <a href="/en/artists-by-art-movement">Art movements</a>
  <a href="/en/artists-by-nation">Nations</a>
  <a href="/en/artists-by-century">Centuries</a>
  <ul class="masonry-text-view">
    <li><a href="/en/camille-pissarro">Camille Pissarro</a></li>
    <li><a href="/en/charles-gleyre">Charles Gleyre</a></li>
    <li><a href="/en/claude-monet">Claude Monet</a></li>
  </ul>
</main></body></html>
"""


def listing_url(letter):
    return f"{SITE}/en/Alphabet/{letter}/text-list"


def all_listing_pages():
    pages = {listing_url(letter): EMPTY_LISTING_PAGE for letter in string.ascii_lowercase}
    pages[listing_url("c")] = C_LISTING_PAGE
    return pages


@pytest.fixture
def dummy_client():
    return DummyClient(
        pages={
            MONET_URL: MONET_PAGE,
            MONET_WORKS_URL: MONET_WORKS_PAGE,
            SUNRISE_URL: SUNRISE_PAGE,
            **all_listing_pages(),
        },
        images={SUNRISE_IMAGE: b"\x89PNG fake image bytes"},
    )


@pytest.fixture
def catalog(dummy_client):
    return Catalog(client=dummy_client)


@pytest.fixture
def stub_session():
    return StubSession()
