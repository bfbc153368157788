"""
Example: Browsing an artist and their works with the WikiArt client

This example looks up one artist, prints the facts from their page,
follows their teachers and influences, and lists a few artworks.

Usage:
    python examples/explore_artist.py [-v] "Claude Monet"
"""

import logging
import sys

from wikiart import Catalog, NotFoundError, WikiArtClient


def main():
    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    name = args[0] if args else "Claude Monet"
    verbose = "-v" in sys.argv[1:]

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    # -------------------------------------------------------------------------
    # 1. Initialize the Catalog
    # -------------------------------------------------------------------------

    catalog = Catalog(WikiArtClient(default_timeout=15.0))

    try:
        artist = catalog.get_artist(name)
    except NotFoundError:
        print(f"No WikiArt page for {name!r}")
        return 1

    # -------------------------------------------------------------------------
    # 2. Artist details (one page pull for all of them)
    # -------------------------------------------------------------------------

    print(f"=== {artist.name} ===\n")
    print(f"  Born: {artist.born}")
    print(f"  Died: {artist.died}")
    print(f"  Nationality: {', '.join(artist.nationalities)}")
    print(f"  Movement: {artist.movement}")
    print(f"  Genre: {artist.genre}")
    print(f"  Fields: {', '.join(artist.fields)}")

    # -------------------------------------------------------------------------
    # 3. Related artists come from the same catalog
    # -------------------------------------------------------------------------

    print("\n=== Related artists ===\n")
    for label, related in (
        ("Teachers", artist.teachers),
        ("Pupils", artist.pupils),
        ("Influenced by", artist.influenced_by),
        ("Influenced on", artist.influenced_on),
    ):
        print(f"  {label}: {', '.join(a.name for a in related) or '-'}")

    # -------------------------------------------------------------------------
    # 4. Works (one listing pull, details per artwork on demand)
    # -------------------------------------------------------------------------

    works = artist.works
    print(f"\n=== Works ({len(works)}) ===\n")
    for work in works[:5]:
        print(f"  - {work}")
        print(f"      style={work.style} genre={work.genre} size={work.dimensions_cm}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
