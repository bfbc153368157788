from .artists import Artist
from .artworks import Artwork
from .base import BaseEntity, LazyField

__all__ = ["Artist", "Artwork", "BaseEntity", "LazyField"]
