"""
Cache package: read-through cached listings.
"""

from shared.infrastructure.cache.listing import CachedListing

__all__ = [
    "CachedListing",
]
