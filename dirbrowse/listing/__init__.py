"""Directory-listing domain model.

This package contains non-UI listing primitives:
- entry/listing datatypes with a closed entry-kind classification
- the filesystem scan that builds one listing for one directory
"""

from __future__ import annotations

from ..errors import ListingUnavailable
from .fs import absolute_directory_path, build_listing, classify_mode
from .types import Entry, EntryKind, Listing

__all__ = [
    "Entry",
    "EntryKind",
    "Listing",
    "ListingUnavailable",
    "absolute_directory_path",
    "build_listing",
    "classify_mode",
]
