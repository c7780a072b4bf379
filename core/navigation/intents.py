"""Navigation intents: what the user wants to see next.

Intents are built fresh for every interaction. Their only durable form is the
callback token attached to a button (see ``core.navigation.tokens``).
Listing pages are 1-based; ``TextPage.page_index`` is 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BrowseCollections:
    page: int = 1


@dataclass(frozen=True)
class BrowseBooks:
    collection: str
    page: int = 1


@dataclass(frozen=True)
class BrowseHadiths:
    collection: str
    book: int
    page: int = 1


@dataclass(frozen=True)
class HadithDetail:
    collection: str
    book: int
    list_page: int
    # position within the listing page, not within the book
    index: int


@dataclass(frozen=True)
class HadithByNumber:
    collection: str
    hadith_number: int


@dataclass(frozen=True)
class SearchResults:
    query: str
    page: int = 1


@dataclass(frozen=True)
class RandomHadith:
    collection: str
    hadith_number: int


@dataclass(frozen=True)
class TextPage:
    source: "DocumentIntent"
    page_index: int = 0


@dataclass(frozen=True)
class PickRandom:
    pass


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class SearchPrompt:
    pass


DocumentIntent = Union[HadithDetail, HadithByNumber, RandomHadith]

Intent = Union[
    BrowseCollections,
    BrowseBooks,
    BrowseHadiths,
    HadithDetail,
    HadithByNumber,
    SearchResults,
    RandomHadith,
    TextPage,
    PickRandom,
    ShowHelp,
    SearchPrompt,
]


__all__ = [
    "BrowseBooks",
    "BrowseCollections",
    "BrowseHadiths",
    "DocumentIntent",
    "HadithByNumber",
    "HadithDetail",
    "Intent",
    "PickRandom",
    "RandomHadith",
    "SearchPrompt",
    "SearchResults",
    "ShowHelp",
    "TextPage",
]
