from __future__ import annotations

import random
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from .models import (
    PREFERRED_RANDOM_COLLECTIONS,
    Book,
    Collection,
    Hadith,
    HadithPage,
    RandomPick,
)

DEFAULT_PAGE_SIZE = 10
DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 50


def page_of(items: Sequence[Hadith], page: int, limit: int) -> HadithPage:
    """Slice ``items`` into a 1-based page; pages past the end come back empty."""
    if limit < 1:
        limit = DEFAULT_PAGE_SIZE
    page = max(page, 1)
    total = len(items)
    total_pages = (total + limit - 1) // limit
    start = (page - 1) * limit
    if start >= total:
        return HadithPage(items=(), total=total, page=page, total_pages=total_pages)
    return HadithPage(
        items=tuple(items[start : start + limit]),
        total=total,
        page=page,
        total_pages=total_pages,
    )


class CollectionStore:
    """Read-only corpus of collections, books and hadiths.

    All tables are frozen at construction, so any number of handlers may read
    concurrently without locking.
    """

    def __init__(
        self,
        collections: Iterable[Collection],
        books: Mapping[str, Sequence[Book]] | None = None,
        hadiths: Mapping[str, Sequence[Hadith]] | None = None,
        *,
        preferred: Sequence[str] = PREFERRED_RANDOM_COLLECTIONS,
    ) -> None:
        self._collections = tuple(collections)
        self._collection_index = MappingProxyType({c.name: c for c in self._collections})
        self._books = MappingProxyType(
            {name: tuple(items) for name, items in (books or {}).items()}
        )
        self._hadiths = MappingProxyType(
            {name: tuple(items) for name, items in (hadiths or {}).items()}
        )
        by_chapter: dict[str, dict[int, tuple[Hadith, ...]]] = {}
        for name, items in self._hadiths.items():
            grouped: dict[int, list[Hadith]] = {}
            for hadith in items:
                grouped.setdefault(hadith.chapter_id, []).append(hadith)
            by_chapter[name] = {chapter: tuple(group) for chapter, group in grouped.items()}
        self._by_chapter = MappingProxyType(by_chapter)
        self.preferred = tuple(preferred)

    def get_collections(self) -> tuple[Collection, ...]:
        return self._collections

    def get_collection(self, name: str) -> Collection | None:
        return self._collection_index.get(name)

    def display_name(self, name: str) -> str:
        collection = self.get_collection(name)
        return collection.title if collection is not None else name

    def get_books(self, collection: str) -> tuple[Book, ...]:
        return self._books.get(collection, ())

    def get_book(self, collection: str, book_number: int) -> Book | None:
        for book in self.get_books(collection):
            if book.book_number == book_number:
                return book
        return None

    def get_book_for_hadith(self, collection: str, hadith: Hadith) -> Book | None:
        for book in self.get_books(collection):
            if book.chapter_id == hadith.chapter_id:
                return book
        return None

    def get_hadiths(
        self, collection: str, book_number: int, page: int, limit: int = DEFAULT_PAGE_SIZE
    ) -> HadithPage:
        """Page through a book's hadiths; ``book_number == 0`` lists the whole collection."""
        hadiths = self._hadiths.get(collection)
        if hadiths is None:
            return HadithPage(items=(), total=0, page=max(page, 1), total_pages=0)
        if book_number > 0:
            book = self.get_book(collection, book_number)
            chapter_id = book.chapter_id if book is not None and book.chapter_id else book_number
            hadiths = self._by_chapter[collection].get(chapter_id, ())
        return page_of(hadiths, page, limit)

    def search_hadiths(self, query: str, page: int, limit: int = DEFAULT_SEARCH_LIMIT) -> HadithPage:
        """Substring search across every collection.

        English text and narrator match case-insensitively; Arabic text is
        matched as-is. Results keep corpus order.
        """
        page = max(page, 1)
        if not query:
            return HadithPage(items=(), total=0, page=page, total_pages=0)
        if limit < 1 or limit > MAX_SEARCH_LIMIT:
            limit = DEFAULT_SEARCH_LIMIT

        needle = query.lower()
        results = [
            hadith
            for hadiths in self._hadiths.values()
            for hadith in hadiths
            if needle in hadith.english.lower()
            or query in hadith.arabic
            or needle in hadith.narrator.lower()
        ]
        return page_of(results, page, limit)

    def get_random_hadith(self, rng: random.Random | None = None) -> RandomPick | None:
        if rng is None:
            rng = random.Random()

        candidates = [
            self._collection_index[name]
            for name in self.preferred
            if name in self._collection_index and self._hadiths.get(name)
        ]
        if not candidates:
            candidates = [c for c in self._collections if self._hadiths.get(c.name)]
        if not candidates:
            return None

        collection = rng.choice(candidates)
        hadith = rng.choice(self._hadiths[collection.name])
        return RandomPick(
            hadith=hadith,
            collection=collection,
            book=self.get_book_for_hadith(collection.name, hadith),
        )

    def find_hadith_by_number(
        self, collection: str, hadith_number: int
    ) -> tuple[Hadith | None, Book | None]:
        """Locate a hadith by number, walking books in order; the first match wins."""
        chapters = self._by_chapter.get(collection, {})
        for book in self.get_books(collection):
            for hadith in chapters.get(book.chapter_id, ()):
                if hadith.hadith_number == hadith_number:
                    return hadith, book
        for hadith in self._hadiths.get(collection, ()):
            if hadith.hadith_number == hadith_number:
                return hadith, None
        return None, None

    def stats(self) -> dict[str, int]:
        return {
            "collections": len(self._collections),
            "books": sum(len(items) for items in self._books.values()),
            "hadiths": sum(len(items) for items in self._hadiths.values()),
        }


__all__ = ["CollectionStore", "page_of"]
