from __future__ import annotations

from dataclasses import dataclass

DEFAULT_GRADE = "Sahih"


@dataclass(frozen=True)
class Collection:
    name: str
    title: str
    author: str = ""
    hadith_count: int = 0
    book_count: int = 0
    description: str = ""
    grade: str = ""


@dataclass(frozen=True)
class Book:
    book_number: int
    title: str
    english_title: str = ""
    arabic_title: str = ""
    hadith_count: int = 0
    # Hadiths link to a book through chapter_id, never through book_number.
    chapter_id: int = 0


@dataclass(frozen=True)
class Hadith:
    hadith_number: int
    grade: str = ""
    arabic: str = ""
    english: str = ""
    narrator: str = ""
    chapter_id: int = 0
    book_id: int = 0

    @property
    def display_grade(self) -> str:
        return self.grade or DEFAULT_GRADE


@dataclass(frozen=True)
class HadithPage:
    items: tuple[Hadith, ...]
    total: int
    page: int
    total_pages: int


@dataclass(frozen=True)
class RandomPick:
    hadith: Hadith
    collection: Collection
    book: Book | None


DEFAULT_COLLECTIONS: tuple[Collection, ...] = (
    Collection(
        name="bukhari",
        title="Sahih al-Bukhari",
        author="Imam al-Bukhari",
        hadith_count=7000,
        book_count=97,
        description="The most authentic collection of hadith",
        grade="Sahih",
    ),
    Collection(
        name="muslim",
        title="Sahih Muslim",
        author="Imam Muslim",
        hadith_count=7000,
        book_count=56,
        description="The second most authentic collection",
        grade="Sahih",
    ),
    Collection(
        name="abudawud",
        title="Sunan Abu Dawood",
        author="Abu Dawood",
        hadith_count=5000,
        book_count=80,
        description="Collection of hadith focusing on jurisprudential matters",
        grade="Sahih",
    ),
    Collection(
        name="tirmidhi",
        title="Jami' at-Tirmidhi",
        author="Imam at-Tirmidhi",
        hadith_count=4000,
        book_count=50,
        description="Comprehensive collection of hadith",
        grade="Sahih",
    ),
    Collection(
        name="nasai",
        title="Sunan an-Nasa'i",
        author="Imam an-Nasa'i",
        hadith_count=5700,
        book_count=52,
        description="Collection of hadith on jurisprudence",
        grade="Sahih",
    ),
    Collection(
        name="ibnmajah",
        title="Sunan Ibn Majah",
        author="Ibn Majah",
        hadith_count=4000,
        book_count=37,
        description="Collection of hadith on jurisprudence",
        grade="Sahih",
    ),
)

PREFERRED_RANDOM_COLLECTIONS: tuple[str, ...] = tuple(c.name for c in DEFAULT_COLLECTIONS)


__all__ = [
    "Book",
    "Collection",
    "DEFAULT_COLLECTIONS",
    "DEFAULT_GRADE",
    "Hadith",
    "HadithPage",
    "PREFERRED_RANDOM_COLLECTIONS",
    "RandomPick",
]
