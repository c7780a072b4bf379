from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Any, Sequence, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from .models import (
    DEFAULT_COLLECTIONS,
    DEFAULT_GRADE,
    PREFERRED_RANDOM_COLLECTIONS,
    Book,
    Collection,
    Hadith,
)
from .store import CollectionStore

logger = logging.getLogger(__name__)


def _lenient_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _lenient_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _lenient_english(value: Any) -> Any:
    return value if isinstance(value, (str, dict)) else ""


LenientInt = Annotated[int, BeforeValidator(_lenient_int)]
LenientStr = Annotated[str, BeforeValidator(_lenient_str)]


class RawEnglish(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: LenientStr = ""
    narrator: LenientStr = ""


class RawChapter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: LenientInt = 0
    english: LenientStr = ""
    arabic: LenientStr = ""


class RawHadith(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: LenientInt = 0
    id_in_book: LenientInt = Field(default=0, alias="idInBook")
    chapter_id: LenientInt = Field(default=0, alias="chapterId")
    book_id: LenientInt = Field(default=0, alias="bookId")
    arabic: LenientStr = ""
    english: Annotated[RawEnglish | str, BeforeValidator(_lenient_english)] = ""
    grade: LenientStr = ""


class RawCollectionFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # items are validated one by one so a bad record only costs itself
    chapters: list[Any] = Field(default_factory=list)
    hadiths: list[Any] = Field(default_factory=list)


ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_items(
    model: type[ModelT], items: Sequence[Any], *, collection: str, kind: str
) -> list[ModelT]:
    valid: list[ModelT] = []
    for position, item in enumerate(items):
        try:
            valid.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed record",
                extra={
                    "collection": collection,
                    "kind": kind,
                    "position": position,
                    "reason": str(exc)[:200],
                },
            )
    return valid


def _to_hadith(raw: RawHadith) -> Hadith:
    if isinstance(raw.english, RawEnglish):
        english, narrator = raw.english.text, raw.english.narrator
    else:
        english, narrator = raw.english, ""
    return Hadith(
        hadith_number=raw.id_in_book or raw.id,
        grade=raw.grade or DEFAULT_GRADE,
        arabic=raw.arabic,
        english=english,
        narrator=narrator,
        chapter_id=raw.chapter_id,
        book_id=raw.book_id,
    )


def _to_books(chapters: Sequence[RawChapter], hadiths: Sequence[Hadith]) -> list[Book]:
    counts: dict[int, int] = {}
    for hadith in hadiths:
        counts[hadith.chapter_id] = counts.get(hadith.chapter_id, 0) + 1
    return [
        Book(
            book_number=chapter.id,
            title=chapter.english or chapter.arabic,
            english_title=chapter.english,
            arabic_title=chapter.arabic,
            hadith_count=counts.get(chapter.id, 0),
            chapter_id=chapter.id,
        )
        for chapter in chapters
    ]


def load_collection_store(
    data_dir: str | Path | None,
    collections: Sequence[Collection] = DEFAULT_COLLECTIONS,
    *,
    preferred: Sequence[str] = PREFERRED_RANDOM_COLLECTIONS,
) -> CollectionStore:
    """Build a store from ``<data_dir>/<collection>.json`` files.

    Files that are missing or fail to parse are skipped, and so are single
    malformed chapter or hadith records inside an otherwise readable file. Without a data
    directory the store carries collection metadata only.
    """
    directory = Path(data_dir) if data_dir else None
    if directory is None or not directory.is_dir():
        logger.info("Using default hadith data", extra={"data_dir": str(data_dir)})
        return CollectionStore(collections, preferred=preferred)

    loaded_collections: list[Collection] = []
    books: dict[str, list[Book]] = {}
    hadiths: dict[str, list[Hadith]] = {}

    for collection in collections:
        path = directory / f"{collection.name}.json"
        if not path.is_file():
            loaded_collections.append(collection)
            continue
        try:
            raw = RawCollectionFile.model_validate_json(path.read_bytes())
        except (OSError, ValidationError) as exc:
            logger.warning(
                "Skipping unreadable collection file",
                extra={"path": str(path), "reason": str(exc)[:200]},
            )
            loaded_collections.append(collection)
            continue

        name = collection.name
        chapters = _validate_items(RawChapter, raw.chapters, collection=name, kind="chapter")
        records = _validate_items(RawHadith, raw.hadiths, collection=name, kind="hadith")
        parsed = [_to_hadith(item) for item in records]
        hadiths[collection.name] = parsed
        books[collection.name] = _to_books(chapters, parsed)
        loaded_collections.append(
            replace(collection, hadith_count=len(parsed), book_count=len(chapters))
        )
        logger.info(
            "Loaded collection",
            extra={"collection": collection.name, "books": len(chapters), "hadiths": len(parsed)},
        )

    return CollectionStore(loaded_collections, books, hadiths, preferred=preferred)


__all__ = ["RawCollectionFile", "load_collection_store"]
