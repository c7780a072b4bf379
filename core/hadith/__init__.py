from .models import (
    DEFAULT_COLLECTIONS,
    DEFAULT_GRADE,
    PREFERRED_RANDOM_COLLECTIONS,
    Book,
    Collection,
    Hadith,
    HadithPage,
    RandomPick,
)
from .store import CollectionStore, page_of
from .loader import load_collection_store

__all__ = [
    "Book",
    "Collection",
    "CollectionStore",
    "DEFAULT_COLLECTIONS",
    "DEFAULT_GRADE",
    "Hadith",
    "HadithPage",
    "PREFERRED_RANDOM_COLLECTIONS",
    "RandomPick",
    "load_collection_store",
    "page_of",
]
