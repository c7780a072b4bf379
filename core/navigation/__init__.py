from .errors import DecodeError, DecodeFailure, EncodingError, NavigationError
from .intents import (
    BrowseBooks,
    BrowseCollections,
    BrowseHadiths,
    DocumentIntent,
    HadithByNumber,
    HadithDetail,
    Intent,
    PickRandom,
    RandomHadith,
    SearchPrompt,
    SearchResults,
    ShowHelp,
    TextPage,
)
from .paginator import paginate
from .tokens import MAX_TOKEN_BYTES, decode, encode

__all__ = [
    "BrowseBooks",
    "BrowseCollections",
    "BrowseHadiths",
    "DecodeError",
    "DecodeFailure",
    "DocumentIntent",
    "EncodingError",
    "HadithByNumber",
    "HadithDetail",
    "Intent",
    "MAX_TOKEN_BYTES",
    "NavigationError",
    "PickRandom",
    "RandomHadith",
    "SearchPrompt",
    "SearchResults",
    "ShowHelp",
    "TextPage",
    "decode",
    "encode",
    "paginate",
]
