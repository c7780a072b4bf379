"""Callback token codec.

Every button carries a colon-delimited token naming the view it opens::

    collections:<page>
    books:<collection>:<page>
    hadiths:<collection>:<book>:<page>
    hadith_detail:<collection>:<book>:<listPage>:<index>
    hadith_search:<collection>:<hadithNumber>
    search_next:<query>:<page>          (search_prev is read as an alias)
    hadith_page:d:<collection>:<book>:<listPage>:<index>:<textPage>
    hadith_page:s:<collection>:<hadithNumber>:<textPage>
    hadith_page:r:<collection>:<hadithNumber>:<textPage>
    random | help | search

Search queries are free text, so ``%`` and ``:`` inside them are
percent-escaped before embedding. Telegram rejects callback data longer than
64 bytes; such tokens fail to encode instead of producing a dead button.
"""

from __future__ import annotations

from urllib.parse import unquote

from .errors import DecodeError, DecodeFailure, EncodingError
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

SEPARATOR = ":"
MAX_TOKEN_BYTES = 64

TAG_COLLECTIONS = "collections"
TAG_BOOKS = "books"
TAG_HADITHS = "hadiths"
TAG_HADITH_DETAIL = "hadith_detail"
TAG_HADITH_SEARCH = "hadith_search"
TAG_SEARCH_NEXT = "search_next"
TAG_SEARCH_PREV = "search_prev"
TAG_HADITH_PAGE = "hadith_page"
TAG_RANDOM = "random"
TAG_HELP = "help"
TAG_SEARCH = "search"

SOURCE_DETAIL = "d"
SOURCE_SEARCH = "s"
SOURCE_RANDOM = "r"

_ARITY: dict[str, int] = {
    TAG_COLLECTIONS: 1,
    TAG_BOOKS: 2,
    TAG_HADITHS: 3,
    TAG_HADITH_DETAIL: 4,
    TAG_HADITH_SEARCH: 2,
    TAG_SEARCH_NEXT: 2,
    TAG_SEARCH_PREV: 2,
    TAG_RANDOM: 0,
    TAG_HELP: 0,
    TAG_SEARCH: 0,
}

_SOURCE_ARITY: dict[str, int] = {
    SOURCE_DETAIL: 4,
    SOURCE_SEARCH: 2,
    SOURCE_RANDOM: 2,
}


def escape_query(query: str) -> str:
    return query.replace("%", "%25").replace(SEPARATOR, "%3A")


def unescape_query(value: str) -> str:
    return unquote(value)


def _text(value: str) -> str:
    if SEPARATOR in value:
        raise EncodingError(f"field {value!r} contains the separator {SEPARATOR!r}")
    return value


def _source_parts(source: DocumentIntent) -> list[str]:
    if isinstance(source, HadithDetail):
        return [
            SOURCE_DETAIL,
            _text(source.collection),
            str(source.book),
            str(source.list_page),
            str(source.index),
        ]
    if isinstance(source, HadithByNumber):
        return [SOURCE_SEARCH, _text(source.collection), str(source.hadith_number)]
    if isinstance(source, RandomHadith):
        return [SOURCE_RANDOM, _text(source.collection), str(source.hadith_number)]
    raise EncodingError(f"{type(source).__name__} cannot be paginated")


def _parts(intent: Intent) -> list[str]:
    if isinstance(intent, BrowseCollections):
        return [TAG_COLLECTIONS, str(intent.page)]
    if isinstance(intent, BrowseBooks):
        return [TAG_BOOKS, _text(intent.collection), str(intent.page)]
    if isinstance(intent, BrowseHadiths):
        return [TAG_HADITHS, _text(intent.collection), str(intent.book), str(intent.page)]
    if isinstance(intent, HadithDetail):
        return [
            TAG_HADITH_DETAIL,
            _text(intent.collection),
            str(intent.book),
            str(intent.list_page),
            str(intent.index),
        ]
    if isinstance(intent, HadithByNumber):
        return [TAG_HADITH_SEARCH, _text(intent.collection), str(intent.hadith_number)]
    if isinstance(intent, SearchResults):
        return [TAG_SEARCH_NEXT, escape_query(intent.query), str(intent.page)]
    if isinstance(intent, TextPage):
        return [TAG_HADITH_PAGE, *_source_parts(intent.source), str(intent.page_index)]
    if isinstance(intent, PickRandom):
        return [TAG_RANDOM]
    if isinstance(intent, ShowHelp):
        return [TAG_HELP]
    if isinstance(intent, SearchPrompt):
        return [TAG_SEARCH]
    raise EncodingError(f"{type(intent).__name__} has no callback token")


def encode(intent: Intent) -> str:
    token = SEPARATOR.join(_parts(intent))
    size = len(token.encode("utf-8"))
    if size > MAX_TOKEN_BYTES:
        raise EncodingError(f"token is {size} bytes, limit is {MAX_TOKEN_BYTES}")
    return token


class _Fields:
    """Positional reader for token fields with per-field integer fallbacks."""

    def __init__(self, token: str, values: list[str], strict: bool) -> None:
        self.token = token
        self.values = values
        self.strict = strict

    def text(self, position: int) -> str:
        return self.values[position]

    def number(self, position: int, default: int) -> int:
        raw = self.values[position]
        try:
            return int(raw)
        except ValueError:
            if self.strict:
                raise DecodeError(
                    DecodeFailure.FIELD_PARSE_FAILURE,
                    self.token,
                    f"field {position} {raw!r} is not an integer",
                ) from None
            return default


def _decode_source(kind: str, fields: _Fields) -> DocumentIntent:
    if kind == SOURCE_DETAIL:
        return HadithDetail(
            collection=fields.text(1),
            book=fields.number(2, 0),
            list_page=fields.number(3, 1),
            index=fields.number(4, 0),
        )
    if kind == SOURCE_SEARCH:
        return HadithByNumber(collection=fields.text(1), hadith_number=fields.number(2, 0))
    return RandomHadith(collection=fields.text(1), hadith_number=fields.number(2, 0))


def _decode_text_page(token: str, values: list[str], strict: bool) -> TextPage:
    if not values:
        raise DecodeError(DecodeFailure.ARITY_MISMATCH, token, "missing source kind")
    kind = values[0]
    expected = _SOURCE_ARITY.get(kind)
    if expected is None:
        raise DecodeError(DecodeFailure.FIELD_PARSE_FAILURE, token, f"unknown source kind {kind!r}")
    if len(values) != expected + 2:
        raise DecodeError(
            DecodeFailure.ARITY_MISMATCH, token, f"expected {expected + 2} fields, got {len(values)}"
        )
    fields = _Fields(token, values, strict)
    return TextPage(source=_decode_source(kind, fields), page_index=fields.number(len(values) - 1, 0))


def decode(token: str, *, strict: bool = False) -> Intent:
    """Parse a callback token back into an intent.

    Numeric fields that do not parse fall back to their defaults (page 1,
    index 0) so a damaged button still leads somewhere; pass ``strict=True``
    to raise ``DecodeError`` instead.
    """
    tag, *values = token.split(SEPARATOR)
    if tag == TAG_HADITH_PAGE:
        return _decode_text_page(token, values, strict)

    expected = _ARITY.get(tag)
    if expected is None:
        raise DecodeError(DecodeFailure.UNKNOWN_TAG, token)
    if len(values) != expected:
        raise DecodeError(
            DecodeFailure.ARITY_MISMATCH, token, f"expected {expected} fields, got {len(values)}"
        )

    fields = _Fields(token, values, strict)
    if tag == TAG_COLLECTIONS:
        return BrowseCollections(page=fields.number(0, 1))
    if tag == TAG_BOOKS:
        return BrowseBooks(collection=fields.text(0), page=fields.number(1, 1))
    if tag == TAG_HADITHS:
        return BrowseHadiths(
            collection=fields.text(0), book=fields.number(1, 0), page=fields.number(2, 1)
        )
    if tag == TAG_HADITH_DETAIL:
        return HadithDetail(
            collection=fields.text(0),
            book=fields.number(1, 0),
            list_page=fields.number(2, 1),
            index=fields.number(3, 0),
        )
    if tag == TAG_HADITH_SEARCH:
        return HadithByNumber(collection=fields.text(0), hadith_number=fields.number(1, 0))
    if tag in (TAG_SEARCH_NEXT, TAG_SEARCH_PREV):
        return SearchResults(query=unescape_query(fields.text(0)), page=fields.number(1, 1))
    if tag == TAG_RANDOM:
        return PickRandom()
    if tag == TAG_HELP:
        return ShowHelp()
    return SearchPrompt()


__all__ = [
    "MAX_TOKEN_BYTES",
    "SEPARATOR",
    "decode",
    "encode",
    "escape_query",
    "unescape_query",
]
