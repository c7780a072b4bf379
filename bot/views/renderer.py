from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from bot.texts.i18n import headings, t
from bot.utils.formatting import HTML, MarkupStyle
from bot.views.document import decorate, decorate_hadith_page, hadith_document, truncate
from bot.views.inline import InlineAnswer, NoticeArticle, TextArticle
from bot.views.pages import Button, RenderedPage, Row, rows_of
from core.hadith import Book, CollectionStore, Hadith
from core.navigation import (
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
    paginate,
)


@dataclass(frozen=True)
class ViewSettings:
    collections_per_page: int = 6
    books_per_page: int = 10
    hadiths_per_page: int = 10
    command_search_limit: int = 10
    paged_search_limit: int = 5
    inline_search_limit: int = 5
    text_page_limit: int = 3800
    fallback_collection: str = "bukhari"
    book_title_width: int = 40
    list_book_title_width: int = 30
    inline_description_width: int = 50


class _Document(NamedTuple):
    text: str
    actions: tuple[Row, ...]


def find_collection_for_hadith(store: CollectionStore, hadith: Hadith, fallback: str) -> str:
    """Name of the first collection owning a book with the hadith's chapter id."""
    for collection in store.get_collections():
        for book in store.get_books(collection.name):
            if book.chapter_id == hadith.chapter_id:
                return collection.name
    return fallback


def hadith_label(hadith: Hadith) -> str:
    return t("BTN_HADITH", number=hadith.hadith_number, grade=hadith.display_grade)


def _nav_row(
    prev_intent: Intent | None,
    next_intent: Intent | None,
    prev_label: str | None = None,
) -> list[Button]:
    row: list[Button] = []
    if prev_intent is not None:
        row.append(Button(prev_label or t("BTN_PREV"), prev_intent))
    if next_intent is not None:
        row.append(Button(t("BTN_NEXT"), next_intent))
    return row


class HadithViews:
    """Pure renderers: same store, same intent, same page."""

    def __init__(
        self,
        store: CollectionStore,
        markup: MarkupStyle = HTML,
        settings: ViewSettings | None = None,
    ) -> None:
        self.store = store
        self.markup = markup
        self.settings = settings or ViewSettings()

    # menus

    def welcome(self) -> RenderedPage:
        text = decorate(t("WELCOME_TEXT"), self.markup, headings=headings("WELCOME_TEXT"))
        return RenderedPage(
            text=text,
            rows=rows_of(
                [
                    Button(t("BTN_BROWSE_COLLECTIONS"), BrowseCollections(1)),
                    Button(t("BTN_SEARCH_HADITH"), SearchPrompt()),
                ],
                [
                    Button(t("BTN_RANDOM"), PickRandom()),
                    Button(t("BTN_HELP"), ShowHelp()),
                ],
            ),
        )

    def help(self) -> RenderedPage:
        names = "\n".join(f"• {c.title}" for c in self.store.get_collections())
        text = decorate(
            t("HELP_TEXT", collections=names),
            self.markup,
            headings=headings("HELP_TEXT"),
        )
        return RenderedPage(
            text=text,
            rows=rows_of(
                [
                    Button(t("BTN_BROWSE_COLLECTIONS"), BrowseCollections(1)),
                    Button(t("BTN_RANDOM"), PickRandom()),
                ]
            ),
        )

    def search_prompt(self) -> RenderedPage:
        return RenderedPage(text=self.markup.quote(t("SEARCH_PROMPT_TEXT")), replace=False)

    def search_usage(self) -> RenderedPage:
        return RenderedPage(text=self.markup.quote(t("SEARCH_USAGE_TEXT")))

    def hadith_usage(self) -> RenderedPage:
        return RenderedPage(text=self.markup.quote(t("HADITH_USAGE_TEXT")))

    def random_unavailable(self) -> RenderedPage:
        return RenderedPage(
            text=self.markup.quote(t("RANDOM_UNAVAILABLE_TEXT")),
            rows=rows_of([Button(t("BTN_BROWSE_COLLECTIONS"), BrowseCollections(1))]),
        )

    def stale_button(self) -> RenderedPage:
        return RenderedPage(
            text=self.markup.quote(t("STALE_BUTTON_TEXT")),
            rows=rows_of([Button(t("BTN_BROWSE_COLLECTIONS"), BrowseCollections(1))]),
        )

    # listings

    def collections(self, page: int) -> RenderedPage:
        per_page = self.settings.collections_per_page
        collections = self.store.get_collections()
        page = max(page, 1)
        start = (page - 1) * per_page
        end = start + per_page

        rows: list[Row] = [
            (Button(c.title, BrowseBooks(c.name, 1)),) for c in collections[start:end]
        ]
        nav = _nav_row(
            BrowseCollections(page - 1) if page > 1 else None,
            BrowseCollections(page + 1) if end < len(collections) else None,
            prev_label=t("BTN_PREVIOUS"),
        )
        text = (
            f"{self.markup.bold(t('COLLECTIONS_TITLE'))}\n\n"
            f"{self.markup.quote(t('COLLECTIONS_PROMPT'))}"
        )
        return RenderedPage(text=text, rows=rows_of(*rows, nav))

    def books(self, collection: str, page: int) -> RenderedPage:
        back = [Button(t("BTN_BACK_COLLECTIONS"), BrowseCollections(1))]
        books = self.store.get_books(collection)
        if not books:
            return RenderedPage(text=self.markup.quote(t("NO_BOOKS_TEXT")), rows=rows_of(back))

        per_page = self.settings.books_per_page
        page = max(page, 1)
        start = (page - 1) * per_page
        end = start + per_page

        rows: list[Row] = [
            (
                Button(
                    t("BTN_BOOK", title=truncate(book.title, self.settings.book_title_width)),
                    BrowseHadiths(collection, book.book_number, 1),
                ),
            )
            for book in books[start:end]
        ]
        nav = _nav_row(
            BrowseBooks(collection, page - 1) if page > 1 else None,
            BrowseBooks(collection, page + 1) if end < len(books) else None,
        )
        title = t("BOOKS_TITLE", collection=self.store.display_name(collection))
        text = f"{self.markup.bold(title)}\n\n{self.markup.quote(t('BOOKS_PROMPT'))}"
        return RenderedPage(text=text, rows=rows_of(*rows, nav, back))

    def hadiths(self, collection: str, book_number: int, page: int) -> RenderedPage:
        result = self.store.get_hadiths(
            collection, book_number, page, self.settings.hadiths_per_page
        )
        book = self.store.get_book(collection, book_number)
        book_title = book.title if book is not None else t("UNKNOWN_BOOK")

        rows: list[Row] = [
            (
                Button(
                    hadith_label(hadith),
                    HadithDetail(collection, book_number, result.page, index),
                ),
            )
            for index, hadith in enumerate(result.items)
        ]
        nav: list[Button] = []
        if result.total_pages > 1:
            nav = _nav_row(
                BrowseHadiths(collection, book_number, result.page - 1) if result.page > 1 else None,
                BrowseHadiths(collection, book_number, result.page + 1)
                if result.page < result.total_pages
                else None,
            )
        back = [
            Button(
                t("BTN_BACK_BOOKS"),
                BrowseBooks(collection, self._books_page_of(collection, book_number)),
            )
        ]

        if result.items:
            summary = t(
                "HADITHS_SUMMARY",
                page=result.page,
                total_pages=result.total_pages,
                count=len(result.items),
            )
        else:
            summary = t("NO_HADITHS_TEXT")
        title = t("HADITHS_TITLE", collection=self.store.display_name(collection))
        book_line = t(
            "HADITHS_BOOK", book=truncate(book_title, self.settings.list_book_title_width)
        )
        text = (
            f"{self.markup.bold(title)}\n"
            f"{self.markup.quote(book_line)}\n\n"
            f"{self.markup.quote(summary)}"
        )
        return RenderedPage(text=text, rows=rows_of(*rows, nav, back))

    def _books_page_of(self, collection: str, book_number: int) -> int:
        """Books listing page that shows ``book_number``; 1 when the book is unknown."""
        for position, book in enumerate(self.store.get_books(collection)):
            if book.book_number == book_number:
                return position // self.settings.books_per_page + 1
        return 1

    def search_results(self, query: str, page: int, limit: int | None = None) -> RenderedPage:
        if limit is None:
            limit = self.settings.paged_search_limit
        result = self.store.search_hadiths(query, page, limit)

        if not result.items:
            text = self.markup.quote(t("NO_RESULTS_TEXT")) + self.markup.bold(query)
            nav: list[Button] = []
            if result.total_pages:
                nav = [Button(t("BTN_PREV"), SearchResults(query, result.total_pages))]
            return RenderedPage(text=text, rows=rows_of(nav))

        fallback = self.settings.fallback_collection
        rows: list[Row] = [
            (
                Button(
                    hadith_label(hadith),
                    HadithByNumber(
                        find_collection_for_hadith(self.store, hadith, fallback),
                        hadith.hadith_number,
                    ),
                ),
            )
            for hadith in result.items
        ]
        nav = []
        if result.total_pages > 1:
            nav = _nav_row(
                SearchResults(query, result.page - 1) if result.page > 1 else None,
                SearchResults(query, result.page + 1)
                if result.page < result.total_pages
                else None,
            )
        summary = t(
            "SEARCH_SUMMARY",
            page=result.page,
            total_pages=result.total_pages,
            count=len(result.items),
            total=result.total,
        )
        text = (
            f"{self.markup.bold(t('SEARCH_TITLE'))} {self.markup.quote(query)}\n\n"
            f"{self.markup.quote(summary)}\n\n"
            f"{self.markup.quote(t('SEARCH_HINT'))}"
        )
        return RenderedPage(text=text, rows=rows_of(*rows, nav))

    # documents

    def text_page(self, source: DocumentIntent, page_index: int = 0) -> RenderedPage:
        """Render one slice of a hadith document, clamping ``page_index`` into range."""
        document = self._document(source)
        if document is None:
            return self.not_found(source)

        pages = paginate(document.text, self.settings.text_page_limit)
        index = min(max(page_index, 0), len(pages) - 1)
        text = decorate_hadith_page(pages[index], self.markup)
        if len(pages) > 1:
            footer = t("PAGE_FOOTER", current=index + 1, total=len(pages))
            text = f"{text}\n\n{self.markup.quote(footer)}"

        nav = _nav_row(
            TextPage(source, index - 1) if index > 0 else None,
            TextPage(source, index + 1) if index < len(pages) - 1 else None,
        )
        return RenderedPage(text=text, rows=rows_of(nav, *document.actions))

    def not_found(self, source: DocumentIntent) -> RenderedPage:
        text = self.markup.quote(t("HADITH_NOT_FOUND_TEXT"))
        if isinstance(source, HadithDetail):
            back = Button(
                t("BTN_BACK"), BrowseHadiths(source.collection, source.book, source.list_page)
            )
            return RenderedPage(text=text, rows=rows_of([back]))
        if isinstance(source, RandomHadith):
            return RenderedPage(
                text=text, rows=rows_of([Button(t("BTN_ANOTHER_RANDOM"), PickRandom())])
            )
        return RenderedPage(
            text=text,
            rows=rows_of([Button(t("BTN_BROWSE_COLLECTIONS"), BrowseCollections(1))]),
        )

    def _document(self, source: DocumentIntent) -> _Document | None:
        if isinstance(source, HadithDetail):
            result = self.store.get_hadiths(
                source.collection, source.book, source.list_page, self.settings.hadiths_per_page
            )
            if not 0 <= source.index < len(result.items):
                return None
            hadith = result.items[source.index]
            book = self.store.get_book(source.collection, source.book)
            actions = rows_of(
                [Button(t("BTN_RANDOM"), PickRandom()), Button(t("BTN_SEARCH"), SearchPrompt())],
                [
                    Button(
                        t("BTN_BACK"),
                        BrowseHadiths(source.collection, source.book, source.list_page),
                    )
                ],
            )
            return self._build(hadith, source.collection, book, actions)

        hadith, book = self.store.find_hadith_by_number(source.collection, source.hadith_number)
        if hadith is None:
            return None
        random_label = t("BTN_ANOTHER_RANDOM") if isinstance(source, RandomHadith) else t("BTN_RANDOM")
        actions = rows_of(
            [Button(random_label, PickRandom()), Button(t("BTN_SEARCH"), SearchPrompt())]
        )
        return self._build(hadith, source.collection, book, actions)

    def _build(
        self, hadith: Hadith, collection: str, book: Book | None, actions: tuple[Row, ...]
    ) -> _Document:
        return _Document(
            text=hadith_document(hadith, self.store.get_collection(collection), book),
            actions=actions,
        )

    # inline mode

    def inline_random(self, source: RandomHadith) -> InlineAnswer:
        hadith, _ = self.store.find_hadith_by_number(source.collection, source.hadith_number)
        if hadith is None:
            return InlineAnswer()
        article = TextArticle(
            id=f"random_{source.collection}_{source.hadith_number}",
            title=t("INLINE_RANDOM_TITLE"),
            description=t(
                "INLINE_RANDOM_DESCRIPTION",
                number=source.hadith_number,
                collection=self.store.display_name(source.collection),
            ),
            page=self.text_page(source, 0),
        )
        return InlineAnswer(results=(article,))

    def inline_search(self, keyword: str, offset: str = "") -> InlineAnswer:
        page = _offset_to_page(offset)
        limit = self.settings.inline_search_limit
        result = self.store.search_hadiths(keyword, page, limit)

        if not result.items:
            if page > 1:
                return InlineAnswer()
            notice = NoticeArticle(
                id="no_results",
                title=t("INLINE_NO_RESULTS_TITLE"),
                description=t("INLINE_NO_RESULTS_DESCRIPTION", query=keyword),
                text=self.markup.quote(t("INLINE_NO_RESULTS_TEXT")) + self.markup.bold(keyword),
            )
            return InlineAnswer(results=(notice,))

        fallback = self.settings.fallback_collection
        first = (result.page - 1) * limit
        articles = []
        for position, hadith in enumerate(result.items, start=first):
            collection = find_collection_for_hadith(self.store, hadith, fallback)
            source = HadithByNumber(collection, hadith.hadith_number)
            articles.append(
                TextArticle(
                    id=f"search_{collection}_{hadith.hadith_number}_{position}",
                    title=hadith_label(hadith),
                    description=truncate(hadith.english, self.settings.inline_description_width),
                    page=self.text_page(source, 0),
                )
            )
        next_offset = str(result.page + 1) if result.page < result.total_pages else ""
        return InlineAnswer(results=tuple(articles), next_offset=next_offset)

    def inline_help(self) -> InlineAnswer:
        notice = NoticeArticle(
            id="help",
            title=t("INLINE_HELP_TITLE"),
            description=t("INLINE_HELP_DESCRIPTION"),
            text=decorate(
                t("INLINE_HELP_TEXT"), self.markup, headings=headings("INLINE_HELP_TEXT")
            ),
        )
        return InlineAnswer(results=(notice,))


def _offset_to_page(offset: str) -> int:
    try:
        return max(int(offset), 1)
    except ValueError:
        return 1


__all__ = [
    "HadithViews",
    "ViewSettings",
    "find_collection_for_hadith",
    "hadith_label",
]
