from bot.utils.formatting import MARKDOWN
from bot.views import Button, HadithViews, RenderedPage, ViewSettings, find_collection_for_hadith
from core.hadith import DEFAULT_COLLECTIONS, Book, Collection, CollectionStore
from core.navigation import (
    BrowseBooks,
    BrowseCollections,
    BrowseHadiths,
    HadithByNumber,
    HadithDetail,
    PickRandom,
    RandomHadith,
    SearchPrompt,
    SearchResults,
    ShowHelp,
    TextPage,
)
from tests.corpus import make_hadith, make_long_store, make_store


def _intents(page: RenderedPage) -> list:
    return [button.intent for button in page.buttons]


def test_welcome_offers_the_main_menu():
    page = HadithViews(make_store()).welcome()

    assert "<b>Welcome to Hadith Portal Bot 🕌</b>" in page.text
    assert [[b.intent for b in row] for row in page.rows] == [
        [BrowseCollections(1), SearchPrompt()],
        [PickRandom(), ShowHelp()],
    ]


def test_help_lists_configured_collections():
    page = HadithViews(make_store()).help()

    assert "• Sahih Muslim" in page.text
    assert "&lt;keyword&gt;" in page.text


def test_collections_fit_on_one_page_without_navigation():
    page = HadithViews(make_store()).collections(1)

    assert len(page.rows) == 6
    assert page.rows[0] == (Button("Sahih al-Bukhari", BrowseBooks("bukhari", 1)),)


def test_collections_paginate_in_sixes():
    extra = tuple(Collection(name=f"extra{i}", title=f"Extra {i}") for i in range(2))
    views = HadithViews(make_store(DEFAULT_COLLECTIONS + extra))

    first = views.collections(1)
    second = views.collections(2)

    assert first.rows[-1] == (Button("Next ➡️", BrowseCollections(2)),)
    assert second.rows[-1] == (Button("⬅️ Previous", BrowseCollections(1)),)
    assert len(second.rows) == 3


def test_books_for_collection_without_books_explain_themselves():
    page = HadithViews(make_store()).books("nasai", 1)

    assert page.text == "No books found in this collection."
    assert _intents(page) == [BrowseCollections(1)]


def test_books_link_to_first_hadith_page():
    page = HadithViews(make_store()).books("muslim", 1)

    assert "<b>📚 Sahih Muslim</b>" in page.text
    assert _intents(page) == [
        BrowseHadiths("muslim", 1, 1),
        BrowseHadiths("muslim", 5, 1),
        BrowseCollections(1),
    ]
    assert page.rows[0][0].label == "📖 Faith"


def test_hadith_listing_uses_page_relative_indices():
    page = HadithViews(make_store()).hadiths("bukhari", 1, 2)

    items = [row[0] for row in page.rows[:10]]
    assert items[0] == Button("🵿 Hadith #11 [Sahih]", HadithDetail("bukhari", 1, 2, 0))
    assert items[9].intent == HadithDetail("bukhari", 1, 2, 9)
    assert [b.intent for b in page.rows[10]] == [
        BrowseHadiths("bukhari", 1, 1),
        BrowseHadiths("bukhari", 1, 3),
    ]
    assert page.rows[11] == (Button("⬅️ Back to Books", BrowseBooks("bukhari", 1)),)
    assert "Page 2/3 - Showing 10 hadiths:" in page.text


def test_empty_book_listing_explains_itself():
    page = HadithViews(make_store()).hadiths("bukhari", 3, 1)

    assert "No hadiths found in this book." in page.text
    assert _intents(page) == [BrowseBooks("bukhari", 1)]


def test_back_to_books_returns_to_the_page_listing_the_book():
    books = [Book(number, f"Book {number}", chapter_id=number) for number in range(1, 26)]
    store = CollectionStore(DEFAULT_COLLECTIONS, {"tirmidhi": books}, {"tirmidhi": [make_hadith(1, 23)]})
    views = HadithViews(store)

    page = views.hadiths("tirmidhi", 23, 1)
    unknown = views.hadiths("tirmidhi", 99, 1)

    assert page.rows[-1] == (Button("⬅️ Back to Books", BrowseBooks("tirmidhi", 3)),)
    assert unknown.rows[-1] == (Button("⬅️ Back to Books", BrowseBooks("tirmidhi", 1)),)


def test_hadith_detail_renders_document_with_actions():
    page = HadithViews(make_store()).text_page(HadithDetail("bukhari", 1, 1, 0))

    assert page.text.startswith("<b>🵿 Hadith</b>")
    assert "<b>Arabic:</b>\nحديث 1" in page.text
    assert "<b>Reference:</b> Sahih al-Bukhari, Book 1, Hadith #1" in page.text
    assert "<b>Grade:</b> Sahih" in page.text
    assert "Page 1/" not in page.text
    assert _intents(page) == [PickRandom(), SearchPrompt(), BrowseHadiths("bukhari", 1, 1)]


def test_stale_detail_index_renders_not_found_with_single_back_button():
    views = HadithViews(make_store())
    last_page = views.hadiths("bukhari", 1, 3)
    assert sum(isinstance(b.intent, HadithDetail) for b in last_page.buttons) == 3

    page = views.text_page(HadithDetail("bukhari", 1, 3, 3))

    assert page.text == "Hadith not found."
    assert page.rows == ((Button("⬅️ Back", BrowseHadiths("bukhari", 1, 3)),),)


def test_hadith_by_number_uses_book_for_reference():
    page = HadithViews(make_store()).text_page(HadithByNumber("muslim", 3))

    assert "Sahih Muslim, Book 5, Hadith #3" in page.text
    assert _intents(page) == [PickRandom(), SearchPrompt()]
    assert page.rows[0][0].label == "🎲 Random Hadith"


def test_random_source_offers_another_random():
    page = HadithViews(make_store()).text_page(RandomHadith("bukhari", 24))

    assert page.rows[0][0] == Button("🎲 Another Random", PickRandom())
    assert "<b>Narrator:</b> Abu Huraira" in page.text


def test_missing_numbered_hadith_is_not_found():
    page = HadithViews(make_store()).text_page(HadithByNumber("bukhari", 999))

    assert page.text == "Hadith not found."
    assert _intents(page) == [BrowseCollections(1)]


def test_long_document_pages_thread_text_page_intents():
    views = HadithViews(make_long_store(), settings=ViewSettings(text_page_limit=3800))
    source = HadithByNumber("bukhari", 7)

    first = views.text_page(source, 0)
    middle = views.text_page(source, 1)

    assert first.text.endswith("Page 1/3")
    assert first.rows[0] == (Button("Next ➡️", TextPage(source, 1)),)
    assert [b.intent for b in middle.rows[0]] == [TextPage(source, 0), TextPage(source, 2)]
    assert middle.rows[1:] == first.rows[1:]


def test_text_page_index_is_clamped():
    views = HadithViews(make_long_store())
    source = HadithByNumber("bukhari", 7)

    assert views.text_page(source, 99) == views.text_page(source, 2)
    assert views.text_page(source, -5) == views.text_page(source, 0)
    assert views.text_page(source, 99).rows[0] == (Button("⬅️ Prev", TextPage(source, 1)),)


def test_rendering_is_deterministic():
    views = HadithViews(make_long_store())
    source = HadithByNumber("bukhari", 7)

    assert views.text_page(source, 1) == views.text_page(source, 1)


def test_search_without_results_has_no_item_buttons():
    page = HadithViews(make_store()).search_results("zzz", 1, 10)

    assert page.text == "No results found for: <b>zzz</b>"
    assert page.buttons == ()


def test_search_results_resolve_each_hit_collection():
    page = HadithViews(make_store()).search_results("prayer", 1, 10)

    assert _intents(page) == [
        HadithByNumber("bukhari", 24),
        HadithByNumber("muslim", 2),
        HadithByNumber("muslim", 3),
    ]
    assert "Page 1/1 - Showing 3 of 3 results:" in page.text


def test_search_results_page_with_navigation():
    views = HadithViews(make_store())

    first = views.search_results("hadith text", 1)
    second = views.search_results("hadith text", 2)

    assert len(first.rows) == 6
    assert first.rows[-1] == (Button("Next ➡️", SearchResults("hadith text", 2)),)
    assert [b.intent for b in second.rows[-1]] == [
        SearchResults("hadith text", 1),
        SearchResults("hadith text", 3),
    ]


def test_search_past_last_page_points_back():
    page = HadithViews(make_store()).search_results("prayer", 4)

    assert _intents(page) == [SearchResults("prayer", 1)]


def test_search_query_is_escaped():
    page = HadithViews(make_store()).search_results("<script>", 1)

    assert "<script>" not in page.text
    assert "&lt;script&gt;" in page.text


def test_find_collection_for_hadith_falls_back():
    store = make_store()

    assert find_collection_for_hadith(store, make_hadith(1, 105), "bukhari") == "muslim"
    assert find_collection_for_hadith(store, make_hadith(1, 999), "bukhari") == "bukhari"
    assert find_collection_for_hadith(store, make_hadith(1, 999), "tirmidhi") == "tirmidhi"


def test_markdown_mode_escapes_documents():
    store = make_store()
    views = HadithViews(store, markup=MARKDOWN)

    page = views.text_page(HadithByNumber("muslim", 1))

    assert "*Arabic:*" in page.text
    assert "*Reference:* Sahih Muslim, Book 1, Hadith \\#1" in page.text


def test_search_prompt_is_sent_as_new_message():
    page = HadithViews(make_store()).search_prompt()

    assert page.replace is False
    assert page.text == "Please use /search &lt;keyword&gt; command to search."


def test_inline_search_pages_with_offsets():
    views = HadithViews(make_store())

    first = views.inline_search("hadith text")
    last = views.inline_search("hadith text", "5")

    assert len(first.results) == 5
    assert first.next_offset == "2"
    assert [r.id for r in first.results][0] == "search_bukhari_1_0"
    assert len(last.results) == 3
    assert last.next_offset == ""
    assert last.results[0].id == "search_bukhari_21_20"


def test_inline_search_without_hits_is_a_notice():
    answer = HadithViews(make_store()).inline_search("zzz")

    (notice,) = answer.results
    assert notice.id == "no_results"
    assert notice.title == "🔍 No Results Found"
    assert notice.text == "No results found for <b>zzz</b>"
