import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from bot.navigation import NavigationController
from bot.views import HadithViews
from core.hadith import DEFAULT_COLLECTIONS, CollectionStore
from core.navigation import (
    BrowseCollections,
    HadithByNumber,
    NavigationError,
    PickRandom,
    SearchResults,
    encode,
)
from tests.corpus import make_hadith, make_store


def make_controller(store: CollectionStore | None = None, seed: int = 0) -> NavigationController:
    store = store or make_store()
    return NavigationController(store, HadithViews(store), rng=random.Random(seed))


def test_valid_token_renders_the_listing():
    controller = make_controller()

    page = controller.handle_token("hadiths:bukhari:1:2")

    assert page == controller.views.hadiths("bukhari", 1, 2)


def test_unknown_tag_is_ignored():
    assert make_controller().handle_token("unknown:1") is None


def test_malformed_token_renders_stale_button_page():
    page = make_controller().handle_token("books:bukhari")

    assert "expired" in page.text
    assert [b.intent for b in page.buttons] == [BrowseCollections(1)]


def test_bad_numbers_are_tolerated():
    controller = make_controller()

    assert controller.handle_token("collections:abc") == controller.views.collections(1)


def test_pick_random_on_single_hadith_corpus():
    store = CollectionStore(DEFAULT_COLLECTIONS, {}, {"tirmidhi": [make_hadith(5, 0)]})
    controller = make_controller(store)

    page = controller.handle(PickRandom())

    assert "Hadith text 5" in page.text
    assert page.rows[0][0].intent == PickRandom()
    assert page.rows[0][0].label == "🎲 Another Random"


def test_pick_random_on_empty_corpus_is_unavailable():
    controller = make_controller(CollectionStore(DEFAULT_COLLECTIONS))

    page = controller.handle_token("random")

    assert "random hadith" in page.text
    assert [b.intent for b in page.buttons] == [BrowseCollections(1)]


def test_unroutable_intent_raises():
    with pytest.raises(NavigationError):
        make_controller().handle(object())


def test_start_and_help_commands():
    controller = make_controller()

    assert controller.handle_command("start") == controller.views.welcome()
    assert controller.handle_command("HELP") == controller.views.help()
    assert controller.handle_command("collections") == controller.views.collections(1)


def test_search_command_without_keyword_shows_usage():
    page = make_controller().handle_command("search", "   ")

    assert "Usage: /search &lt;keyword&gt;" in page.text
    assert page.buttons == ()


def test_search_command_uses_larger_first_page():
    page = make_controller().handle_command("search", "hadith text")

    assert len(page.rows) == 11
    assert page.rows[-1][0].intent == SearchResults("hadith text", 2)
    assert "Showing 10 of 23 results" in page.text


def test_hadith_command_opens_by_number():
    page = make_controller().handle_command("hadith", "Bukhari 24")

    assert "Sahih al-Bukhari, Book 2, Hadith #24" in page.text
    assert "<b>Narrator:</b> Abu Huraira" in page.text


@pytest.mark.parametrize("args", ["", "bukhari", "bukhari x", "bukhari 1 2"])
def test_hadith_command_with_bad_arguments_shows_usage(args):
    page = make_controller().handle_command("hadith", args)

    assert page.text.startswith("Usage: /hadith")


def test_unknown_command_is_ignored():
    assert make_controller().handle_command("settings") is None


def test_inline_random_returns_one_article():
    answer = make_controller().inline_answer("Random")

    (article,) = answer.results
    assert article.id.startswith("random_")
    assert article.title == "🎲 Random Hadith"
    assert answer.cache_time == 10


def test_inline_random_on_empty_corpus_is_empty():
    answer = make_controller(CollectionStore(DEFAULT_COLLECTIONS)).inline_answer("random")

    assert answer.results == ()


def test_inline_search_passes_offset():
    controller = make_controller()

    first = controller.inline_answer("  search Hadith Text ")
    second = controller.inline_answer("search hadith text", first.next_offset)

    assert [r.id for r in first.results][:2] == ["search_bukhari_1_0", "search_bukhari_2_1"]
    assert second.results[0].id == "search_bukhari_6_5"


def test_inline_search_article_carries_document_page():
    answer = make_controller().inline_answer("search prayer")

    article = answer.results[1]
    assert article.id == "search_muslim_2_1"
    assert article.page == make_controller().views.text_page(HadithByNumber("muslim", 2))


@pytest.mark.parametrize("query", ["", "search", "search   ", "hello"])
def test_inline_falls_back_to_help(query):
    answer = make_controller().inline_answer(query)

    (notice,) = answer.results
    assert notice.id == "help"


def test_concurrent_callbacks_render_like_sequential_ones():
    controller = make_controller()
    tokens = [
        encode(SearchResults("prayer", 1)),
        "hadiths:bukhari:1:1",
        "hadiths:bukhari:1:3",
        "hadith_detail:bukhari:1:2:4",
        "hadith_search:muslim:3",
        "collections:1",
        "books:muslim:1",
    ] * 20

    expected = [controller.handle_token(token) for token in tokens]
    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = list(pool.map(controller.handle_token, tokens))

    assert actual == expected
