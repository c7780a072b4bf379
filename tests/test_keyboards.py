import logging

from bot.keyboards.common import build_keyboard
from bot.views import Button, HadithViews, RenderedPage
from core.navigation import MAX_TOKEN_BYTES, BrowseCollections, HadithByNumber, SearchResults
from tests.corpus import make_long_store, make_store


def test_keyboard_mirrors_rows():
    page = HadithViews(make_store()).welcome()

    keyboard = build_keyboard(page)

    assert [[b.text for b in row] for row in keyboard.inline_keyboard] == [
        ["📚 Browse Collections", "🔍 Search Hadith"],
        ["🎲 Random Hadith", "❓ Help"],
    ]
    assert keyboard.inline_keyboard[0][0].callback_data == "collections:1"


def test_unencodable_button_is_skipped_with_warning(caplog):
    page = RenderedPage(
        text="results",
        rows=(
            (Button("Next ➡️", SearchResults("q" * 80, 2)),),
            (Button("Back", BrowseCollections(1)),),
        ),
    )

    with caplog.at_level(logging.WARNING, logger="bot.keyboards.common"):
        keyboard = build_keyboard(page)

    assert [[b.callback_data for b in row] for row in keyboard.inline_keyboard] == [["collections:1"]]
    assert any(record.button == "Next ➡️" for record in caplog.records)


def test_keyboard_is_omitted_when_no_button_survives():
    page = RenderedPage(text="x", rows=((Button("bad", HadithByNumber("a:b", 1)),),))

    assert build_keyboard(page) is None
    assert build_keyboard(RenderedPage(text="plain")) is None


def test_rendered_pages_fit_callback_data_limit():
    views = HadithViews(make_store())
    long_views = HadithViews(make_long_store())
    pages = [
        views.welcome(),
        views.help(),
        views.collections(1),
        views.books("bukhari", 1),
        views.hadiths("bukhari", 1, 2),
        views.search_results("prayer", 1),
        views.search_results("hadith text", 2),
        views.text_page(HadithByNumber("muslim", 3)),
        long_views.text_page(HadithByNumber("bukhari", 7), 1),
    ]

    for page in pages:
        keyboard = build_keyboard(page)
        expected = sum(len(row) for row in page.rows)
        buttons = [b for row in keyboard.inline_keyboard for b in row]
        assert len(buttons) == expected
        assert all(len(b.callback_data.encode("utf-8")) <= MAX_TOKEN_BYTES for b in buttons)
