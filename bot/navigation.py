from __future__ import annotations

import logging
import random
from typing import Callable

from bot.views import HadithViews, InlineAnswer, RenderedPage
from core.hadith import CollectionStore
from core.navigation import (
    BrowseBooks,
    BrowseCollections,
    BrowseHadiths,
    DecodeError,
    DecodeFailure,
    HadithByNumber,
    HadithDetail,
    Intent,
    NavigationError,
    PickRandom,
    RandomHadith,
    SearchPrompt,
    SearchResults,
    ShowHelp,
    TextPage,
    decode,
)

logger = logging.getLogger(__name__)

COMMANDS = ("start", "help", "collections", "random", "search", "hadith")


class NavigationController:
    """Stateless dispatcher from intents to rendered pages.

    Everything the controller needs to rebuild a screen arrives in the
    intent itself, so any number of updates may be handled concurrently.
    """

    def __init__(
        self,
        store: CollectionStore,
        views: HadithViews,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.views = views
        self.rng = rng or random.Random()
        self._routes: dict[type, Callable[[Intent, int], RenderedPage]] = {
            BrowseCollections: lambda i, _: views.collections(i.page),
            BrowseBooks: lambda i, _: views.books(i.collection, i.page),
            BrowseHadiths: lambda i, _: views.hadiths(i.collection, i.book, i.page),
            HadithDetail: lambda i, _: views.text_page(i, 0),
            HadithByNumber: lambda i, _: views.text_page(i, 0),
            RandomHadith: lambda i, _: views.text_page(i, 0),
            TextPage: lambda i, _: views.text_page(i.source, i.page_index),
            SearchResults: lambda i, limit: views.search_results(i.query, i.page, limit),
            ShowHelp: lambda i, _: views.help(),
            SearchPrompt: lambda i, _: views.search_prompt(),
        }

    @property
    def parse_mode(self) -> str:
        return self.views.markup.parse_mode

    def resolve_random(self) -> RandomHadith | None:
        pick = self.store.get_random_hadith(self.rng)
        if pick is None:
            return None
        return RandomHadith(pick.collection.name, pick.hadith.hadith_number)

    def handle(self, intent: Intent, *, search_limit: int | None = None) -> RenderedPage:
        if isinstance(intent, PickRandom):
            resolved = self.resolve_random()
            if resolved is None:
                logger.info("Random hadith requested from an empty corpus")
                return self.views.random_unavailable()
            intent = resolved

        route = self._routes.get(type(intent))
        if route is None:
            raise NavigationError(f"no view for {type(intent).__name__}")
        if search_limit is None:
            search_limit = self.views.settings.paged_search_limit
        return route(intent, search_limit)

    def handle_token(self, token: str) -> RenderedPage | None:
        """Decode a callback token and render it.

        Returns ``None`` for tokens this bot never issued; the caller only
        acknowledges the callback in that case.
        """
        try:
            intent = decode(token)
        except DecodeError as exc:
            if exc.reason is DecodeFailure.UNKNOWN_TAG:
                logger.info("Ignoring callback with unknown tag", extra={"callback_data": token})
                return None
            logger.warning(
                "Undecodable callback token",
                extra={"callback_data": token, "reason": exc.reason.value, "detail": exc.detail},
            )
            return self.views.stale_button()
        return self.handle(intent)

    def handle_command(self, name: str, args: str = "") -> RenderedPage | None:
        name = name.lower()
        args = args.strip()
        if name == "start":
            return self.views.welcome()
        if name == "help":
            return self.views.help()
        if name == "collections":
            return self.handle(BrowseCollections(1))
        if name == "random":
            return self.handle(PickRandom())
        if name == "search":
            if not args:
                return self.views.search_usage()
            return self.handle(
                SearchResults(args, 1), search_limit=self.views.settings.command_search_limit
            )
        if name == "hadith":
            parts = args.split()
            if len(parts) != 2:
                return self.views.hadith_usage()
            try:
                number = int(parts[1])
            except ValueError:
                return self.views.hadith_usage()
            return self.handle(HadithByNumber(parts[0].lower(), number))
        return None

    def inline_answer(self, query: str, offset: str = "") -> InlineAnswer:
        text = query.strip().lower()
        if text == "random":
            resolved = self.resolve_random()
            if resolved is None:
                return InlineAnswer()
            return self.views.inline_random(resolved)
        if text.startswith("search "):
            keyword = text[len("search ") :].strip()
            if keyword:
                return self.views.inline_search(keyword, offset)
        return self.views.inline_help()


__all__ = ["COMMANDS", "NavigationController"]
