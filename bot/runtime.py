from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from aiogram import Bot, Dispatcher

from bot.handlers import navigation
from bot.middlewares.rate_limit import RateLimitMiddleware
from bot.middlewares.request_id import RequestIdMiddleware
from bot.navigation import NavigationController
from bot.utils.formatting import get_markup
from bot.views import HadithViews, ViewSettings
from core import config
from core.hadith import CollectionStore, load_collection_store
from core.ratelimit import RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class Runtime:
    """Everything a running bot process shares between polling and the webhook app."""

    bot: Any
    dispatcher: Any
    controller: NavigationController
    limiter: RateLimiter
    webhook_secret: str = ""


def build_controller(
    store: CollectionStore,
    *,
    parse_mode: str | None = None,
    text_page_limit: int | None = None,
    rng: random.Random | None = None,
) -> NavigationController:
    settings = ViewSettings(text_page_limit=text_page_limit or config.TEXT_PAGE_LIMIT)
    views = HadithViews(store, get_markup(parse_mode or config.PARSE_MODE), settings)
    return NavigationController(store, views, rng=rng)


def build_dispatcher(
    controller: NavigationController,
    limiter: RateLimiter,
    *,
    tidy_chat: bool = False,
) -> Dispatcher:
    dp = Dispatcher()
    dp["controller"] = controller
    dp["tidy_chat"] = tidy_chat

    rate_limit = RateLimitMiddleware(limiter)
    for observer in (dp.message, dp.callback_query, dp.inline_query):
        observer.middleware(RequestIdMiddleware())
        observer.middleware(rate_limit)

    dp.include_router(navigation.create_router())
    return dp


def build_runtime(token: str | None = None) -> Runtime:
    store = load_collection_store(config.HADITH_DATA_DIR)
    controller = build_controller(store)
    limiter = RateLimiter(config.RATE_LIMIT_REQUESTS, config.RATE_LIMIT_WINDOW_SEC)
    dispatcher = build_dispatcher(controller, limiter, tidy_chat=config.TIDY_CHAT)
    bot = Bot(token=token or config.require_bot_token())
    logger.info(
        "Runtime ready",
        extra={"mode": "startup", **store.stats(), "parse_mode": controller.parse_mode},
    )
    return Runtime(
        bot=bot,
        dispatcher=dispatcher,
        controller=controller,
        limiter=limiter,
        webhook_secret=config.WEBHOOK_SECRET,
    )


__all__ = ["Runtime", "build_controller", "build_dispatcher", "build_runtime"]
