import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.exceptions import TelegramAPIError
from aiogram.types import CallbackQuery, InlineQuery, Message, TelegramObject

from bot.texts.i18n import t
from core.ratelimit import RateLimiter

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseMiddleware):
    """Drop updates from users who exceeded their request budget."""

    def __init__(self, limiter: RateLimiter) -> None:
        super().__init__()
        self.limiter = limiter

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        user_id = self._get_user_id(event)
        if user_id is not None and not self.limiter.allow(user_id):
            logger.debug(
                "Rate limit exceeded",
                extra={"user_id": user_id, "event": type(event).__name__},
            )
            await self._handle_limited(event)
            return None
        return await handler(event, data)

    def _get_user_id(self, event: TelegramObject) -> int | None:
        user = getattr(event, "from_user", None)
        return user.id if user else None

    async def _handle_limited(self, event: TelegramObject) -> None:
        try:
            if isinstance(event, CallbackQuery):
                await event.answer(t("RATE_LIMIT_ALERT"), show_alert=True)
            elif isinstance(event, InlineQuery):
                await event.answer([], cache_time=1)
            elif isinstance(event, Message):
                await event.answer(t("RATE_LIMIT_TEXT"))
        except TelegramAPIError as exc:
            logger.warning(
                "Failed to deliver rate limit notice",
                extra={"event": type(event).__name__, "reason": str(exc)},
            )


__all__ = ["RateLimitMiddleware"]
