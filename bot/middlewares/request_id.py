from time import monotonic
from typing import Any, Awaitable, Callable

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from core.logging import request_id_var


def build_request_id(event: TelegramObject) -> str:
    user_id = getattr(getattr(event, "from_user", None), "id", None)
    message_id = getattr(getattr(event, "message", event), "message_id", None)
    suffix = int(monotonic() * 1000) % 1_000_000
    return f"u{user_id or 'anon'}-m{message_id or 'na'}-{suffix}"


class RequestIdMiddleware(BaseMiddleware):
    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        token = request_id_var.set(build_request_id(event))
        try:
            return await handler(event, data)
        finally:
            request_id_var.reset(token)


__all__ = ["RequestIdMiddleware", "build_request_id"]
