from __future__ import annotations

import hmac
import logging

from aiogram.types import Update
from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import ValidationError

from bot.runtime import Runtime
from core.config import WEBHOOK_PATH

logger = logging.getLogger(__name__)

router = APIRouter()

_runtime: Runtime | None = None


def install_runtime(runtime: Runtime | None) -> None:
    global _runtime
    _runtime = runtime


def current_runtime() -> Runtime | None:
    return _runtime


def get_runtime() -> Runtime:  # pragma: no cover - dependency hook
    runtime = current_runtime()
    if runtime is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Bot runtime is not configured",
        )
    return runtime


def verify_secret(expected: str, provided: str | None) -> bool:
    if not expected:
        return True
    return hmac.compare_digest(expected, provided or "")


@router.post(WEBHOOK_PATH)
async def handle_telegram_webhook(
    request: Request,
    x_telegram_bot_api_secret_token: str | None = Header(
        default=None, alias="X-Telegram-Bot-Api-Secret-Token"
    ),
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, str]:
    if not verify_secret(runtime.webhook_secret, x_telegram_bot_api_secret_token):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid secret token")

    try:
        payload = await request.json()
        update = Update.model_validate(payload, context={"bot": runtime.bot})
    except (ValueError, ValidationError) as exc:
        logger.warning("Rejected malformed webhook update", extra={"reason": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload"
        ) from exc

    await runtime.dispatcher.feed_update(runtime.bot, update)
    return {"status": "ok"}
