import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env", override=False)

import uvicorn

from bot.runtime import Runtime, build_runtime
from core.config import (
    LOG_DIR,
    LOG_LEVEL,
    RATE_LIMIT_WINDOW_SEC,
    SERVER_HOST,
    SERVER_PORT,
    WEBHOOK_PATH,
    WEBHOOK_SECRET,
    WEBHOOK_URL,
)
from core.logging import setup_logging
from core.ratelimit import RateLimiter

logger = logging.getLogger(__name__)


async def run_cleanup(limiter: RateLimiter, interval_sec: float) -> None:
    """Periodically forget users whose request window has emptied."""
    while True:
        await asyncio.sleep(interval_sec)
        removed = limiter.cleanup()
        if removed:
            logger.debug("Rate limiter cleanup", extra={"removed_users": removed})


def webhook_endpoint() -> str:
    return WEBHOOK_URL.rstrip("/") + WEBHOOK_PATH


async def run_webhook(runtime: Runtime) -> None:
    from api.main import app
    from api.routers.telegram_webhook import install_runtime

    install_runtime(runtime)
    await runtime.bot.set_webhook(
        webhook_endpoint(),
        secret_token=WEBHOOK_SECRET or None,
        allowed_updates=runtime.dispatcher.resolve_used_update_types(),
    )
    logger.info(
        "Serving webhook",
        extra={"mode": "startup", "host": SERVER_HOST, "port": SERVER_PORT, "path": WEBHOOK_PATH},
    )
    server = uvicorn.Server(uvicorn.Config(app, host=SERVER_HOST, port=SERVER_PORT, log_config=None))
    await server.serve()


async def run_polling(runtime: Runtime) -> None:
    await runtime.bot.delete_webhook(drop_pending_updates=False)
    logger.info("Starting long polling", extra={"mode": "startup"})
    await runtime.dispatcher.start_polling(
        runtime.bot, allowed_updates=runtime.dispatcher.resolve_used_update_types()
    )


async def main() -> None:
    setup_logging(LOG_LEVEL, LOG_DIR)
    runtime = build_runtime()
    cleanup = asyncio.create_task(run_cleanup(runtime.limiter, RATE_LIMIT_WINDOW_SEC))
    try:
        if WEBHOOK_URL:
            await run_webhook(runtime)
        else:
            await run_polling(runtime)
    finally:
        cleanup.cancel()
        await runtime.bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
