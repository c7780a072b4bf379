from typing import Any

from fastapi import FastAPI

from api.routers import telegram_webhook

app = FastAPI()


@app.get("/api/health")
async def health_check() -> dict[str, Any]:
    payload: dict[str, Any] = {"status": "ok"}
    runtime = telegram_webhook.current_runtime()
    if runtime is not None:
        payload.update(runtime.controller.store.stats())
    return payload


app.include_router(telegram_webhook.router)
