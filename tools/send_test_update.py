"""
Post a fake Telegram update to a locally running webhook.

Usage:
    pip install -e ".[tools]"
    python tools/send_test_update.py /search prayer

The secret header is taken from WEBHOOK_SECRET in the environment or .env.
"""

from __future__ import annotations

import json
import os
import sys
import time
from pathlib import Path

import httpx
from dotenv import load_dotenv


def build_update(text: str, user_id: int = 1) -> dict:
    now = int(time.time())
    return {
        "update_id": now,
        "message": {
            "message_id": now % 1_000_000,
            "date": now,
            "chat": {"id": user_id, "type": "private"},
            "from": {"id": user_id, "is_bot": False, "first_name": "Local"},
            "text": text,
        },
    }


def main() -> None:
    project_root = Path(__file__).resolve().parents[1]
    load_dotenv(project_root / ".env", override=False)

    port = os.getenv("SERVER_PORT", "8080")
    path = os.getenv("WEBHOOK_PATH", "/telegram/webhook")
    webhook_url = os.getenv("LOCAL_WEBHOOK_URL", f"http://localhost:{port}{path}")
    secret = os.getenv("WEBHOOK_SECRET", "")
    text = " ".join(sys.argv[1:]) or "/start"

    body = json.dumps(build_update(text), ensure_ascii=False, separators=(",", ":")).encode()
    headers = {"content-type": "application/json"}
    if secret:
        headers["X-Telegram-Bot-Api-Secret-Token"] = secret

    print(f"POST {webhook_url}")
    print(f"Secret attached: {bool(secret)}")

    response = httpx.post(webhook_url, content=body, headers=headers, timeout=10.0)

    print(f"Status: {response.status_code}")
    try:
        print(f"Body: {response.json()}")
    except ValueError:
        print(f"Raw body: {response.text}")


if __name__ == "__main__":
    main()
