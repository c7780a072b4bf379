import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[1]


def _parse_int(raw: str | None, default: int) -> int:
    candidate = (raw or "").strip()
    if not candidate:
        return default
    try:
        return int(candidate)
    except ValueError:
        return default


def _parse_bool(raw: str | None, default: bool = False) -> bool:
    candidate = (raw or "").strip().lower()
    if not candidate:
        return default
    return candidate in {"1", "true", "yes", "on"}


TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
HADITH_DATA_DIR = os.getenv("HADITH_DATA_DIR", str(BASE_DIR / "data"))

RATE_LIMIT_REQUESTS = _parse_int(os.getenv("RATE_LIMIT_REQUESTS"), 10)
RATE_LIMIT_WINDOW_SEC = _parse_int(os.getenv("RATE_LIMIT_WINDOW_SEC"), 60)

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
LOG_DIR = os.getenv("LOG_DIR", str(BASE_DIR / "logs"))

PARSE_MODE = os.getenv("PARSE_MODE", "HTML")
TEXT_PAGE_LIMIT = _parse_int(os.getenv("TEXT_PAGE_LIMIT"), 3800)
TIDY_CHAT = _parse_bool(os.getenv("TIDY_CHAT"))

WEBHOOK_URL = os.getenv("WEBHOOK_URL", "")
WEBHOOK_PATH = os.getenv("WEBHOOK_PATH", "/telegram/webhook")
WEBHOOK_SECRET = os.getenv("WEBHOOK_SECRET", "")
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = _parse_int(os.getenv("SERVER_PORT"), 8080)


def require_bot_token() -> str:
    if not TELEGRAM_BOT_TOKEN:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not set in environment or .env")
    return TELEGRAM_BOT_TOKEN
