import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from typing import Iterable

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [rid=%(request_id)s]: %(message)s"
LOG_FILE = "bot.log"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "request_id"}


def extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {key: value for key, value in vars(record).items() if key not in _RECORD_FIELDS}


class SafeLogFilter(logging.Filter):
    """Tags records with the current request id and masks secrets, extras included."""

    def __init__(self, secrets: Iterable[str]) -> None:
        super().__init__()
        self.secrets = [value for value in secrets if value]

    def _mask(self, text: str) -> str:
        for secret in self.secrets:
            text = text.replace(secret, "***")
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("-")
        record.msg = self._mask(record.getMessage())
        record.args = ()
        for key, value in extra_fields(record).items():
            if isinstance(value, str):
                setattr(record, key, self._mask(value))
        return True


class ContextFormatter(logging.Formatter):
    """Appends ``extra={...}`` fields as ``key=value`` pairs after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = extra_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{line} | {pairs}"


def resolve_level(name: str | None) -> int:
    return LOG_LEVELS.get((name or "").strip().lower(), logging.INFO)


def setup_logging(level: str | None = "info", log_dir: str | None = None) -> None:
    """Configure console and rotating file logging for the bot.

    The bot token and webhook secret are masked in every handler's output.
    aiogram's per-update chatter is held at WARNING unless a stricter level
    was requested.
    """
    resolved = resolve_level(level)
    logs_dir = log_dir or os.path.join(os.path.dirname(os.path.dirname(__file__)), "logs")
    os.makedirs(logs_dir, exist_ok=True)

    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(
            os.path.join(logs_dir, LOG_FILE), maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        ),
    ]
    secrets = SafeLogFilter([os.getenv("TELEGRAM_BOT_TOKEN", ""), os.getenv("WEBHOOK_SECRET", "")])
    formatter = ContextFormatter(LOG_FORMAT)
    for handler in handlers:
        handler.addFilter(secrets)
        handler.setFormatter(formatter)

    logging.basicConfig(level=resolved, handlers=handlers, force=True)
    logging.getLogger("aiogram.event").setLevel(max(resolved, logging.WARNING))


__all__ = [
    "ContextFormatter",
    "SafeLogFilter",
    "extra_fields",
    "request_id_var",
    "resolve_level",
    "setup_logging",
]
