import logging

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from bot.views import RenderedPage
from core.navigation import EncodingError, encode

logger = logging.getLogger(__name__)


def build_keyboard(page: RenderedPage) -> InlineKeyboardMarkup | None:
    """Encode every button of ``page``; buttons whose token cannot be sent are left out."""
    keyboard: list[list[InlineKeyboardButton]] = []
    for row in page.rows:
        buttons: list[InlineKeyboardButton] = []
        for button in row:
            try:
                data = encode(button.intent)
            except EncodingError as exc:
                logger.warning(
                    "Skipping button with unencodable callback data",
                    extra={"button": button.label, "reason": str(exc)},
                )
                continue
            buttons.append(InlineKeyboardButton(text=button.label, callback_data=data))
        if buttons:
            keyboard.append(buttons)
    if not keyboard:
        return None
    return InlineKeyboardMarkup(inline_keyboard=keyboard)


__all__ = ["build_keyboard"]
