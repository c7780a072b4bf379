from __future__ import annotations

from dataclasses import dataclass

from aiogram.enums import ParseMode
from aiogram.utils.text_decorations import (
    TextDecoration,
    html_decoration,
    markdown_decoration,
)


@dataclass(frozen=True)
class MarkupStyle:
    """Escaping and emphasis rules for one Telegram parse mode."""

    parse_mode: str
    decoration: TextDecoration

    def quote(self, value: str) -> str:
        return self.decoration.quote(value)

    def bold(self, value: str) -> str:
        return self.decoration.bold(self.decoration.quote(value))


HTML = MarkupStyle(parse_mode=ParseMode.HTML, decoration=html_decoration)
MARKDOWN = MarkupStyle(parse_mode=ParseMode.MARKDOWN_V2, decoration=markdown_decoration)

_STYLES = {
    "html": HTML,
    "markdownv2": MARKDOWN,
    "markdown": MARKDOWN,
}


def get_markup(name: str | None) -> MarkupStyle:
    if not name:
        return HTML
    return _STYLES.get(name.strip().lower(), HTML)


__all__ = ["HTML", "MARKDOWN", "MarkupStyle", "get_markup"]
