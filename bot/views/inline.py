from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from bot.views.pages import RenderedPage


@dataclass(frozen=True)
class TextArticle:
    """Inline result that posts a navigable hadith page."""

    id: str
    title: str
    description: str
    page: RenderedPage


@dataclass(frozen=True)
class NoticeArticle:
    """Inline result that posts a short informational message without buttons."""

    id: str
    title: str
    description: str
    text: str


InlineResult = Union[TextArticle, NoticeArticle]


@dataclass(frozen=True)
class InlineAnswer:
    results: tuple[InlineResult, ...] = ()
    next_offset: str = ""
    cache_time: int = 10


__all__ = ["InlineAnswer", "InlineResult", "NoticeArticle", "TextArticle"]
