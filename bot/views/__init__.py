from .inline import InlineAnswer, InlineResult, NoticeArticle, TextArticle
from .pages import Button, RenderedPage, Row
from .renderer import HadithViews, ViewSettings, find_collection_for_hadith, hadith_label

__all__ = [
    "Button",
    "HadithViews",
    "InlineAnswer",
    "InlineResult",
    "NoticeArticle",
    "RenderedPage",
    "Row",
    "TextArticle",
    "ViewSettings",
    "find_collection_for_hadith",
    "hadith_label",
]
