"""Plain-text hadith documents and their per-page decoration.

Documents are built without any markup so the paginator can cut them
anywhere; each page is escaped and emphasised afterwards.
"""

from __future__ import annotations

from typing import Iterable

from bot.texts.i18n import t
from bot.utils.formatting import MarkupStyle
from core.hadith import Book, Collection, Hadith

HADITH_HEADINGS = frozenset(
    {t("HADITH_HEADING"), t("ARABIC_HEADING"), t("ENGLISH_HEADING")}
)
HADITH_LABELS = (t("NARRATOR_LABEL"), t("REFERENCE_LABEL"), t("GRADE_LABEL"))


def truncate(value: str, max_len: int) -> str:
    if len(value) <= max_len:
        return value
    return value[: max_len - 3] + "..."


def hadith_document(hadith: Hadith, collection: Collection | None, book: Book | None) -> str:
    title = collection.title if collection is not None else t("UNKNOWN_COLLECTION")
    book_number = book.book_number if book is not None else 0

    lines = [t("HADITH_HEADING"), "", t("ARABIC_HEADING"), hadith.arabic, ""]
    if hadith.narrator:
        lines.append(f"{t('NARRATOR_LABEL')} {hadith.narrator}")
    lines.extend([t("ENGLISH_HEADING"), hadith.english, ""])
    reference = t("REFERENCE_TEXT", collection=title, book=book_number, number=hadith.hadith_number)
    lines.append(f"{t('REFERENCE_LABEL')} {reference}")
    lines.append(f"{t('GRADE_LABEL')} {hadith.display_grade}")
    return "\n".join(lines)


def decorate(
    text: str,
    markup: MarkupStyle,
    *,
    headings: Iterable[str] = (),
    labels: Iterable[str] = (),
) -> str:
    """Escape ``text`` line by line, bolding heading lines and label prefixes."""
    heading_set = frozenset(headings)
    label_list = tuple(labels)
    out: list[str] = []
    for line in text.split("\n"):
        if line in heading_set:
            out.append(markup.bold(line))
            continue
        for label in label_list:
            if line.startswith(label):
                out.append(markup.bold(label) + markup.quote(line[len(label) :]))
                break
        else:
            out.append(markup.quote(line))
    return "\n".join(out)


def decorate_hadith_page(text: str, markup: MarkupStyle) -> str:
    return decorate(text, markup, headings=HADITH_HEADINGS, labels=HADITH_LABELS)


__all__ = [
    "HADITH_HEADINGS",
    "HADITH_LABELS",
    "decorate",
    "decorate_hadith_page",
    "hadith_document",
    "truncate",
]
