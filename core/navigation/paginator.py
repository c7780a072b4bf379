from __future__ import annotations


def paginate(text: str, max_runes: int) -> list[str]:
    """Split ``text`` into pages of at most ``max_runes`` characters.

    Each cut prefers the last newline in the final third of the window and
    falls back to a hard cut at the window edge. Pages are stripped of
    surrounding whitespace. The result always holds at least one page.
    """
    if max_runes <= 0:
        return [text]
    if len(text) <= max_runes:
        return [text.strip()]

    pages: list[str] = []
    start = 0
    while len(text) - start > max_runes:
        window_end = start + max_runes
        # a cut at start itself would never advance
        cut = text.rfind("\n", start + max(max_runes * 2 // 3, 1), window_end)
        if cut == -1:
            cut = window_end
        page = text[start:cut].strip()
        if page:
            pages.append(page)
        start = cut

    tail = text[start:].strip()
    if tail or not pages:
        pages.append(tail)
    return pages


__all__ = ["paginate"]
