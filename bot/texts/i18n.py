from __future__ import annotations

from bot.texts.en import HEADINGS, TEXTS


def t(key: str, **kwargs: object) -> str:
    text = TEXTS[key]
    if kwargs:
        return text.format(**kwargs)
    return text


def headings(key: str) -> frozenset[str]:
    return frozenset(HEADINGS.get(key, ()))


__all__ = ["t", "headings"]
