from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from core.navigation import Intent


@dataclass(frozen=True)
class Button:
    label: str
    intent: Intent


Row = Tuple[Button, ...]


@dataclass(frozen=True)
class RenderedPage:
    """Text plus keyboard rows for one screen.

    ``replace`` tells the transport whether a callback may edit the message
    in place; pages with ``replace=False`` always go out as new messages.
    """

    text: str
    rows: tuple[Row, ...] = ()
    replace: bool = True

    @property
    def buttons(self) -> tuple[Button, ...]:
        return tuple(button for row in self.rows for button in row)


def rows_of(*rows: Row | list[Button]) -> tuple[Row, ...]:
    """Pack rows, dropping empty ones."""
    return tuple(tuple(row) for row in rows if row)


__all__ = ["Button", "RenderedPage", "Row", "rows_of"]
