"""Interrupt output lines.

An IrqLine is a single named wire leaving a peripheral. Whatever sits on the
other end (an LED model, a test, a platform interrupt router) connects a
handler that receives the new level every time the line changes.
"""

from __future__ import annotations

from typing import Callable, List

IrqHandler = Callable[[int], None]


class IrqLine:
    """A single interrupt output wire."""

    def __init__(self, name: str):
        self.name = name
        self.level = 0
        self._handlers: List[IrqHandler] = []

    def connect(self, handler: IrqHandler) -> None:
        """Attach a handler called with the new level on every change."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: IrqHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def set_level(self, level: int) -> None:
        self.level = 1 if level else 0
        for handler in list(self._handlers):
            handler(self.level)

    def raise_(self) -> None:
        self.set_level(1)

    def lower(self) -> None:
        self.set_level(0)

    def pulse(self) -> None:
        """Drive the line high then low again."""
        self.raise_()
        self.lower()

    def __repr__(self) -> str:
        return f"IrqLine({self.name!r}, level={self.level})"
