"""Interrupt controller implementation."""

from __future__ import annotations

from typing import List, Optional

from gpiosim.interfaces.interrupt_controller import (
    IInterruptController,
    InterruptEvent,
    InterruptTarget,
)


class InterruptController(IInterruptController):
    """Simple interrupt controller with pub/sub semantics.

    Every notification is recorded as pending and forwarded to the attached
    CPU (if any). The host platform drains `pending` as it sees fit.
    """

    def __init__(self):
        self._subscribers: List[object] = []
        self._cpu: Optional[InterruptTarget] = None
        self._pending: List[InterruptEvent] = []

    def subscribe(self, peripheral: object) -> None:
        if peripheral not in self._subscribers:
            self._subscribers.append(peripheral)

    def attach_cpu(self, cpu: InterruptTarget) -> None:
        self._cpu = cpu

    def notify(self, source: object, vector: int | None = None) -> InterruptEvent:
        event = InterruptEvent(source=source, vector=vector)
        self._pending.append(event)
        if self._cpu is not None:
            self._cpu.handle_interrupt(event)
        return event

    def drain(self) -> list[InterruptEvent]:
        """Return the pending events and forget them."""
        events, self._pending = self._pending, []
        return events

    @property
    def pending(self) -> list[InterruptEvent]:
        return list(self._pending)

    @property
    def subscribers(self) -> list[object]:
        return list(self._subscribers)

    def reset(self) -> None:
        self._pending.clear()
