"""Contracts between interrupt sources, the interrupt controller and its target."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class InterruptEvent:
    """One summary-interrupt assertion: who raised it and, optionally, a vector."""

    source: object
    vector: int | None = None


class InterruptTarget(Protocol):
    """Receiver of delivered interrupts (a CPU model, a test double, ...)."""

    def handle_interrupt(self, event: InterruptEvent) -> None: ...


class IInterruptController(ABC):
    """Collects interrupts from subscribed sources and delivers them to a target."""

    @abstractmethod
    def subscribe(self, peripheral: object) -> None: ...

    @abstractmethod
    def attach_cpu(self, cpu: InterruptTarget) -> None: ...

    @abstractmethod
    def notify(self, source: object, vector: int | None = None) -> InterruptEvent:
        """Record an interrupt from source and forward it to the target."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Drop every pending event."""
        ...
