"""Price level and price zone value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceLevel:
    """Labeled price, e.g. ``R1`` or ``61.8%``."""

    label: str
    value: float


@dataclass(frozen=True)
class PriceZone:
    """Closed price interval with ``start <= end``."""

    start: float
    end: float

    @classmethod
    def between(cls, a: float, b: float) -> PriceZone:
        """Build a zone from two endpoints in any order."""
        return cls(start=min(a, b), end=max(a, b))

    @property
    def width(self) -> float:
        return self.end - self.start

    def contains(self, price: float) -> bool:
        return self.start <= price <= self.end


def sorted_levels(levels: list[PriceLevel]) -> tuple[PriceLevel, ...]:
    """Return levels ordered ascending by value (stable on ties)."""
    return tuple(sorted(levels, key=lambda lvl: lvl.value))
