"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with ``width`` and ``height``."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
