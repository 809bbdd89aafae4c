"""Integers that remember how many digits they were written with.

A date-like version such as ``2022-02-09`` must come back out as
``2022.02.09``, so every numeric component keeps the character width of the
token it was parsed from.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ZeroPaddedInt:
    """Non-negative integer paired with its display width.

    Attributes:
        value: Numeric value
        width: Number of characters used when rendering (zero-padded)
    """

    value: int
    width: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"ZeroPaddedInt value must be non-negative: {self.value}")
        if self.width < 1:
            raise ValueError(f"ZeroPaddedInt width must be positive: {self.width}")

    @classmethod
    def from_int(cls, value: int) -> ZeroPaddedInt:
        """Build from a plain integer using its natural digit count (no padding)."""
        return cls(value, len(str(value)))

    @classmethod
    def from_str(cls, text: str) -> ZeroPaddedInt:
        """Parse a token of decimal digits, keeping its length as the width.

        Args:
            text: Token such as ``"007"``

        Returns:
            ZeroPaddedInt with ``width == len(text)``

        Raises:
            ValueError: If ``text`` is not made of ASCII decimal digits only
        """
        if not text or not text.isascii() or not text.isdigit():
            raise ValueError(f"Not a non-negative integer: {text!r}")
        return cls(int(text), len(text))

    def __add__(self, other: int) -> ZeroPaddedInt:
        if not isinstance(other, int):
            return NotImplemented
        return ZeroPaddedInt(self.value + other, self.width)

    def increment(self) -> ZeroPaddedInt:
        """Return a copy with the value increased by one and the same width."""
        return self + 1

    def __str__(self) -> str:
        # Padding never truncates: 099 + 1 renders as 100
        return f"{self.value:0{self.width}d}"
