"""Value wrappers for argument kinds Python has no dedicated type for."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Char:
    """A single character, carried as its codepoint."""

    codepoint: int

    def __post_init__(self) -> None:
        if self.codepoint < 0:
            raise ValueError(f"Char codepoint must be non-negative, got {self.codepoint}.")

    @classmethod
    def of(cls, text: str) -> Char:
        if len(text) != 1:
            raise ValueError(f"Char expects exactly one character, got {text!r}.")
        return cls(ord(text))


@dataclass(frozen=True, slots=True)
class Pointer:
    """An address rendered in hex unless its format type says otherwise."""

    address: int

    def __post_init__(self) -> None:
        if self.address < 0:
            raise ValueError(f"Pointer address must be non-negative, got {self.address}.")

    @classmethod
    def of(cls, obj: object) -> Pointer:
        """Pointer to a live object, using its identity as the address."""

        return cls(id(obj))
