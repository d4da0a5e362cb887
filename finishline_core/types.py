"""Type definitions for registered participants and registry results."""
from __future__ import annotations

from dataclasses import dataclass, field

from .timecodec import decode_time

# Fields that are fixed once a Participant has been constructed.
_READ_ONLY_FIELDS = frozenset({"bib", "name", "finish_time_text", "finish_seconds"})


@dataclass(eq=False)
class Participant:
    """
    A registered finisher.

    finish_seconds is always derived from finish_time_text and cannot be
    passed in. rank is the only field the registry rewrites after creation.
    """

    bib: str
    name: str
    finish_time_text: str
    finish_seconds: int | None = field(init=False)
    rank: int = 0

    def __post_init__(self) -> None:
        self.finish_seconds = decode_time(self.finish_time_text)

    def __setattr__(self, key: str, value) -> None:
        if key in _READ_ONLY_FIELDS and key in self.__dict__:
            raise AttributeError(f"Participant.{key} is read-only")
        super().__setattr__(key, value)


@dataclass(frozen=True)
class DuplicateBibError:
    """Returned by register() when the bib is already taken (state unchanged)."""

    bib: str
    message: str | None = None

    def __post_init__(self) -> None:
        if self.message is None:
            object.__setattr__(self, "message", f"Bib {self.bib} is already registered")


@dataclass(frozen=True)
class ResultRow:
    rank: int
    bib: str
    name: str
    finish_time: str
