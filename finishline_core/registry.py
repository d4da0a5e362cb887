"""In-memory participant registry (pure, no UI/DB).

The registry owns every registered Participant and keeps two views of the
same instances:
- a dict keyed by bib, for O(1) uniqueness checks and lookup
- a list ordered by finish time, which defines rank

Ranking:
- register() appends, re-sorts the whole list by finish_seconds and rewrites
  rank = index + 1 on every participant, so one insert may shift many ranks
- the sort is stable: equal finish times keep registration order
- a participant with no decodable finish time (finish_seconds is None) sorts
  after all timed participants

Concurrency:
- register() is serialised by a lock since the re-rank step reads and writes
  the whole list
- query() never mutates; it iterates over a snapshot taken at call time
"""
from __future__ import annotations

import logging
import math
import threading
from typing import Iterator

from .names import format_name
from .types import DuplicateBibError, Participant

logger = logging.getLogger(__name__)


def _finish_sort_key(participant: Participant) -> float:
    if participant.finish_seconds is None:
        return math.inf
    return participant.finish_seconds


def _within(participant: Participant, lower: int | None, upper: int | None) -> bool:
    seconds = participant.finish_seconds
    if lower is None and upper is None:
        return True
    if seconds is None:
        return False
    if lower is not None and seconds < lower:
        return False
    if upper is not None and seconds > upper:
        return False
    return True


class ParticipantRegistry:
    """Authoritative set of participants for one race/session."""

    def __init__(self) -> None:
        self._by_bib: dict[str, Participant] = {}
        self._ranked: list[Participant] = []
        self._write_lock = threading.Lock()

    def register(
        self, bib: str, raw_name: str, finish_time_text: str
    ) -> Participant | DuplicateBibError:
        """Add a participant and recompute every rank.

        Args:
            bib: Unique participant number (numeric-looking string)
            raw_name: Name as typed; normalised with format_name()
            finish_time_text: "HH:MM:SS"; kept verbatim and decoded to seconds

        Returns:
            The new Participant, or DuplicateBibError (registry unchanged)
        """
        with self._write_lock:
            if bib in self._by_bib:
                logger.warning(f"Rejected registration: bib {bib} already registered")
                return DuplicateBibError(bib=bib)

            participant = Participant(
                bib=bib,
                name=format_name(raw_name),
                finish_time_text=finish_time_text,
            )
            self._by_bib[bib] = participant
            self._ranked.append(participant)
            self._rerank()
            logger.debug(
                f"Registered bib {bib} ({participant.name}) at "
                f"{participant.finish_seconds}s -> rank {participant.rank}"
            )
            return participant

    def _rerank(self) -> None:
        # Build a new list so snapshots held by in-flight queries stay untouched.
        ranked = sorted(self._ranked, key=_finish_sort_key)
        for index, participant in enumerate(ranked):
            participant.rank = index + 1
        self._ranked = ranked

    def query(
        self, lower_seconds: int | None = None, upper_seconds: int | None = None
    ) -> Iterator[Participant]:
        """Lazily yield participants with lower <= finish_seconds <= upper, in rank order.

        None on either side means unbounded on that side.
        """
        snapshot = tuple(self._ranked)
        return (p for p in snapshot if _within(p, lower_seconds, upper_seconds))

    def get(self, bib: str) -> Participant | None:
        return self._by_bib.get(bib)

    def __contains__(self, bib: object) -> bool:
        return bib in self._by_bib

    def __len__(self) -> int:
        return len(self._by_bib)

    def __iter__(self) -> Iterator[Participant]:
        return iter(tuple(self._ranked))
