"""Registration desk: the narrow interface a UI shell calls into.

Two entry points mirror the two actions on the desk form:
- submit_registration(): validate the three raw fields, register, report back
- show_results(): validate an optional time window, query, build table rows

Both return plain outcome values; nothing here raises for bad user input.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from .registry import ParticipantRegistry
from .timecodec import encode_time
from .types import DuplicateBibError, Participant, ResultRow
from .validation import RegistrationForm, ResultsWindow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationOutcome:
    """Result of a registration attempt, ready for display."""

    ok: bool
    message: str
    field: str | None = None
    participant: Participant | None = None


@dataclass(frozen=True)
class ResultsView:
    """Rows for the results table plus the empty-state flag."""

    ok: bool
    rows: tuple[ResultRow, ...] = ()
    message: str | None = None
    field: str | None = None

    @property
    def empty(self) -> bool:
        return self.ok and not self.rows


def _first_error(exc: ValidationError) -> tuple[str | None, str]:
    # Errors come back in field declaration order; report only the first, like the form does.
    err = exc.errors()[0]
    loc = err.get("loc") or ()
    field = str(loc[0]) if loc else None
    ctx_error = (err.get("ctx") or {}).get("error")
    message = str(ctx_error) if ctx_error is not None else err.get("msg", "Invalid input")
    return field, message


def _format_finish(participant: Participant) -> str:
    if participant.finish_seconds is None:
        return participant.finish_time_text
    return encode_time(participant.finish_seconds)


def submit_registration(
    registry: ParticipantRegistry, bib: str, name: str, finish_time: str
) -> RegistrationOutcome:
    """Validate raw desk fields and register the participant.

    Returns:
        RegistrationOutcome with ok=False and the offending field on invalid
        input or duplicate bib, otherwise ok=True and the new participant.
    """
    try:
        form = RegistrationForm(bib=bib, name=name, finish_time=finish_time)
    except ValidationError as e:
        field, message = _first_error(e)
        logger.warning(f"Registration validation failed on {field}: {message}")
        return RegistrationOutcome(ok=False, field=field, message=message)

    result = registry.register(form.bib, form.name, form.finish_time)
    if isinstance(result, DuplicateBibError):
        return RegistrationOutcome(ok=False, field="bib", message=result.message)

    return RegistrationOutcome(
        ok=True,
        participant=result,
        message=(
            f"{result.name} with bib {result.bib} registered "
            f"with finish time {result.finish_time_text}"
        ),
    )


def show_results(
    registry: ParticipantRegistry, lower: str | None = None, upper: str | None = None
) -> ResultsView:
    """Build result rows for finishers inside [lower, upper]; empty bounds are open."""
    try:
        window = ResultsWindow(lower=lower, upper=upper)
    except ValidationError as e:
        field, message = _first_error(e)
        # Window-level errors are reported against the upper bound field.
        field = field or "upper"
        logger.warning(f"Results window rejected: {message}")
        return ResultsView(ok=False, field=field, message=message)

    rows = tuple(
        ResultRow(
            rank=p.rank,
            bib=p.bib,
            name=p.name,
            finish_time=_format_finish(p),
        )
        for p in registry.query(window.lower_seconds, window.upper_seconds)
    )
    return ResultsView(ok=True, rows=rows)
