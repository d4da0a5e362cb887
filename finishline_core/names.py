"""Display-name normalisation for participants."""
from __future__ import annotations


def _capitalize_segment(segment: str) -> str:
    if not segment:
        return segment
    # title() on the single boundary char keeps e.g. "ß" -> "Ss" stable on re-format.
    return segment[0].title() + segment[1:]


def format_name(raw: str) -> str:
    """Lower-case the name, then capitalise the start of every space- or hyphen-separated part.

    "anne-lise holm" -> "Anne-Lise Holm". Consecutive delimiters are kept as-is.
    """
    return " ".join(
        "-".join(_capitalize_segment(part) for part in word.split("-"))
        for word in raw.lower().split(" ")
    )
