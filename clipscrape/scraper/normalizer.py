"""Turn a :class:`RawFieldSet` into the 16-cell spreadsheet row."""

from __future__ import annotations

import math
import sys
from typing import Iterable, Tuple

from clipscrape.config import settings
from clipscrape.scraper.models import NormalizedRow, RawFieldSet
from clipscrape.scraper.schema import get_field

DURATION_SUFFIX = " hours on-demand video"
NOT_A_NUMBER = "NaN"

# Level cannot be read from the landing page; calc-minutes is a sheet formula.
LEVEL_PLACEHOLDER = " "
CALC_MINUTES_PLACEHOLDER = ""


def strip_literals(text: str, literals: Iterable[str]) -> str:
    """Remove each literal substring from *text*, in order.

    Plain ``str.replace``; a literal that is not present is a no-op.
    """
    for literal in literals:
        text = text.replace(literal, "")
    return text


def parse_duration(text: str) -> Tuple[str, str]:
    """Split ``"X hours on-demand video"`` into ``(hours, minutes)`` cells.

    ``"3.5 hours on-demand video"`` gives ``("3", "30")``.

    Courses of one hour or less are reported as ``"1 hour ..."`` or
    ``"45 mins ..."`` which do not parse; both cells are then ``"NaN"``.
    This is a known gap, kept visible in the sheet rather than guessed at.
    """
    try:
        value = float(text.replace(DURATION_SUFFIX, ""))
    except ValueError:
        value = math.nan

    if math.isnan(value) or math.isinf(value):
        print(
            f"[SCRAPE] Could not parse course length {text!r}; writing {NOT_A_NUMBER}.",
            file=sys.stderr,
        )
        return NOT_A_NUMBER, NOT_A_NUMBER

    hours = math.floor(value)
    minutes = math.floor(value % 1 * 60)
    return str(hours), str(minutes)


def hyperlink(url: str) -> str:
    """Spreadsheet formula linking back to the course page."""
    return f'=HYPERLINK("{url}", "Link")'


def _clean(raw: RawFieldSet, name: str) -> str:
    return strip_literals(raw[name], get_field(name).strip)


def normalize(url: str, raw: RawFieldSet) -> NormalizedRow:
    """Build the spreadsheet row for the course at *url* from *raw* fields."""
    hours, minutes = parse_duration(raw["duration"])
    return NormalizedRow(
        cells=[
            hyperlink(url),
            settings.row_label,
            raw["title"],
            LEVEL_PLACEHOLDER,
            hours,
            minutes,
            CALC_MINUTES_PLACEHOLDER,
            raw["skill"],
            raw["rating"],
            _clean(raw, "rating_count"),
            _clean(raw, "students"),
            _clean(raw, "last_updated"),
            _clean(raw, "instructor_rating"),
            _clean(raw, "instructor_reviews"),
            _clean(raw, "instructor_students"),
            _clean(raw, "instructor_courses"),
        ]
    )
