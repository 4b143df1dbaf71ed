"""Declarative description of the fields scraped from a course landing page.

Each :class:`FieldSpec` ties a field name to its CSS selector, whether the
page is allowed to omit it, and the literal substrings removed from its text
during normalisation.  When the site markup changes, this table is the only
place that needs editing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldSpec:
    name: str
    selector: str
    optional: bool = False
    strip: Tuple[str, ...] = ()


_INSTRUCTOR_STATS = (
    ".instructor--instructor__image-and-stats--6Nbsa > .ud-unstyled-list"
    " > li:nth-child({n}) > div > div"
)

# Order matters: it is the extraction order and the order of RawFieldSet.
FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        "title",
        "div.course-landing-page__main-content > div > h1",
    ),
    FieldSpec(
        "duration",
        "span[data-purpose='video-content-length']",
    ),
    # Only the first listed skill is taken.
    FieldSpec(
        "skill",
        "#main-content-anchor > div.paid-course-landing-page__body > div > "
        "div.topic-navigation-module--topic-navigation--wCbdV > ul > "
        "li:nth-child(1) > a > span",
        optional=True,
    ),
    FieldSpec(
        "rating",
        ".star-rating-module--rating-number--2-qA2",
    ),
    FieldSpec(
        "rating_count",
        "div.clp-lead__element-item.clp-lead__element-item--row > a > span:nth-child(2)",
        strip=(" ratings", "(", ")"),
    ),
    FieldSpec(
        "students",
        ".enrollment",
        strip=(" students",),
    ),
    FieldSpec(
        "last_updated",
        "div.clp-lead__element-meta > div:nth-child(1) > div > span",
        strip=("Last updated ",),
    ),
    FieldSpec(
        "instructor_rating",
        _INSTRUCTOR_STATS.format(n=1),
        strip=(" Instructor Rating",),
    ),
    FieldSpec(
        "instructor_reviews",
        _INSTRUCTOR_STATS.format(n=2),
        strip=(" Reviews",),
    ),
    FieldSpec(
        "instructor_students",
        _INSTRUCTOR_STATS.format(n=3),
        strip=(" Students",),
    ),
    FieldSpec(
        "instructor_courses",
        _INSTRUCTOR_STATS.format(n=4),
        strip=(" Courses",),
    ),
)


def get_field(name: str) -> FieldSpec:
    """Return the :class:`FieldSpec` called *name*.

    Raises:
        KeyError: If no field has that name.
    """
    for spec in FIELDS:
        if spec.name == name:
            return spec
    raise KeyError(name)
