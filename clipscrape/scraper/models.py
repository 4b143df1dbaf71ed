"""Data models for the scrape pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

ROW_WIDTH = 16


class ScrapeError(Exception):
    """Raised when a scrape attempt cannot produce a row."""


class LocatorTimeoutError(ScrapeError):
    """A required page element did not appear within the lookup timeout."""

    def __init__(self, selector: str, timeout: float) -> None:
        self.selector = selector
        self.timeout = timeout
        super().__init__(
            f"Couldn't find {selector}. Timed out after {timeout:g} seconds."
        )


@dataclass
class RawFieldSet:
    """Text values extracted from one landing page, keyed by field name.

    Insertion order follows the field schema, so ``values()`` is positionally
    aligned with :data:`clipscrape.scraper.schema.FIELDS`.
    """

    fields: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> str:
        return self.fields[name]

    def values(self) -> List[str]:
        return list(self.fields.values())


@dataclass
class NormalizedRow:
    """The fixed-width spreadsheet row written back to the clipboard."""

    cells: List[str]

    def __post_init__(self) -> None:
        if len(self.cells) != ROW_WIDTH:
            raise ValueError(
                f"A normalized row has exactly {ROW_WIDTH} cells, got {len(self.cells)}"
            )

    def to_tsv(self) -> str:
        """Join the cells with tabs; spreadsheets treat each tab as a new column."""
        return "\t".join(self.cells)
