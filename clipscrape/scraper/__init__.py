"""Scraper package — classify, navigate, extract & normalise."""

from clipscrape.scraper.extractor import extract_fields
from clipscrape.scraper.models import (
    LocatorTimeoutError,
    NormalizedRow,
    RawFieldSet,
    ScrapeError,
)
from clipscrape.scraper.navigator import BrowserSession
from clipscrape.scraper.normalizer import normalize, parse_duration, strip_literals
from clipscrape.scraper.schema import FIELDS, FieldSpec
from clipscrape.scraper.urls import clean_url, is_target_host, is_valid_url

__all__ = [
    "BrowserSession",
    "FIELDS",
    "FieldSpec",
    "LocatorTimeoutError",
    "NormalizedRow",
    "RawFieldSet",
    "ScrapeError",
    "clean_url",
    "extract_fields",
    "is_target_host",
    "is_valid_url",
    "normalize",
    "parse_duration",
    "strip_literals",
]
