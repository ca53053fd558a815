"""Deduplicating batch driver for address -> country resolution."""

from addresscountry.batch.batchapi import (
    resolve_queries,
    resolve_dataframe,
    summarize_resolutions,
)
from addresscountry.batch.ratelimit import MinIntervalThrottle

__all__ = [
    "resolve_queries",
    "resolve_dataframe",
    "summarize_resolutions",
    "MinIntervalThrottle",
]
