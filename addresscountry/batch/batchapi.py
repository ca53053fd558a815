"""Batch address -> country resolution over pandas DataFrames.

Records are deduplicated on their normalized address query before any
provider call, so each distinct address costs exactly one request no matter
how many rows share it. Results are joined back onto every original row.

Usage:
    from addresscountry.batch import resolve_dataframe

    out = resolve_dataframe(
        df,
        ["address_line_1", "address_line_2", "address_line_3"],
        max_workers=4,
        min_interval=0.05,
    )
    review = out[out["country_needs_review"]]
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Optional, Sequence, Union

import pandas as pd

from addresscountry.batch.ratelimit import MinIntervalThrottle
from addresscountry.countries.countrycodes import convert_country_code
from addresscountry.geocoding.addressnormalize import (
    build_address_query,
    normalize_address_query,
)
from addresscountry.geocoding.geocodeapi import get_default_resolver
from addresscountry.geocoding.geocodeidentity import AddressCountryResolver
from addresscountry.geocoding.geocodetypes import ResolvedAddress, STATUS_EMPTY_QUERY

logger = logging.getLogger(__name__)


def _query_key(value) -> str:
    return normalize_address_query(build_address_query([value]))


def _object_column(values: list, index: pd.Index) -> pd.Series:
    # Absent values stay None, not NaN, on every pandas version
    return pd.Series(values, index=index, dtype=object)


def resolve_queries(
    queries: Iterable[str],
    *,
    resolver: Optional[AddressCountryResolver] = None,
    max_workers: int = 1,
    min_interval: float = 0.0,
) -> Dict[str, ResolvedAddress]:
    """Resolve each distinct normalized query exactly once.

    Args:
        queries: Address queries, duplicates and blanks allowed
        resolver: Optional resolver; defaults to get_default_resolver()
        max_workers: Number of concurrent provider calls (1 = sequential)
        min_interval: Minimum seconds between request starts, across workers

    Returns:
        Dict mapping normalized query -> ResolvedAddress. Blank queries map
        to an EMPTY_QUERY result and are never sent.

    Raises:
        MissingAPIKeyError: If no resolver is given and no API key is configured
        ValueError: If max_workers < 1 or min_interval < 0

    Examples:
        >>> results = resolve_queries(["Cra. 13 #8525 BogotáColombia",
        ...                            "Cra. 13 8525 BogotaColombia"])  # doctest: +SKIP
        >>> list(results)                                               # doctest: +SKIP
        ['Cra. 13 8525 BogotaColombia']
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")
    throttle = MinIntervalThrottle(min_interval)

    # Fail on configuration before any request is made
    resolver = resolver if resolver is not None else get_default_resolver()

    total = 0
    unique: Dict[str, None] = {}
    for q in queries:
        total += 1
        unique.setdefault(_query_key(q), None)

    results: Dict[str, ResolvedAddress] = {}
    pending = []
    for key in unique:
        if key:
            pending.append(key)
        else:
            results[key] = ResolvedAddress(key, key, None, STATUS_EMPTY_QUERY)

    logger.info(f"Resolving {len(pending)} unique address queries ({total} input)")

    def resolve_one(key: str) -> ResolvedAddress:
        throttle.wait()
        return resolver.resolve_address(key)

    if max_workers == 1 or len(pending) <= 1:
        for key in pending:
            results[key] = resolve_one(key)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            for key, resolved in zip(pending, pool.map(resolve_one, pending)):
                results[key] = resolved

    found = sum(1 for key in pending if results[key].found)
    logger.info(f"Resolved country for {found}/{len(pending)} unique queries")
    return results


def resolve_dataframe(
    df: pd.DataFrame,
    address_columns: Union[str, Sequence[str]],
    *,
    resolver: Optional[AddressCountryResolver] = None,
    sep: str = " ",
    max_workers: int = 1,
    min_interval: float = 0.0,
    iso3: bool = False,
    prefix: str = "country",
) -> pd.DataFrame:
    """Add country columns to a DataFrame of free-text address records.

    The address-line columns of each row are concatenated into one query,
    queries are deduplicated on their normalized form, each unique query is
    resolved once, and results are joined back onto every row.

    Args:
        df: Input records (not modified)
        address_columns: Column(s) holding the raw address lines, in order
        resolver: Optional resolver; defaults to get_default_resolver()
        sep: Separator used when joining address lines
        max_workers: Number of concurrent provider calls (1 = sequential)
        min_interval: Minimum seconds between request starts, across workers
        iso3: Also add an ISO 3166-1 alpha-3 column
        prefix: Prefix for the added column names

    Returns:
        Copy of df with added columns:
          - {prefix}_query: normalized query used for the lookup
          - {prefix}_name: country long name (None if absent)
          - {prefix}_code: country short code, ISO alpha-2 (None if absent)
          - {prefix}_status: OK, NO_COUNTRY, ZERO_RESULTS, REQUEST_FAILED, ...
          - {prefix}_needs_review: True where no country was found
          - {prefix}_iso3: alpha-3 code (only if iso3=True)

    Raises:
        ValueError: If an address column is missing from df
        MissingAPIKeyError: If no resolver is given and no API key is configured
    """
    if isinstance(address_columns, str):
        address_columns = [address_columns]
    columns = list(address_columns)
    if not columns:
        raise ValueError("At least one address column is required")
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Missing address columns: {missing}")

    out = df.copy()
    keys = [
        normalize_address_query(build_address_query(row, sep=sep))
        for row in out[columns].itertuples(index=False, name=None)
    ]

    results = resolve_queries(
        keys,
        resolver=resolver,
        max_workers=max_workers,
        min_interval=min_interval,
    )
    resolved = [results[k] for k in keys]

    out[f"{prefix}_query"] = keys
    codes = [r.country.short_code if r.found else None for r in resolved]
    out[f"{prefix}_name"] = _object_column([r.country.long_name if r.found else None for r in resolved], out.index)
    out[f"{prefix}_code"] = _object_column(codes, out.index)
    out[f"{prefix}_status"] = [r.status for r in resolved]
    out[f"{prefix}_needs_review"] = [r.needs_review for r in resolved]
    if iso3:
        out[f"{prefix}_iso3"] = _object_column([convert_country_code(c, to="ISO3") for c in codes], out.index)

    review = int(out[f"{prefix}_needs_review"].sum())
    if review:
        logger.info(f"{review}/{len(out)} records need manual country review")
    return out


def summarize_resolutions(df: pd.DataFrame, prefix: str = "country") -> pd.DataFrame:
    """Count records per resolution status (for review triage).

    Args:
        df: Output of resolve_dataframe
        prefix: Column prefix used in resolve_dataframe

    Returns:
        DataFrame with columns status, count; most frequent first

    Examples:
        >>> summarize_resolutions(out)  # doctest: +SKIP
                 status  count
        0            OK     97
        1  ZERO_RESULTS      2
        2    NO_COUNTRY      1
    """
    col = f"{prefix}_status"
    if col not in df.columns:
        raise ValueError(f"Missing column {col!r}; run resolve_dataframe first")
    return df[col].value_counts().rename_axis("status").reset_index(name="count")


__all__ = [
    "resolve_queries",
    "resolve_dataframe",
    "summarize_resolutions",
]
