"""Candidate URL dedup, normalization against the site origin, and validation."""

import logging
from typing import Iterable, List, Tuple
from urllib.parse import urlparse

import httpx

logger = logging.getLogger("ncl_scraper")


def dedupe(items: Iterable[str]) -> List[str]:
    """Keep the first occurrence of each string, preserving order."""
    seen = set()
    unique = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique


def has_host(url: str) -> bool:
    try:
        return urlparse(url).netloc != ""
    except ValueError:
        return False


def normalize_url(url: str, base_url: str) -> str:
    """Prefix path-only references with the site origin; absolute URLs pass through."""
    if has_host(url):
        return url
    base = base_url.rstrip("/")
    if url.startswith("/"):
        return base + url
    return f"{base}/{url}"


def is_valid_url(url: str) -> bool:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError):
        return False
    return bool(parsed.scheme) and bool(parsed.host)


def normalize_candidates(candidates: Iterable[str], base_url: str) -> Tuple[List[str], int]:
    """Dedupe, absolutize and validate candidates.

    Returns (urls, invalid_count). Invalid URLs are dropped and logged, never raised.
    """
    urls = []
    invalid = 0
    for candidate in dedupe(candidates):
        url = normalize_url(candidate, base_url)
        if not is_valid_url(url):
            invalid += 1
            logger.warning(f"Dropping malformed URL: {url!r}")
            continue
        urls.append(url)
    return urls, invalid
