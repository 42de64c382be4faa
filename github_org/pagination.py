"""Link-header pagination over REST collection endpoints."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from .errors import PaginationLimitError, UnexpectedResponseError

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 100

# Link values are separated by commas, but URLs may contain commas too
LINK_SEPARATOR = re.compile(r",\s*(?=<)")


def extract_next_from_link(link_header: Optional[str]) -> Optional[str]:
    """Return the URL of the ``rel="next"`` segment of a Link header, if any."""
    if not link_header:
        return None
    for part in LINK_SEPARATOR.split(link_header):
        url_part, _, params = part.partition(";")
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip().lower() != "rel":
                continue
            if value.strip().strip('"') == "next":
                return url_part.strip().strip("<>")
    return None


async def fetch_paginated(
    api_client,
    path: str,
    per_page: int = DEFAULT_PER_PAGE,
    max_pages: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Fetch every page of a collection, following ``rel="next"`` links.

    ``per_page`` is only sent with the first request; the next-page URLs
    the server advertises already carry it. Items keep page order and
    within-page order.

    Raises:
        UnexpectedResponseError: A page body is not a JSON array
        PaginationLimitError: More than ``max_pages`` pages were advertised
    """
    all_items: List[Dict[str, Any]] = []
    next_url: Optional[str] = path
    params: Optional[Dict[str, Any]] = {"per_page": per_page}
    pages_fetched = 0

    while next_url:
        if max_pages is not None and pages_fetched >= max_pages:
            raise PaginationLimitError(f"{path}: still advertising a next page after {max_pages} pages")

        response = await api_client.get(next_url, params=params)
        pages_fetched += 1
        payload = response.json()
        if not isinstance(payload, list):
            raise UnexpectedResponseError(f"{path}: expected a JSON array on page {pages_fetched}")
        all_items.extend(payload)

        next_url = extract_next_from_link(response.header("Link"))
        params = None
        logger.debug("%s page %d: %d items (next=%s)", path, pages_fetched, len(payload), bool(next_url))

    return all_items
