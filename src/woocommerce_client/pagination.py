"""
Pagination extraction from WooCommerce collection responses

WooCommerce reports totals in the X-WP-Total / X-WP-TotalPages headers and
links to neighbouring pages in an RFC 5988 Link header:

    Link: <https://example.com/wp-json/wc/v3/products?page=2>; rel="next",
          <https://example.com/wp-json/wc/v3/products?page=3>; rel="last"

https://woocommerce.github.io/woocommerce-rest-api-docs/#pagination
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from .errors import PaginationUnavailableError, ResponseDecodingError
from .query import ListOptions

logger = logging.getLogger(__name__)

TOTAL_HEADER = "X-Wp-Total"
TOTAL_PAGES_HEADER = "X-Wp-Totalpages"
LINK_HEADER = "Link"

LINK_PATTERN = re.compile(r'^ *<([^>]+)>; rel="(prev|next|first|last)" *$')

RELATION_SLOTS = {
    "next": "next_page_options",
    "prev": "previous_page_options",
    "first": "first_page_options",
    "last": "last_page_options",
}


@dataclass
class Pagination:
    """Totals and page cursors for a collection response"""
    total: int = 1
    total_pages: int = 1
    next_page_options: Optional[ListOptions] = None
    previous_page_options: Optional[ListOptions] = None
    first_page_options: Optional[ListOptions] = None
    last_page_options: Optional[ListOptions] = None

    @property
    def has_next(self) -> bool:
        return self.next_page_options is not None


def _header_count(headers: Mapping, name: str) -> int:
    """Read a non-negative count header, assuming a single page when unusable"""
    value = headers.get(name)
    try:
        count = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return count if count >= 0 else 1


def extract_pagination(headers: Mapping, strict: bool = False) -> Optional[Pagination]:
    """
    Extract pagination info from response headers

    Args:
        headers: Response headers (case-insensitive mapping)
        strict: Raise instead of returning None when a Link segment is malformed

    Returns:
        Pagination with totals and any cursors found, or None when the Link
        header contains a segment that cannot be interpreted

    Raises:
        PaginationUnavailableError: In strict mode, for a malformed Link segment
        ResponseDecodingError: If a link URL or its page parameter is invalid
    """
    pagination = Pagination(
        total=_header_count(headers, TOTAL_HEADER),
        total_pages=_header_count(headers, TOTAL_PAGES_HEADER),
    )

    link_header = headers.get(LINK_HEADER) or ""
    if not link_header:
        return pagination

    for link in link_header.split(","):
        match = LINK_PATTERN.match(link)
        if match is None:
            message = f"could not extract pagination link header from {link_header}"
            if strict:
                raise PaginationUnavailableError(message=message)
            logger.warning(f"Pagination unavailable: {message}")
            return None

        url, relation = match.groups()
        try:
            query = urlsplit(url).query
        except ValueError as e:
            raise ResponseDecodingError(message="pagination does not contain a valid URL") from e

        page_options = ListOptions()
        page = parse_qs(query).get("page")
        if page and page[0]:
            try:
                page_options.page = int(page[0])
            except ValueError as e:
                raise ResponseDecodingError(message=f"invalid page in pagination link: {page[0]!r}") from e

        setattr(pagination, RELATION_SLOTS[relation], page_options)

    return pagination
