"""
Pagination - page counts, page-number normalization and button windows

A requested page past the last page is not an error: it is passed to the
listing query unchanged and simply yields no rows.

Page window (more than 7 pages):
    [1, …, current-1, current, current+1, …, last]
with the middle run clamped to [2, last-1] and an ellipsis only where
pages are actually skipped.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from jobboard.services.filters import parse_optional_int

ELLIPSIS = "ellipsis"
MAX_PAGES_WITHOUT_ELLIPSIS = 7

# Keeps (page - 1) * page_size within a 64-bit OFFSET for any sane page size
MAX_PAGE = 2 ** 31 - 1

PageItem = Union[int, str]


def total_pages(total_items: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(max(total_items, 0) / page_size)


def normalize_page(raw: Any) -> int:
    """
    Turn a raw page parameter into a usable page number.

    The leading integer is used ("2.5" -> 2, "3abc" -> 3). Absent or
    non-numeric input becomes 1; zero and negatives are clamped to 1.
    Pages past the last one are kept, but numbers above ``MAX_PAGE``
    are malformed and also become 1.
    """
    page = parse_optional_int(raw, max_value=MAX_PAGE)
    if page is None:
        return 1
    return max(1, page)


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def page_window(current_page: int, pages: int) -> List[PageItem]:
    """
    Page-number buttons to show for ``current_page`` out of ``pages``.

    Example:
        >>> page_window(5, 10)
        [1, 'ellipsis', 4, 5, 6, 'ellipsis', 10]
    """
    if pages <= MAX_PAGES_WITHOUT_ELLIPSIS:
        return list(range(1, pages + 1))

    start = max(2, current_page - 1)
    end = min(pages - 1, current_page + 1)

    window: List[PageItem] = [1]
    if start > 2:
        window.append(ELLIPSIS)
    window.extend(range(start, end + 1))
    if end < pages - 1:
        window.append(ELLIPSIS)
    window.append(pages)
    return window


@dataclass
class Pagination:
    """Navigation descriptor for a paginated list."""

    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    previous_page: Optional[int]
    next_page: Optional[int]
    pages: List[PageItem] = field(default_factory=list)

    @property
    def offset(self) -> int:
        return page_offset(self.current_page, self.page_size)

    @property
    def is_paginated(self) -> bool:
        """Navigation controls are only shown when there is more than one page."""
        return self.total_pages > 1


def paginate(total_items: int, page_size: int, current_page: Any = 1) -> Pagination:
    page = normalize_page(current_page)
    pages = total_pages(total_items, page_size)

    return Pagination(
        current_page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=pages,
        previous_page=page - 1 if page > 1 else None,
        next_page=page + 1 if pages > 0 and page < pages else None,
        pages=page_window(page, pages),
    )
