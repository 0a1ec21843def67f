import math

ITEMS_PER_PAGE = 6


def page_offset(page: int) -> int:
    """Row offset for a 1-based page. Pages below 1 are treated as page 1."""
    return (max(page, 1) - 1) * ITEMS_PER_PAGE


def total_pages(count: int) -> int:
    return math.ceil(count / ITEMS_PER_PAGE)
