import functools
import logging
from typing import Callable, TypeVar

from sqlalchemy import String, cast, or_

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataFetchError(RuntimeError):
    """A query failed; the message is safe to show, the cause is only logged."""


def fetch_guard(message: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Wrap a query function so any failure is logged with its cause and
    re-raised as ``DataFetchError(message)``.
    """

    def decorator(fn: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs) -> T:
            try:
                return fn(*args, **kwargs)
            except Exception:
                logger.exception(f"Database Error: {message}")
                raise DataFetchError(message) from None

        return wrapper

    return decorator


def search_pattern(query: str) -> str:
    return f"%{query}%"


def matches_any(pattern: str, *columns):
    """Case-insensitive partial match of a bound pattern against any column, cast to text."""
    return or_(*(cast(column, String).ilike(pattern) for column in columns))
