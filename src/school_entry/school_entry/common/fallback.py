from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, TypeVar

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def demo_fallback(fallback: Callable[..., T]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Run the store-backed operation; on StorageError, serve ``fallback`` instead.

    ``fallback`` receives exactly the arguments of the wrapped call (``self``
    included for methods) and must return a result marked as demo-sourced.
    Any other exception propagates unchanged.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except StorageError:
                logger.exception("%s: storage unavailable, serving demo data", func.__qualname__)
                return fallback(*args, **kwargs)

        return wrapper

    return decorator
