"""
Decorator Utilities.

Provides syntactic sugar for common patterns.
"""
import functools
from typing import Callable, TypeVar

F = TypeVar('F', bound=Callable)


def synchronized(method: F) -> F:
    """
    Decorator to run a method while holding the instance lock.

    The owning class must provide ``self._lock`` (a ``threading.RLock``
    so synchronized methods may call each other).

    Usage:
        class Controller:
            def __init__(self):
                self._lock = threading.RLock()

            @synchronized
            def select(self, item_id):
                ...
    """
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper  # type: ignore[return-value]
