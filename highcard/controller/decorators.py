"""
Decorators for controller layer functionality.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

F = TypeVar('F', bound=Callable[..., Any])


def logged_action(action_name: Optional[str] = None):
    """
    Decorator to log controller actions through the instance's ``_logger``.

    Start and completion are logged at DEBUG; a failure is logged at ERROR and
    the exception is re-raised unchanged.

    Args:
        action_name: Name used in the log lines; defaults to the function name.

    Example:
        @logged_action("play round")
        def play_round(self) -> RoundResult:
            ...
    """
    def decorator(func: F) -> F:
        name = action_name or func.__name__

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            if logger:
                logger.debug("Starting %s", name)
            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    logger.error("Failed %s: %s", name, e)
                raise
            if logger:
                logger.debug("Completed %s", name)
            return result

        return wrapper
    return decorator
