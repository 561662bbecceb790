import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec('P')
T = TypeVar('T')


global_logger = logging.getLogger('bandit')


def log_errors(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.ERROR,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Log exceptions raised during function execution.

    :param Logger | None logger: Logger to use.
        Default is the global logger.
    :param int level: logging level to log messages under. Default is ERROR.
    """
    local_logger = logger or global_logger

    def _decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def _wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                local_logger.log(
                    level,
                    f'{func.__name__}(args: {args}, kwargs: {kwargs}): {e}',
                )
                raise

        return _wrapper

    return _decorator


def log_time(func: Callable[P, T]) -> Callable[P, T]:
    """Log real time elapsed by function call."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start_time = time.time()
        try:
            return func(*args, **kwargs)
        finally:
            end_time = time.time()
            global_logger.debug(
                f'{func.__name__} took {end_time - start_time:.2f} seconds'
            )

    return wrapper
