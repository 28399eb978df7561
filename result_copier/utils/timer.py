from functools import wraps
from logging import getLogger
import time


logger = getLogger("TIMER")


def timer(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.monotonic()
        try:
            return func(*args, **kwargs)
        finally:
            logger.info(
                "The %s function is finished in %.4f seconds", func.__qualname__, time.monotonic() - start_time
            )

    return wrapper
