"""
Thread-safe rate-limited logging.

Rendering a gallery can fall back to the local generator for every token in
it; this keeps one warning per distinct message per interval.
"""
import logging
import threading
from typing import Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 60
MAX_TRACKED_MESSAGES = 100

_caches = {}
_caches_lock = threading.RLock()


def _cache_for(interval: int) -> TTLCache:
    with _caches_lock:
        cache = _caches.get(interval)
        if cache is None:
            cache = TTLCache(maxsize=MAX_TRACKED_MESSAGES, ttl=interval)
            _caches[interval] = cache
        return cache


def rate_limited_log(
    message: str,
    level: str = "warning",
    interval: int = DEFAULT_INTERVAL,
    logger_instance: Optional[logging.Logger] = None,
) -> bool:
    """
    Log a message at most once per interval.

    Args:
        message: Message to log
        level: Log level (debug, info, warning, error, critical)
        interval: Minimum interval between identical logs in seconds
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the message was logged, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.warning)
    key = f"{log_instance.name}:{level}:{message}"

    cache = _cache_for(interval)
    with _caches_lock:
        if key in cache:
            return False
        cache[key] = True

    log_method(message)
    return True


def reset() -> None:
    """Forget every logged message."""
    with _caches_lock:
        for cache in _caches.values():
            cache.clear()
