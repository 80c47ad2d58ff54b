"""
Caching for catalog metadata lookups.

Each metadata source owns its caches, so entries never outlive the source
or leak to another connection. Uses cachetools TTLCache for automatic
expiration.
"""
import functools
import inspect
import logging
import threading

import cachetools
from cachetools.keys import hashkey

logger = logging.getLogger(__name__)

__all__ = ['cacheable_metadata', 'clear_metadata_cache']

_lock = threading.RLock()


def _get_cache(source, name: str, maxsize: int, ttl: int) -> cachetools.TTLCache:
    """Get or create the named TTL cache stored on `source`."""
    with _lock:
        caches = source.__dict__.setdefault('_metadata_caches', {})
        if name not in caches:
            caches[name] = cachetools.TTLCache(maxsize=maxsize, ttl=ttl)
        return caches[name]


def clear_metadata_cache(source, table: str | None = None) -> None:
    """Clear a source's cached lookups, or only those for `table`.

    Table names match exactly; quoted PostgreSQL identifiers are case
    sensitive.
    """
    with _lock:
        for cache in source.__dict__.get('_metadata_caches', {}).values():
            if table is None:
                cache.clear()
                continue
            for key in [key for key in list(cache.keys()) if key[-1] == table]:
                cache.pop(key, None)
                logger.debug(f'Cleared cache entry {key} for table {table}')


def cacheable_metadata(cache_name: str, ttl: int = 300, maxsize: int = 50):
    """Decorator for caching metadata source lookups.

    Arguments are bound to the method signature, so positional and keyword
    calls share an entry. The last parameter is the table name. Respects a
    `bypass_cache` keyword to skip the cache lookup.

    Args:
        cache_name: Name of the cache on the source
        ttl: Time-to-live in seconds
        maxsize: Maximum cache size
    """
    def decorator(method):
        signature = inspect.signature(method)

        @functools.wraps(method)
        def wrapper(self, *args, bypass_cache=False, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            lookup = tuple(bound.arguments.values())[1:]

            if bypass_cache:
                logger.debug(f'Bypassing cache for {method.__name__}{lookup}')
                return method(*bound.args, **bound.kwargs)

            cache = _get_cache(self, cache_name, maxsize, ttl)
            cache_key = hashkey(*lookup)

            with _lock:
                if cache_key in cache:
                    logger.debug(f'Cache hit for {method.__name__}{lookup}')
                    return cache[cache_key]

            logger.debug(f'Cache miss for {method.__name__}{lookup}')
            result = method(*bound.args, **bound.kwargs)
            with _lock:
                cache[cache_key] = result
            return result

        return wrapper
    return decorator
