from cachetools import TTLCache
from typing import Any, Callable
import threading, logging

logger = logging.getLogger(__name__)

class ViewCache:

    def __init__ ( self, maxsize: int = 128, ttl: float = 300 ):

        self.lock  = threading.Lock()
        self.store = TTLCache(maxsize=maxsize, ttl=ttl)

    def key ( self, value: str ):

        return '/' + str(value or '').strip().strip('/')

    def get ( self, key: str, default: Any = None ):

        with self.lock: return self.store.get(self.key(key), default)

    def put ( self, key: str, value: Any ):

        with self.lock: self.store[self.key(key)] = value
        return value

    def remember ( self, key: str, fn: Callable ):

        cached = self.get(key)
        if cached is not None: return cached

        return self.put(key, fn())

    def has ( self, key: str ):

        with self.lock: return self.key(key) in self.store

    def invalidate ( self, key: str ):

        with self.lock: removed = self.store.pop(self.key(key), None) is not None

        logger.debug("view cache invalidated: %s (cached=%s)", self.key(key), removed)
        return removed

    def clear ( self ):

        with self.lock: self.store.clear()
        return True
